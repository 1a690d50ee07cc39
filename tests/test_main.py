# tests/test_main.py

"""Tests for command-line routing between the TUI and the CLI."""

import unittest
from unittest.mock import patch

import main


class TestWantsTui(unittest.TestCase):
    """wants_tui decision for various command lines."""

    def _wants_tui(self, argv: list[str]) -> bool:
        parser = main._build_parser()
        return main.wants_tui(parser, parser.parse_args(argv))

    def test_bare_invocation_opens_tui(self) -> None:
        self.assertTrue(self._wants_tui([]))

    def test_search_term_runs_cli(self) -> None:
        self.assertFalse(self._wants_tui(["hoodie"]))

    def test_headless_flag_runs_cli(self) -> None:
        self.assertFalse(self._wants_tui(["--headless"]))

    def test_filter_or_selection_options_run_cli(self) -> None:
        """Options without a search term are not silently dropped."""
        for argv in (
            ["--select", "A"],
            ["--select-all"],
            ["--sort", "price-asc"],
            ["-c", "Merchandise"],
            ["--currency", "BDT"],
            ["-m", "500"],
            ["-f", "tsv"],
            ["--catalog", "other.json"],
        ):
            with self.subTest(argv=argv):
                self.assertFalse(self._wants_tui(argv))

    def test_explicit_defaults_still_open_tui(self) -> None:
        self.assertTrue(self._wants_tui(["--sort", "recommended"]))


class TestMainRouting(unittest.TestCase):
    """main() dispatches to the right front end."""

    def test_select_without_search_uses_cli(self) -> None:
        with (
            patch("main._run_tui") as run_tui,
            patch("main._run_cli") as run_cli,
        ):
            main.main(["--select", "A"])
        run_tui.assert_not_called()
        run_cli.assert_called_once()
        self.assertEqual(run_cli.call_args[0][0].select, "A")

    def test_no_arguments_uses_tui(self) -> None:
        with (
            patch("main._run_tui") as run_tui,
            patch("main._run_cli") as run_cli,
        ):
            main.main([])
        run_tui.assert_called_once()
        run_cli.assert_not_called()


if __name__ == "__main__":
    unittest.main()
