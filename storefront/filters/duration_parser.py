# storefront/filters/duration_parser.py

"""Turn free-text fulfillment times into comparable hour counts.

Catalog entries describe lead times as prose ("24 hours",
"2-3 days", "Ships in 5 days from Dhaka"). The sorter needs a number,
so the first ``<n>[-<m>] <unit>`` occurrence is extracted and averaged.
Text without such a pattern maps to infinity and sorts last.
"""

import logging
import math
import re

logger = logging.getLogger("storefront.duration_parser")

_HOURS_PER_DAY = 24

#   "24 hours" -> (24, None, "hour")   "2-3 days" -> (2, 3, "day")
_DURATION_RE = re.compile(
    r"(\d+)(?:-(\d+))?\s*(hour|day)",
    re.IGNORECASE | re.ASCII,
)


def parse_hours(text: str) -> float:
    """Return the average duration in hours described by *text*.

    Returns ``math.inf`` when no duration pattern is found.
    """
    match = _DURATION_RE.search(text)
    if match is None:
        logger.debug("No duration found in %r", text)
        return math.inf

    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    average = (low + high) / 2

    if match.group(3).lower().startswith("day"):
        return average * _HOURS_PER_DAY
    return average
