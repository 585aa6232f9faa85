"""DOM snapshot parsing, ranked field resolution and incremental loading"""

from .selectors import Locator, first_of, first_text, first_attr
from .loader import collect_until_limit, scroll_and_wait_for_more, trim_to_limit
from .transcript import derive_durations, parse_timestamp

__all__ = [
    "Locator",
    "first_of",
    "first_text",
    "first_attr",
    "collect_until_limit",
    "scroll_and_wait_for_more",
    "trim_to_limit",
    "derive_durations",
    "parse_timestamp",
]
