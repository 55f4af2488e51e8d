"""
core/normalize.py | Search Input Normalization
Purpose: Named text filters applied to the raw title search string before it reaches the database
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: None
Behavior: Filters run in the order given. The default chain (trim, collapse, down) is idempotent.
"""

import re
from typing import Callable, Dict, Iterable, Optional

_WHITESPACE_RUN = re.compile(r"\s+")


def trim(text: str) -> str:
    return text.strip()


def collapse(text: str) -> str:
    # Runs of any whitespace (tabs, newlines) become one space
    return _WHITESPACE_RUN.sub(" ", text)


def down(text: str) -> str:
    return text.lower()


FILTERS: Dict[str, Callable[[str], str]] = {
    "trim": trim,
    "collapse": collapse,
    "down": down,
}

DEFAULT_FILTERS = ("trim", "collapse", "down")


def normalize_query(text: Optional[str], filters: Iterable[str] = DEFAULT_FILTERS) -> str:
    """
    Purpose: Apply named normalization filters to a raw search string
    Inputs:
        text (str | None): Raw user input; None is treated as an empty string
        filters (iterable of str): Filter names from FILTERS, applied in order
    Outputs:
        normalized (str): The filtered string (may be empty)
    Role: Pluggable input modification for the required search prompt
    """
    value = text or ""
    for name in filters:
        if name not in FILTERS:
            raise ValueError(f"[ERROR] Unknown input filter '{name}'. Available filters: {', '.join(FILTERS)}")
        value = FILTERS[name](value)
    return value
