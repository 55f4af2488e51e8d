"""
core/disambiguate.py | Result Disambiguation
Purpose: Turn matched book rows into a choice list and resolve them to a single book id
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: None
Behavior: A selection prompt is only shown when more than one row matches. Zero rows and exactly one row
both resolve to None, which the caller reports as "no matching books". A single match is never auto-selected.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

MULTIPLE_MATCHES_MESSAGE = "There are multiple book titles containing that string."
NO_MATCHES_MESSAGE = "I'm sorry, but there are not any matching books."


@dataclass(frozen=True)
class Choice:
    name: str
    value: Any


def build_choices(rows: list) -> List[Choice]:
    """
    Purpose: Build the choice list shown to the user
    Inputs: rows (list) - Row dictionaries from core.book_search.search_titles
    Outputs: choices (list[Choice]) - One (title, id) choice per row, in row order
    """
    return [Choice(name=row["title"], value=row["id"]) for row in rows]


def needs_selection(rows: list) -> bool:
    return len(rows) > 1


def resolve_book_id(rows: list, select: Callable[[List[Choice]], Any]) -> Optional[Any]:
    """
    Purpose: Resolve search results to one book id
    Inputs:
        rows (list): Matching rows, ordered by title
        select (callable): Receives the choice list, blocks for the user, returns the chosen value
    Outputs:
        book_id or None: The selected id, or None when fewer than two rows matched
    Role: Count-based branch between the query and the output step
    """
    # TODO: decide whether a single match should be auto-selected instead of reported as not found
    if not needs_selection(rows):
        return None
    return select(build_choices(rows))
