"""
adapters/terminal_prompt.py | Terminal Prompt Adapter
Purpose: Required free-text prompt and filterable, paginated single-select list for the book search CLI
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: rich
Behavior: Both prompts read one line at a time through rich.prompt.Prompt. The select list accepts a shown
number to pick an entry, an empty line to pick the first entry on the page, '>' and '<' to page, '/' to clear
the filter, and any other text to filter titles (case-insensitive substring).
"""

from typing import Any, Callable, Iterable, List, Optional, Tuple
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from core.disambiguate import Choice
from core.normalize import DEFAULT_FILTERS, normalize_query

SEARCH_PROMPT = "Enter a string to search for a book by title."
SELECT_PROMPT = "Which book? (type to search, enter to select) "
REQUIRED_MESSAGE = "Value must be provided."
DEFAULT_PER_PAGE = 10

NEXT_PAGE = ">"
PREV_PAGE = "<"
CLEAR_FILTER = "/"


def _default_ask(console: Console) -> Callable[[str], str]:
    def ask(message: str) -> str:
        return Prompt.ask(message, console=console)
    return ask


def ask_required(
    message: str = SEARCH_PROMPT,
    filters: Iterable[str] = DEFAULT_FILTERS,
    ask: Optional[Callable[[str], str]] = None,
    console: Optional[Console] = None,
) -> str:
    """
    Purpose: Ask for a non-empty free-text answer, normalizing it with the given filters
    Inputs:
        message (str): Prompt text
        filters (iterable of str): Normalization filter names (see core.normalize)
        ask (callable): Reads one answer for a prompt; defaults to rich Prompt.ask
        console (Console): Output console for the re-prompt notice
    Outputs:
        answer (str): The first normalized answer that is not empty
    Role: Input collector. Loops until the user enters something; EOF and Ctrl-C propagate.
    """
    console = console or Console()
    ask = ask or _default_ask(console)
    filters = tuple(filters)
    while True:
        answer = normalize_query(ask(message), filters)
        if answer:
            return answer
        console.print(f"[red]{REQUIRED_MESSAGE}[/red]")


class ChoicePager:
    """Filter and page state for a single-select list. Holds no I/O."""

    def __init__(self, choices: List[Choice], per_page: int = DEFAULT_PER_PAGE):
        if per_page < 1:
            raise ValueError("per_page must be at least 1")
        self.choices = list(choices)
        self.per_page = per_page
        self.filter_text = ""
        self.visible = list(self.choices)
        self.page = 0

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self.visible) // self.per_page))

    def apply_filter(self, text: str) -> bool:
        """Narrow the list to titles containing text. Returns False and keeps the old filter on no match."""
        needle = text.strip().lower()
        matches = [c for c in self.choices if needle in str(c.name).lower()]
        if not matches:
            return False
        self.filter_text = needle
        self.visible = matches
        self.page = 0
        return True

    def clear_filter(self) -> None:
        self.filter_text = ""
        self.visible = list(self.choices)
        self.page = 0

    def next_page(self) -> None:
        self.page = min(self.page + 1, self.page_count - 1)

    def prev_page(self) -> None:
        self.page = max(self.page - 1, 0)

    def current_page(self) -> List[Tuple[int, Choice]]:
        start = self.page * self.per_page
        window = self.visible[start:start + self.per_page]
        return [(start + offset + 1, choice) for offset, choice in enumerate(window)]

    def pick(self, number: int) -> Optional[Choice]:
        for shown, choice in self.current_page():
            if shown == number:
                return choice
        return None


def render_page(pager: ChoicePager, console: Console) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(justify="right", style="cyan")
    table.add_column()
    for number, choice in pager.current_page():
        table.add_row(str(number), escape(str(choice.name)))
    console.print(table)
    footer = f"Page {pager.page + 1}/{pager.page_count}"
    if pager.filter_text:
        footer += f"  filter: '{escape(pager.filter_text)}'"
    console.print(f"[dim]{footer}  ({NEXT_PAGE} next, {PREV_PAGE} prev, {CLEAR_FILTER} clear filter)[/dim]")


def select_choice(
    message: str,
    choices: List[Choice],
    per_page: int = DEFAULT_PER_PAGE,
    filter: bool = True,
    ask: Optional[Callable[[str], str]] = None,
    console: Optional[Console] = None,
) -> Any:
    """
    Purpose: Let the user pick exactly one entry from a labeled choice list
    Inputs:
        message (str): Prompt text shown under each page
        choices (list[Choice]): Entries to choose from (label = name, returned value = value)
        per_page (int): Entries per page
        filter (bool): Whether free text narrows the list
        ask (callable): Reads one line; defaults to rich Prompt.ask
        console (Console): Output console
    Outputs:
        value: The value of the selected Choice
    Role: Disambiguation surface. Blocks until a selection is made.
    """
    if not choices:
        raise ValueError("select_choice needs at least one choice")
    console = console or Console()
    ask = ask or _default_ask(console)
    pager = ChoicePager(choices, per_page=per_page)

    while True:
        render_page(pager, console)
        answer = ask(message).strip()

        if not answer:
            return pager.current_page()[0][1].value
        if answer == NEXT_PAGE:
            pager.next_page()
            continue
        if answer == PREV_PAGE:
            pager.prev_page()
            continue
        if answer == CLEAR_FILTER:
            pager.clear_filter()
            continue
        if answer.isdigit():
            picked = pager.pick(int(answer))
            if picked is not None:
                return picked.value
        if filter:
            if not pager.apply_filter(answer):
                console.print(f"[yellow]No titles match '{escape(answer)}'.[/yellow]")
        else:
            console.print("[yellow]Enter one of the numbers shown.[/yellow]")
