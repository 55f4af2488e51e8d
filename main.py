"""
main.py | Entry Point
Purpose: Ask for a book title fragment, look it up in the book ratings database, and let the user pick one book.
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: pandas, rich, python-dotenv
Behavior: Normal use takes no arguments. Prints 'book_id = <id>' after a selection. When fewer than two titles
match, prints a not-found message and exits with status 1. Database faults are not caught here.
"""

import sys
import argparse
from typing import Optional
from dotenv import load_dotenv
from rich.console import Console

from adapters.book_store import open_book_store
from adapters.terminal_prompt import DEFAULT_PER_PAGE, SELECT_PROMPT, ask_required, select_choice
from core.book_search import search_titles
from core.disambiguate import MULTIPLE_MATCHES_MESSAGE, NO_MATCHES_MESSAGE, resolve_book_id
from core.errors import DataStoreError
from core.log_utils import configure_run_log, log_event
from ports.profile_loader import add_profile_arg, load_profile_config

load_dotenv()


def display_help(parser):
    """
    Purpose: Display help message with all available flags.
    Inputs: parser (argparse.ArgumentParser)
    Outputs: None (prints to console)
    """
    flag_actions = [action for action in parser._actions if action.option_strings]
    max_flag_length = max(len(action.option_strings[0]) for action in flag_actions) + 2

    print("\nBook Search - find a book id by title\n")
    print("USAGE:")
    print("  python main.py [FLAGS]\n")
    print("FLAGS:")
    for action in flag_actions:
        print(f"  {action.option_strings[0]:<{max_flag_length}} {action.help}")

    print("\nEXAMPLES:")
    print("  python main.py                      # Search the default book database")
    print("  python main.py --verbose            # Search and write process steps to the log file")
    print("  python main.py --profile staging    # Use a profile from user_inputs/db_profiles.json")
    print("  python main.py --help               # Display this help message and exit")
    print()


def find_book_id(conn, verbose: bool = False, ask=None, select=None, console: Optional[Console] = None):
    """
    Purpose: Run one search from prompt to selection against an open connection.
    Inputs:
        conn: Open book database connection
        verbose (bool): Enable verbose logging
        ask (callable): Line reader passed to the prompts; defaults to rich Prompt.ask
        select (callable): Replaces the interactive list; receives the choice list, returns a value
        console (Console): Output console for prompts and messages
    Outputs: book_id, or None when the search did not produce a selection
    Role: Collector -> executor -> disambiguator pipeline, with no process exit inside.
    """
    console = console or Console()
    title = ask_required(ask=ask, console=console)
    log_event(f"[STEP] Normalized search string: '{title}'", verbose)

    rows = search_titles(conn, title, verbose=verbose)

    def choose(choices):
        console.print(MULTIPLE_MATCHES_MESSAGE)
        if select is not None:
            return select(choices)
        return select_choice(SELECT_PROMPT, choices, per_page=DEFAULT_PER_PAGE, filter=True, ask=ask, console=console)

    book_id = resolve_book_id(rows, choose)
    log_event(f"[INFO] {len(rows)} matching rows, selected book_id: {book_id}", verbose)
    return book_id


def main(argv=None):
    """
    Purpose: CLI entry point for the book search.
    Inputs:
        --verbose: Write process steps to the profile's log file (or core/logs.txt)
        --profile: Database profile to use
        --help: Display help message and exit
    Outputs: None (prints book_id line; exits 1 when nothing is selected)
    """
    parser = argparse.ArgumentParser(description="Book Search", add_help=False)
    parser.add_argument("--verbose", action="store_true", help="Write process steps to the log file")
    parser.add_argument("--help", "-h", action="store_true", help="Display this help message and exit")
    add_profile_arg(parser)

    args = parser.parse_args(argv)

    if args.help:
        display_help(parser)
        sys.exit(0)

    profile_config = load_profile_config(args=args)
    configure_run_log(profile_config)

    try:
        with open_book_store(profile_config, verbose=args.verbose) as conn:
            book_id = find_book_id(conn, verbose=args.verbose)
    except DataStoreError as e:
        log_event(f"[ERROR] {e}", args.verbose)
        raise

    if book_id is None:
        print(NO_MATCHES_MESSAGE)
        sys.exit(1)

    # Demo output; downstream lookups would consume book_id here
    print(f"book_id = {book_id}")


if __name__ == "__main__":
    main()
