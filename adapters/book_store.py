"""
adapters/book_store.py | Book Database Adapter
Purpose: Open and close the read-only connection to the book ratings database
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: None
Behavior: One connection per run, opened from the active profile and handed to the search explicitly.
The connection is always closed when the with-block exits, including on errors.
"""

import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from core.errors import DataStoreError
from core.log_utils import log_event

SUPPORTED_ADAPTERS = ("sqlite",)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_unicode_lower(conn: sqlite3.Connection) -> None:
    """Replace SQLite's ASCII-only lower() with Python's str.lower on this connection."""
    conn.create_function("lower", 1, _unicode_lower, deterministic=True)


@contextmanager
def open_book_store(profile_config: dict, verbose: bool = False):
    """
    Purpose: Provide a read-only sqlite3 connection for the duration of a with-block
    Inputs:
        profile_config (dict): Active profile with 'adapter' and 'database' keys
        verbose (bool): Enable verbose logging
    Outputs:
        conn (sqlite3.Connection): Open connection (yielded)
    Role: Scoped acquisition of the data store; raises DataStoreError if it cannot be reached
    """
    adapter = profile_config.get("adapter", "sqlite")
    if adapter not in SUPPORTED_ADAPTERS:
        raise DataStoreError(f"Unsupported database adapter '{adapter}'. Supported: {', '.join(SUPPORTED_ADAPTERS)}")

    db_path = Path(profile_config["database"])
    log_event(f"[START] Opening book database at {db_path}", verbose)
    if not db_path.exists():
        log_event(f"[ERROR] SQLite database not found at {db_path}", verbose)
        raise DataStoreError(f"Book database not found at {db_path}")

    try:
        conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as e:
        log_event(f"[ERROR] Could not connect to {db_path}: {e}", verbose)
        raise DataStoreError(f"Could not connect to book database at {db_path}: {e}") from e
    register_unicode_lower(conn)

    start_time = time.time()
    try:
        yield conn
    finally:
        conn.close()
        log_event(f"[END] Closed book database ({time.time() - start_time:.2f} seconds open)", verbose)
