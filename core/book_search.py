"""
core/book_search.py | Book Title Search Module
Purpose: Search the books table for titles containing a normalized search string
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: pandas
Behavior: Runs one read-only, parameterized query against an open connection and returns every matching row
as a dictionary, ordered by title. LIKE wildcards typed by the user are escaped so they match literally.
"""

import sqlite3
import time
import pandas as pd
from pandas.errors import DatabaseError
from core.errors import DataStoreError
from core.log_utils import log_event

LIKE_ESCAPE = "\\"

TITLE_SEARCH_SQL = (
    "SELECT * FROM books "
    "WHERE lower(title) LIKE ? ESCAPE '\\' "
    "ORDER BY title"
)


def build_like_pattern(search_query: str) -> str:
    """
    Purpose: Turn a search string into a substring LIKE pattern
    Inputs: search_query (str) - normalized search text
    Outputs: pattern (str) - '%<escaped text>%'
    Role: Keeps '%', '_' and the escape character literal inside the bound parameter
    """
    escaped = (
        search_query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def search_titles(conn, search_query: str, verbose: bool = False) -> list:
    """
    Purpose: Find books whose lowercased title contains the search string
    Inputs:
        conn: Open DB-API connection to the book database
        search_query (str): Normalized (trimmed, collapsed, lowercased) search text
        verbose (bool): Enable verbose logging
    Outputs:
        results (list): List of row dictionaries with at least 'id' and 'title', ordered by title
    Role: Query executor between the input prompt and the disambiguation step
    """
    if not search_query:
        raise ValueError("[ERROR] Search query cannot be empty.")

    pattern = build_like_pattern(search_query)
    log_event(f"[START] Searching book titles for '{search_query}'", verbose)
    log_event(f"[STEP] Executing SQL query with pattern: '{pattern}'", verbose)
    start_time = time.time()

    try:
        df = pd.read_sql_query(TITLE_SEARCH_SQL, conn, params=(pattern,))
    except (sqlite3.Error, DatabaseError) as e:
        log_event(f"[ERROR] Title search failed: {e}", verbose)
        raise DataStoreError(f"Title search failed: {e}") from e

    missing = {"id", "title"} - set(df.columns)
    if missing:
        log_event(f"[ERROR] books table is missing columns: {sorted(missing)}", verbose)
        raise DataStoreError(f"books table is missing required columns: {', '.join(sorted(missing))}")

    results = df.to_dict(orient="records")
    execution_time = time.time() - start_time
    log_event(f"[END] Search complete. Found {len(results)} matching books ({execution_time:.4f} seconds)", verbose)
    return results
