"""
core/errors.py | Error Types
Purpose: Exceptions shared between the core search logic and the data-store adapter
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: None
"""


class DataStoreError(Exception):
    """Raised when the book database is unavailable or rejects a query."""
