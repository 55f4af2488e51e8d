import sqlite3
import pytest
from adapters.book_store import open_book_store

HARRY_POTTER = [
    (1, "Harry Potter and the Sorcerer's Stone"),
    (3, "Harry Potter and the Chamber of Secrets"),
    (5, "Harry Potter and the Goblet of Fire"),
]

OTHER_BOOKS = [
    (7, "Dune"),
    (8, "Ender's Game"),
    (9, "100% Pure"),
    (10, "100 Pure Things"),
    (11, "snake_case for Beginners"),
    (12, "Snake-case Unleashed"),
    (13, "Back\\slash Stories"),
]


def make_books_db(path, rows):
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE books (id INTEGER PRIMARY KEY, title TEXT, rating REAL)")
    conn.executemany("INSERT INTO books (id, title) VALUES (?, ?)", rows)
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def books_db_path(tmp_path):
    return make_books_db(tmp_path / "bookratings.sqlite", HARRY_POTTER + OTHER_BOOKS)


@pytest.fixture
def books_conn(books_db_path):
    with open_book_store({"adapter": "sqlite", "database": str(books_db_path)}) as conn:
        yield conn


@pytest.fixture
def scripted():
    """Returns a factory for ask() callables that replay answers in order."""
    def factory(*answers):
        remaining = list(answers)
        prompts = []

        def ask(message):
            prompts.append(message)
            return remaining.pop(0)

        ask.prompts = prompts
        ask.remaining = remaining
        return ask
    return factory
