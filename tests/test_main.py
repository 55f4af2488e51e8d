import pytest
from rich.prompt import Prompt

import main
from conftest import HARRY_POTTER, make_books_db
from core.errors import DataStoreError


@pytest.fixture
def use_db(monkeypatch, tmp_path):
    def install(rows):
        db_path = make_books_db(tmp_path / "bookratings.sqlite", rows)
        monkeypatch.setattr(main, "load_profile_config", lambda args=None: {"adapter": "sqlite", "database": str(db_path)})
        return db_path
    return install


@pytest.fixture
def answers(monkeypatch):
    def install(*lines):
        remaining = list(lines)
        monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: remaining.pop(0))
        return remaining
    return install


def test_multiple_matches_select_second(use_db, answers, capsys):
    use_db(HARRY_POTTER + [(7, "Dune")])
    answers("harry", "2")
    main.main([])
    out = capsys.readouterr().out
    assert "There are multiple book titles containing that string." in out
    assert out.strip().endswith("book_id = 5")


def test_single_match_exits_1(use_db, answers, capsys):
    use_db(HARRY_POTTER + [(7, "Dune")])
    answers("  Dune  ")
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 1
    assert "I'm sorry, but there are not any matching books." in capsys.readouterr().out


def test_no_match_exits_1(use_db, answers, capsys):
    use_db(HARRY_POTTER)
    answers("zzzzznotabook")
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "not any matching books" in out
    assert "book_id" not in out


def test_empty_input_reprompts_before_query(use_db, answers, capsys):
    use_db(HARRY_POTTER)
    remaining = answers("", "   ", "potter", "")
    main.main([])
    assert remaining == []
    out = capsys.readouterr().out
    assert out.count("Value must be provided.") == 2
    assert out.strip().endswith("book_id = 3")


def test_missing_database_propagates(monkeypatch, answers, tmp_path):
    monkeypatch.setattr(main, "load_profile_config", lambda args=None: {"database": str(tmp_path / "gone.sqlite")})
    answers("harry")
    with pytest.raises(DataStoreError):
        main.main([])


def test_help_exits_0(capsys):
    with pytest.raises(SystemExit) as exc:
        main.main(["--help"])
    assert exc.value.code == 0
    assert "--profile" in capsys.readouterr().out


def test_find_book_id_with_custom_select(books_conn, scripted):
    seen = []

    def select(choices):
        seen.extend(choices)
        return choices[-1].value

    book_id = main.find_book_id(books_conn, ask=scripted("HARRY potter"), select=select)
    assert book_id == 1
    assert [c.value for c in seen] == [3, 5, 1]


def test_verbose_run_logs_to_profile_path(monkeypatch, answers, tmp_path, capsys):
    from core import log_utils
    db_path = make_books_db(tmp_path / "bookratings.sqlite", HARRY_POTTER)
    log_file = tmp_path / "logs" / "book_search.txt"
    profile = {"adapter": "sqlite", "database": str(db_path), "log_path": str(log_file)}
    monkeypatch.setattr(main, "load_profile_config", lambda args=None: profile)
    answers("goblet")
    try:
        with pytest.raises(SystemExit):
            main.main(["--verbose"])
    finally:
        log_utils.set_log_path(None)
    text = log_file.read_text(encoding="utf-8")
    assert "[START] Opening book database" in text
    assert "1 matching rows, selected book_id: None" in text
    assert "[END] Closed book database" in text
