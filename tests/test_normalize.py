import pytest
from core.normalize import collapse, down, normalize_query, trim


def test_default_chain_trims_collapses_and_lowercases():
    assert normalize_query("  Harry \t  POTTER\n and  ") == "harry potter and"


def test_dune_example():
    assert normalize_query("  Dune  ") == "dune"


def test_individual_filters():
    assert trim("  a b  ") == "a b"
    assert collapse("a \t\n b") == "a b"
    assert down("ÉCOLE Abc") == "école abc"


@pytest.mark.parametrize("raw", ["", "   ", "  Foo   BAR ", "x\ty\nz", "ALREADY normal"])
def test_default_chain_is_idempotent(raw):
    once = normalize_query(raw)
    assert normalize_query(once) == once


def test_whitespace_only_normalizes_to_empty():
    assert normalize_query(" \t\n ") == ""
    assert normalize_query(None) == ""


def test_filter_subset_and_order():
    assert normalize_query("  A  B  ", ("trim",)) == "A  B"
    assert normalize_query("  A  B  ", ("collapse", "down")) == " a b "


def test_unknown_filter_rejected():
    with pytest.raises(ValueError):
        normalize_query("abc", ("trim", "reverse"))
