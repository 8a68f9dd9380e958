"""
Tests for searching the icon catalog the way the inspector's search box does.
"""

import pytest

from codicon_inspector.core.models import IconCatalog

CATALOG = IconCatalog.from_names(
    ["arrow-down", "arrow-up", "chat-sparkle", "github", "github-action", "home"]
)


def test_empty_term_returns_everything():
    assert CATALOG.search("   ") == list(CATALOG.names)


def test_plain_substring_is_case_insensitive():
    assert CATALOG.search("ARROW") == ["arrow-down", "arrow-up"]


def test_spaces_become_dashes():
    assert CATALOG.search("arrow down") == ["arrow-down"]


def test_separators_removed():
    assert CATALOG.search("git hub") == ["github", "github-action"]


@pytest.mark.parametrize("term", ["sparkle chat", "sparkle  chat"])
def test_all_words_in_any_order(term):
    assert CATALOG.search(term) == ["chat-sparkle"]


def test_no_match():
    assert CATALOG.search("arrow home") == []
