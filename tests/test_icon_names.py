"""
Tests for icon-name extraction and its fallback catalog.
"""

import pytest

from codicon_inspector.core.errors import ParseYieldsNothing
from codicon_inspector.core.extractors import (
    ContentSelectorExtractor,
    CustomPropertyExtractor,
    DataAttributeExtractor,
    SelectorExtractor,
    default_extractors,
)
from codicon_inspector.core.fallback_catalog import FALLBACK_ICON_NAMES
from codicon_inspector.core.icon_names import (
    SKIP_PREFIXES,
    collect_icon_names,
    extract_icon_names,
    is_valid_icon_name,
)

MIXED_CSS = """
.codicon-add:before { content: "\\ea60" }
.codicon-gear::before { content: "\\eaf8" }
.codicon-add::before { content: "\\ea60" }
.codicon-codicon:before { content: "x" }
.codicon-modifier-disabled:before { opacity: 0.4 }
.codicon-loading::before { content: "\\eb19" }
.codicon-pulse:before {}
.codicon-rotate-90:before {}
.codicon-flip-y::before {}
.codicon-animation-slow:before {}
[data-codicon="bell"] { color: red; }
:root { --codicon-zap: "\\ea86"; --codicon-modifier-x: 1; }
"""


def test_single_selector_with_content():
    catalog = extract_icon_names('.codicon-home::before{content:"\\ea1b"}')

    assert catalog.names == ("home",)
    assert catalog.is_fallback is False


def test_denylisted_prefix_is_excluded():
    catalog = extract_icon_names(".codicon-spin-extra::before{} .codicon-add:before{}")

    assert "spin-extra" not in catalog
    assert catalog.names == ("add",)


def test_all_forms_unioned_sorted_and_filtered():
    catalog = extract_icon_names(MIXED_CSS)

    assert catalog.names == ("add", "bell", "gear", "zap")


def test_output_invariants_hold():
    names = extract_icon_names(MIXED_CSS).names

    assert list(names) == sorted(set(names))
    for name in names:
        assert name != "codicon"
        assert not name.startswith(tuple(SKIP_PREFIXES))


def test_garbage_returns_fallback_catalog():
    catalog = extract_icon_names("this is { not : css ;; at all")

    assert catalog.is_fallback is True
    assert len(catalog) > 0
    assert catalog.names == tuple(sorted(set(FALLBACK_ICON_NAMES)))


def test_collect_raises_when_nothing_found():
    with pytest.raises(ParseYieldsNothing):
        collect_icon_names(".codicon-modifier-spin:before {}")


def test_custom_prefix():
    css = ".seti-folder:before { content: '\\e001' } .codicon-add:before {}"

    assert extract_icon_names(css, prefix="seti").names == ("folder",)


def test_explicit_extractor_list():
    catalog = extract_icon_names(MIXED_CSS, extractors=[DataAttributeExtractor()])

    assert catalog.names == ("bell",)


@pytest.mark.parametrize(
    "name, valid",
    [
        ("home", True),
        ("arrow_up-2", True),
        ("", False),
        ("codicon", False),
        ("spinner", False),
        ("modifier-disabled", False),
        ("has space", False),
    ],
)
def test_is_valid_icon_name(name, valid):
    assert is_valid_icon_name(name) is valid


class TestExtractors:
    """Each extractor recognises exactly its own declaration form."""

    def test_selector_extractor_accepts_both_colon_forms(self):
        css = ".codicon-a:before{} .codicon-b::before{} .codicon-c:hover{}"

        assert list(SelectorExtractor().scan(css)) == ["a", "b"]

    def test_content_extractor_requires_content(self):
        css = '.codicon-a::before { color: red } .codicon-b:before {\n  content: "\\eb01";\n}'

        assert list(ContentSelectorExtractor().scan(css)) == ["b"]

    def test_data_attribute_extractor(self):
        css = '[data-codicon="account"]::before {} [data-other="x"] {}'

        assert list(DataAttributeExtractor().scan(css)) == ["account"]

    def test_custom_property_extractor(self):
        css = "--codicon-close: '\\ea76'; --other-x: 1; --codicon-add : 2;"

        assert list(CustomPropertyExtractor().scan(css)) == ["close"]

    def test_default_extractors_share_prefix(self):
        extractors = default_extractors("seti")

        assert len(extractors) == 4
        assert {e.prefix for e in extractors} == {"seti"}
