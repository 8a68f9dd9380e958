"""
Tests for url() rewriting into embeddable references.
"""

import pytest

from codicon_inspector.core.url_resolver import (
    data_uri_linker,
    file_uri_linker,
    find_resource,
    get_linker,
    rewrite_urls,
)


def _uri(path):
    return path.resolve().as_uri()


def test_remote_and_data_urls_are_never_modified(tmp_path):
    css_path = tmp_path / "codicon.css"
    (tmp_path / "codicon.ttf").write_bytes(b"")
    css = (
        '@font-face { src: url("https://example.com/codicon.ttf"); }\n'
        "@font-face { src: url(http://example.com/codicon.ttf); }\n"
        ".x { background: url(data:font/ttf;base64,AAEAAA==); }"
    )

    assert rewrite_urls(css, css_path) == css


def test_literal_relative_path_is_rewritten(tmp_path):
    css_path = tmp_path / "codicon.css"
    font = tmp_path / "codicon.ttf"
    font.write_bytes(b"")
    css = 'src: url("./codicon.ttf") format("truetype");'

    result = rewrite_urls(css, css_path)

    assert result == f"src: url('{_uri(font)}') format(\"truetype\");"


def test_missing_reference_is_searched_in_fonts_directory(tmp_path):
    css_path = tmp_path / "codicon.css"
    (tmp_path / "fonts").mkdir()
    font = tmp_path / "fonts" / "codicon.ttf"
    font.write_bytes(b"")
    css = "src: url('../dist/codicon.woff2') format('woff2');"

    result = rewrite_urls(css, css_path)

    assert f"url('{_uri(font)}')" in result


def test_parent_fonts_directory_is_searched(tmp_path):
    css_dir = tmp_path / "css"
    css_dir.mkdir()
    (tmp_path / "fonts").mkdir()
    font = tmp_path / "fonts" / "vscode-codicons.ttf"
    font.write_bytes(b"")

    assert find_resource(css_dir, "icons.woff") == font.resolve()


def test_exact_name_preferred_over_ttf_substitute(tmp_path):
    (tmp_path / "codicon.woff").write_bytes(b"")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "codicon.ttf").write_bytes(b"")

    found = find_resource(tmp_path, "missing/codicon.woff")

    assert found == (tmp_path / "codicon.woff").resolve()


def test_ttf_substitute_before_common_names(tmp_path):
    (tmp_path / "seti.ttf").write_bytes(b"")
    (tmp_path / "codicon.ttf").write_bytes(b"")

    assert find_resource(tmp_path, "dist/seti.woff2") == (tmp_path / "seti.ttf").resolve()


def test_query_string_is_ignored_for_lookup(tmp_path):
    font = tmp_path / "codicon.ttf"
    font.write_bytes(b"")
    css = 'src: url("./codicon.ttf?5d4d76ab2ce5108968ad644d591a16a6") format("truetype");'

    result = rewrite_urls(css, tmp_path / "codicon.css")

    assert f"url('{_uri(font)}')" in result


def test_unresolvable_reference_is_left_unchanged(tmp_path):
    css = "src: url(./nowhere/unknown.svg);"

    assert rewrite_urls(css, tmp_path / "codicon.css") == css


def test_each_url_resolved_independently(tmp_path):
    font = tmp_path / "seti.ttf"
    font.write_bytes(b"")
    image = tmp_path / "logo.png"
    image.write_bytes(b"")
    css = (
        ".a { src: url('seti.ttf'); }\n"
        ".b { background: url(logo.png); }\n"
        ".c { background: url(missing.gif); }"
    )

    result = rewrite_urls(css, tmp_path / "codicon.css")

    assert f".a {{ src: url('{_uri(font)}'); }}" in result
    assert f".b {{ background: url('{_uri(image)}'); }}" in result
    assert ".c { background: url(missing.gif); }" in result


def test_data_uri_linker_inlines_file(tmp_path):
    font = tmp_path / "codicon.ttf"
    font.write_bytes(b"\x00\x01\x00\x00")

    assert data_uri_linker(font) == "data:font/ttf;base64,AAEAAA=="

    result = rewrite_urls("src: url(codicon.ttf);", tmp_path / "codicon.css", data_uri_linker)
    assert result == "src: url('data:font/ttf;base64,AAEAAA==');"


def test_get_linker():
    assert get_linker("file") is file_uri_linker
    assert get_linker("data") is data_uri_linker
    with pytest.raises(ValueError):
        get_linker("webview")


def test_common_font_name_used_when_nothing_else_matches(tmp_path):
    font = tmp_path / "codicon.ttf"
    font.write_bytes(b"")

    result = rewrite_urls("src: url(dist/icons.woff);", tmp_path / "index.css")

    assert result == f"src: url('{_uri(font)}');"


def test_whitespace_inside_url_parentheses(tmp_path):
    font = tmp_path / "codicon.ttf"
    font.write_bytes(b"")
    css = 'src: url( "./codicon.ttf" ) format("truetype");'

    result = rewrite_urls(css, tmp_path / "codicon.css")

    assert result == f"src: url('{_uri(font)}') format(\"truetype\");"


def test_data_uri_linker_guesses_non_font_types(tmp_path):
    image = tmp_path / "logo.png"
    image.write_bytes(b"\x89PNG")
    blob = tmp_path / "glyphs.unknownext"
    blob.write_bytes(b"\x00")

    assert data_uri_linker(image).startswith("data:image/png;base64,")
    assert data_uri_linker(blob).startswith("data:application/octet-stream;base64,")
