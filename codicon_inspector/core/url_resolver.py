"""
Resource-Path Resolver

Rewrites ``url()`` references in a stylesheet from paths relative to the
stylesheet's original location into embeddable absolute references.

When the literal relative path is missing, a fixed set of nearby font
directories and common TrueType filenames is searched; the first existing
file wins. References that cannot be found are left untouched.
"""

from __future__ import annotations

import base64
import mimetypes
import posixpath
import re
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from .font_discovery import TARGET_FONT_SUFFIX
from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "Linker",
    "file_uri_linker",
    "data_uri_linker",
    "get_linker",
    "find_resource",
    "rewrite_urls",
]

Linker = Callable[[Path], str]

_URL_PATTERN = re.compile(r"url\(\s*['\"]?([^'\")\s]+)['\"]?\s*\)")
_SKIP_PREFIXES = ("http", "data:")
_SEARCH_SUBDIRS = (".", "fonts", "../fonts", "assets")
_COMMON_FONT_NAMES = ("codicon.ttf", "codicons.ttf", "vscode-codicons.ttf")

# Font types mimetypes does not know on every platform
_FONT_MIME_TYPES = {
    ".woff2": "font/woff2",
    ".woff": "font/woff",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",
}


def file_uri_linker(path: Path) -> str:
    return path.resolve().as_uri()


def data_uri_linker(path: Path) -> str:
    """Inline the file as a base64 ``data:`` URI."""
    mime = _FONT_MIME_TYPES.get(path.suffix.lower())
    if mime is None:
        mime, _ = mimetypes.guess_type(str(path))
    if mime is None:
        mime = "application/octet-stream"
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{payload}"


_LINKERS = {"file": file_uri_linker, "data": data_uri_linker}


def get_linker(name: str) -> Linker:
    try:
        return _LINKERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown linker '{name}' (expected one of {sorted(_LINKERS)})"
        ) from None


def _strip_query(reference: str) -> str:
    return re.split(r"[?#]", reference, maxsplit=1)[0]


def _candidate_paths(css_dir: Path, reference: str) -> Iterator[Path]:
    filename = posixpath.basename(reference)
    stem, suffix = posixpath.splitext(filename)

    yield css_dir / reference

    for subdir in _SEARCH_SUBDIRS:
        font_dir = css_dir / subdir
        yield font_dir / filename
        if suffix.lower() != TARGET_FONT_SUFFIX:
            yield font_dir / f"{stem}{TARGET_FONT_SUFFIX}"
        for common in _COMMON_FONT_NAMES:
            yield font_dir / common
        yield font_dir / f"{stem}{TARGET_FONT_SUFFIX}"


def find_resource(css_dir: Path, reference: str) -> Optional[Path]:
    """Return the first existing file for ``reference`` relative to ``css_dir``."""
    cleaned = _strip_query(reference)
    if not cleaned:
        return None
    try:
        found = next((p for p in _candidate_paths(css_dir, cleaned) if p.is_file()), None)
    except OSError as exc:
        log.debug("Error searching for %s: %s", reference, exc)
        return None
    if found is None:
        return None
    return found.resolve()


def rewrite_urls(
    css_text: str,
    stylesheet_path: Union[str, Path],
    linker: Linker = file_uri_linker,
) -> str:
    """Rewrite every relative ``url()`` in ``css_text`` through ``linker``.

    ``http``/``data:`` references are never modified. Each reference is
    resolved on its own against the stylesheet's directory; a reference
    that cannot be found (or linked) keeps its original token.
    """

    css_dir = Path(stylesheet_path).parent

    def _replace(match: "re.Match[str]") -> str:
        reference = match.group(1)
        if reference.startswith(_SKIP_PREFIXES):
            return match.group(0)

        found = find_resource(css_dir, reference)
        if found is None:
            log.warning("Font file not found: %s (relative to %s)", reference, css_dir)
            return match.group(0)

        try:
            embedded = linker(found)
        except OSError as exc:
            log.warning("Failed to embed %s: %s", found, exc)
            return match.group(0)

        log.debug("Resource resolved: %s -> %s", reference, found)
        return f"url('{embedded}')"

    return _URL_PATTERN.sub(_replace, css_text)
