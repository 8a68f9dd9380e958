from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Union

from .font_discovery import discover_font_assets
from .logger import get_logger
from .models import FontAsset

log = get_logger(__name__)

__all__ = ["rewrite_font_format", "choose_font_for_family"]

_FONT_FACE_PATTERN = re.compile(r"@font-face\s*\{[^}]*\}", re.DOTALL)
_FONT_FAMILY_PATTERN = re.compile(r"font-family:\s*[\"']?([^\"';}\n]+)[\"']?", re.IGNORECASE)

_FONT_FACE_TEMPLATE = """@font-face {{
    font-family: "{family}";
    src: url("./{filename}") format("{format}");
    font-weight: normal;
    font-style: normal;
}}"""


def choose_font_for_family(family: str, fonts: List[FontAsset]) -> Optional[FontAsset]:
    """First font whose name contains ``family`` (case-insensitive), else the first font."""
    if not fonts:
        return None
    needle = family.lower()
    for font in fonts:
        if needle in font.name.lower():
            return font
    return fonts[0]


def rewrite_font_format(css_text: str, font_dir: Union[str, Path]) -> str:
    """Regenerate every ``@font-face`` block to point at a discovered TrueType file.

    Blocks are replaced whole, so alternate-format sources and any other
    declarations in the original block are dropped. Blocks without a
    ``font-family`` are left as they are. Without any font in ``font_dir``
    the text is returned unchanged.
    """

    fonts = discover_font_assets(font_dir)
    if not fonts:
        log.warning("No TTF files found in %s", font_dir)
        return css_text

    log.debug("Found TTF files: %s", ", ".join(f.name for f in fonts))

    def _replace(match: "re.Match[str]") -> str:
        block = match.group(0)
        family_match = _FONT_FAMILY_PATTERN.search(block)
        if not family_match:
            return block
        family = family_match.group(1).strip()
        font = choose_font_for_family(family, fonts)
        log.debug("font-face '%s' -> %s", family, font.name)
        return _FONT_FACE_TEMPLATE.format(family=family, filename=font.name, format=font.format)

    return _FONT_FACE_PATTERN.sub(_replace, css_text)
