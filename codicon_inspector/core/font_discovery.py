"""
Font Discoverer

Lists the font files that sit next to a stylesheet. Only one format is
targeted per pass (TrueType by default); read errors give an empty result.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .logger import get_logger
from .models import FontAsset

log = get_logger(__name__)

TARGET_FONT_SUFFIX = ".ttf"


def list_fonts(directory: Union[str, Path], extension: str = TARGET_FONT_SUFFIX) -> List[str]:
    """
    List font filenames in ``directory`` matching ``extension``.

    Args:
        directory: Directory to scan (not recursive)
        extension: Font suffix to match, case-insensitively

    Returns:
        Sorted filenames, or an empty list if the directory cannot be read
    """
    wanted = extension.lower()
    try:
        names = [
            entry.name
            for entry in Path(directory).iterdir()
            if entry.name.lower().endswith(wanted)
        ]
    except OSError as exc:
        log.debug("Error reading %s for %s files: %s", directory, wanted, exc)
        return []
    return sorted(names)


def discover_font_assets(
    directory: Union[str, Path], extension: str = TARGET_FONT_SUFFIX
) -> List[FontAsset]:
    """Same listing as :func:`list_fonts`, as :class:`FontAsset` records."""
    base = Path(directory)
    return [FontAsset(base / name) for name in list_fonts(base, extension)]
