"""
Icon-Name Extractor

Runs every extractor over the stylesheet text, filters the candidates
through the same validity check, and returns a sorted catalog. A stylesheet
that yields nothing falls back to the built-in codicon list so the caller
always has something to show.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, Set

from .errors import ParseYieldsNothing
from .extractors import BaseNameExtractor, default_extractors
from .fallback_catalog import FALLBACK_ICON_NAMES
from .logger import get_logger
from .models import IconCatalog

log = get_logger(__name__)

__all__ = [
    "DEFAULT_PREFIX",
    "SKIP_PREFIXES",
    "is_valid_icon_name",
    "collect_icon_names",
    "extract_icon_names",
    "fallback_catalog",
]

DEFAULT_PREFIX = "codicon"

# Utility, modifier and animation classes that share the icon prefix.
SKIP_PREFIXES: Sequence[str] = (
    "modifier-",
    "animation-",
    "spin",
    "pulse",
    "loading",
    "rotate",
    "flip",
)

_VALID_NAME = re.compile(r"^[a-zA-Z0-9_-]+$")


def is_valid_icon_name(name: str, prefix: str = DEFAULT_PREFIX) -> bool:
    if not name or name == prefix:
        return False
    if not _VALID_NAME.match(name):
        return False
    return not name.startswith(tuple(SKIP_PREFIXES))


def collect_icon_names(
    css_text: str,
    prefix: str = DEFAULT_PREFIX,
    extractors: Optional[Iterable[BaseNameExtractor]] = None,
) -> Set[str]:
    """
    Union the valid names found by every extractor.

    Raises:
        ParseYieldsNothing: when no extractor produced a valid name
    """
    names: Set[str] = set()
    for extractor in extractors if extractors is not None else default_extractors(prefix):
        names.update(n for n in extractor.scan(css_text) if is_valid_icon_name(n, prefix))
    if not names:
        raise ParseYieldsNothing(f"No '{prefix}' icons found in stylesheet text")
    return names


def fallback_catalog() -> IconCatalog:
    return IconCatalog.from_names(FALLBACK_ICON_NAMES, is_fallback=True)


def extract_icon_names(
    css_text: str,
    prefix: str = DEFAULT_PREFIX,
    extractors: Optional[Iterable[BaseNameExtractor]] = None,
) -> IconCatalog:
    """Extract the icon catalog from ``css_text``; never empty."""
    try:
        names = collect_icon_names(css_text, prefix, extractors)
    except ParseYieldsNothing as exc:
        log.warning("%s, falling back to built-in list", exc)
        return fallback_catalog()

    catalog = IconCatalog.from_names(names)
    log.info("Extracted %s icons from CSS", len(catalog))
    log.debug("Sample icons: %s", ", ".join(catalog.names[:10]))
    return catalog
