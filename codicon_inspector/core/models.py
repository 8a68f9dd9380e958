"""
Data carried through a single resolution pass.

Every pass builds its own chain of these objects; nothing here is shared or
mutated across passes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

FONT_FORMATS: Dict[str, str] = {
    ".ttf": "truetype",
    ".otf": "opentype",
    ".woff": "woff",
    ".woff2": "woff2",
}


class AssetSource(str, Enum):
    """Where the stylesheet of a pass came from."""

    BUNDLED = "bundled"
    LOCAL = "local"


@dataclass(frozen=True)
class StylesheetDocument:
    """Raw stylesheet text and the absolute path it was read from."""

    text: str
    path: Path

    @property
    def directory(self) -> Path:
        return self.path.parent

    @classmethod
    def read(cls, path: Path) -> "StylesheetDocument":
        """Read ``path`` as UTF-8. Raises ``OSError``/``UnicodeDecodeError``."""
        resolved = path.resolve()
        return cls(text=resolved.read_text(encoding="utf-8"), path=resolved)


@dataclass(frozen=True)
class FontAsset:
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def format(self) -> str:
        return FONT_FORMATS.get(self.path.suffix.lower(), "unknown")


@dataclass(frozen=True)
class IconCatalog:
    """Sorted, deduplicated icon names; ``is_fallback`` marks the built-in list."""

    names: Tuple[str, ...]
    is_fallback: bool = False

    @classmethod
    def from_names(cls, names: Iterable[str], *, is_fallback: bool = False) -> "IconCatalog":
        return cls(names=tuple(sorted(set(names))), is_fallback=is_fallback)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def search(self, term: str) -> List[str]:
        """
        Case-insensitive filter over the catalog.

        A name matches when it contains the term as typed, the term with
        whitespace turned into dashes ("arrow down" -> "arrow-down"), or the
        term with whitespace removed ("git hub" -> "github"). Multi-word
        terms also match when every word appears somewhere in the name.
        """
        needle = term.strip().lower()
        if not needle:
            return list(self.names)

        variations = {
            needle,
            re.sub(r"\s+", "-", needle),
            re.sub(r"\s+", "", needle),
        }
        words = needle.split()

        def _matches(name: str) -> bool:
            lowered = name.lower()
            if any(variation in lowered for variation in variations):
                return True
            return len(words) > 1 and all(word in lowered for word in words)

        return [name for name in self.names if _matches(name)]


@dataclass
class Resolution:
    """Everything the UI layer needs from one pass."""

    catalog: IconCatalog
    stylesheet: str
    source: AssetSource
    source_label: Optional[str] = None
    stylesheet_path: Optional[Path] = None
    resource_roots: List[Path] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def icon_names(self) -> Tuple[str, ...]:
        return self.catalog.names

    @property
    def display_label(self) -> str:
        if self.source is AssetSource.LOCAL:
            return f"Local: {self.source_label} (TTF fonts)"
        return "Bundled"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source.value,
            "source_label": self.source_label,
            "display_label": self.display_label,
            "stylesheet_path": str(self.stylesheet_path) if self.stylesheet_path else None,
            "resource_roots": [str(p) for p in self.resource_roots],
            "is_fallback_catalog": self.catalog.is_fallback,
            "count": len(self.catalog),
            "icons": list(self.catalog.names),
            "notes": list(self.notes),
        }
