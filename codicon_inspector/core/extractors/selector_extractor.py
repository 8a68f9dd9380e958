"""
Selector Extractors

Icon names declared as ``.<prefix>-<name>::before`` rules.
"""

from __future__ import annotations

import re
from typing import Pattern

from .base import BaseNameExtractor, NAME_CHARS


class SelectorExtractor(BaseNameExtractor):
    """``.codicon-home::before`` and the single-colon ``:before`` form."""

    def build_pattern(self, prefix: str) -> Pattern[str]:
        return re.compile(rf"\.{prefix}-({NAME_CHARS})::?before")


class ContentSelectorExtractor(BaseNameExtractor):
    """Selector rules that also declare ``content: "<glyph>"`` in their block.

    The glyph only confirms the rule draws an icon; it is not used for naming.
    """

    def build_pattern(self, prefix: str) -> Pattern[str]:
        return re.compile(
            rf"\.{prefix}-({NAME_CHARS})::?before\s*\{{[^}}]*content:\s*[\"']([^\"']+)[\"']",
            re.DOTALL,
        )
