from __future__ import annotations

import re
from typing import Pattern

from .base import BaseNameExtractor, NAME_CHARS


class DataAttributeExtractor(BaseNameExtractor):
    """Attribute selectors of the form ``[data-codicon="home"]``."""

    def build_pattern(self, prefix: str) -> Pattern[str]:
        return re.compile(rf"\[data-{prefix}=\"({NAME_CHARS})\"\]")
