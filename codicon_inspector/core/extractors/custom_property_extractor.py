from __future__ import annotations

import re
from typing import Pattern

from .base import BaseNameExtractor, NAME_CHARS


class CustomPropertyExtractor(BaseNameExtractor):
    """CSS custom properties such as ``--codicon-home: "\\ea60";``."""

    def build_pattern(self, prefix: str) -> Pattern[str]:
        return re.compile(rf"--{prefix}-({NAME_CHARS}):")
