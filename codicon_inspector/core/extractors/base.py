"""
Base extractor interface for icon-name extraction.

Each extractor recognises one way a stylesheet can declare icons and yields
candidate names; filtering and deduplication happen in ``icon_names``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterator, Pattern

NAME_CHARS = r"[a-zA-Z0-9_-]+"


class BaseNameExtractor(ABC):
    """Base class for all icon-name extractors."""

    def __init__(self, prefix: str = "codicon"):
        """
        Initialize extractor.

        Args:
            prefix: Icon class-name prefix (e.g., "codicon")
        """
        self.prefix = prefix
        self._pattern = self.build_pattern(re.escape(prefix))

    @abstractmethod
    def build_pattern(self, prefix: str) -> Pattern[str]:
        """
        Compile the pattern for this declaration form.

        Args:
            prefix: Regex-escaped icon prefix

        Returns:
            Compiled pattern whose first group captures the icon name
        """

    def scan(self, text: str) -> Iterator[str]:
        """Yield every candidate name found in ``text``, unfiltered."""
        for match in self._pattern.finditer(text):
            yield match.group(1)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r})"
