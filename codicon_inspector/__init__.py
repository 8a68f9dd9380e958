"""
Codicon Inspector

Resolves an icon-font stylesheet (bundled or local) into an icon catalog and
an embeddable stylesheet.
"""

__version__ = "0.1.0"
