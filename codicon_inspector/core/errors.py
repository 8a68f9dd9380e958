"""
Failure taxonomy for a resolution pass.

None of these escape the package: the resolver raises them inside a
fallback step and the step runner turns them into a note on the result.
"""

from __future__ import annotations


class AssetResolutionError(Exception):
    """Base class for recoverable resolution failures."""


class PathNotFound(AssetResolutionError):
    """No usable stylesheet could be located for the configured path."""


class ReadFailure(AssetResolutionError):
    """A stylesheet was located but could not be read."""


class ParseYieldsNothing(AssetResolutionError):
    """Extraction found no icon names in the stylesheet text."""
