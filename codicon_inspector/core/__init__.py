"""
Codicon resolution core

Stylesheet probing, font and url rewriting, and icon-name extraction.
"""

from .models import (
    AssetSource,
    FontAsset,
    IconCatalog,
    Resolution,
    StylesheetDocument,
)
from .resolver import IconAssetResolver, IconInspector, resolve_assets

__all__ = [
    "AssetSource",
    "FontAsset",
    "IconCatalog",
    "Resolution",
    "StylesheetDocument",
    "IconAssetResolver",
    "IconInspector",
    "resolve_assets",
]
