"""
Icon-Name Extractors

One extractor per way a stylesheet can declare icon names.
"""

from typing import List

from .base import BaseNameExtractor
from .selector_extractor import SelectorExtractor, ContentSelectorExtractor
from .data_attribute_extractor import DataAttributeExtractor
from .custom_property_extractor import CustomPropertyExtractor

__all__ = [
    "BaseNameExtractor",
    "SelectorExtractor",
    "ContentSelectorExtractor",
    "DataAttributeExtractor",
    "CustomPropertyExtractor",
    "default_extractors",
]


def default_extractors(prefix: str = "codicon") -> List[BaseNameExtractor]:
    """The extractors run on every stylesheet, in order."""
    return [
        SelectorExtractor(prefix),
        ContentSelectorExtractor(prefix),
        DataAttributeExtractor(prefix),
        CustomPropertyExtractor(prefix),
    ]
