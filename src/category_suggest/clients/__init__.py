"""Remote category lookup clients."""

from .base import RemoteCategoryLookup
from .mediawiki import MediaWikiCategoryLookup

__all__ = ["MediaWikiCategoryLookup", "RemoteCategoryLookup"]
