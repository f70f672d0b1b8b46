from .category import Category
from .category_lookup import (
    CategoryLookupFailure,
    CategoryLookupResult,
    CategoryLookupSuccess,
)
from .tag import Tag
from .wikipedia_response import WikipediaResponse

__all__ = [
    "Category",
    "CategoryLookupFailure",
    "CategoryLookupResult",
    "CategoryLookupSuccess",
    "Tag",
    "WikipediaResponse",
]
