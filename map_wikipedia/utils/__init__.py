from .client_registry import ClientRegistry
from .wikipedia_response_parser import (
    WikipediaResponseParseError,
    WikipediaResponseParser,
)

__all__ = ["ClientRegistry", "WikipediaResponseParseError", "WikipediaResponseParser"]
