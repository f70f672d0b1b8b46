"""Wikipedia categories for the tags of Singer records."""

from map_wikipedia.wikipedia_tag_categorizer import WikipediaTagCategorizer

__all__ = ["WikipediaTagCategorizer"]
