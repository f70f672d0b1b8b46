from pydantic import BaseModel

from map_wikipedia.models.wikipedia.category import Category


class WikipediaResponse(BaseModel):
    """Pydantic Model to hold the categories parsed from a single Wikipedia API response."""

    categories: tuple[Category, ...] = ()
