from typing import Literal

from pydantic import BaseModel, ConfigDict

from map_wikipedia.models.wikipedia.category import Category


class CategoryLookupSuccess(BaseModel):
    """The categories of a tag, in the order returned by Wikipedia."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    categories: tuple[Category, ...] = ()


class CategoryLookupFailure(BaseModel):
    """A lookup that could not be completed, and why."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    reason: str


CategoryLookupResult = CategoryLookupSuccess | CategoryLookupFailure
