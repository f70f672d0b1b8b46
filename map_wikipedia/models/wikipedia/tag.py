from pydantic import BaseModel, ConfigDict

from map_wikipedia.models.types import LanguageCode, NonBlankString


class Tag(BaseModel):
    """Pydantic Model to hold a unit of text to categorize, along with its language."""

    model_config = ConfigDict(frozen=True)

    text: NonBlankString
    language: LanguageCode
