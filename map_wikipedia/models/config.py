from typing import Annotated

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from map_wikipedia.constants import WIKIPEDIA_ENDPOINT_TEMPLATE
from map_wikipedia.models.types import LanguageCode, NonBlankString


class Config(BaseSettings):
    """A Pydantic Model to hold configuration values of map-wikipedia."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    endpoint_template: Annotated[
        NonBlankString,
        Field(
            default=WIKIPEDIA_ENDPOINT_TEMPLATE,
            validation_alias="endpoint-template",
        ),
    ]
    user_agent: Annotated[
        NonBlankString,
        Field(default="map-wikipedia/0.1", validation_alias="user-agent"),
    ]
    timeout: PositiveFloat | None = None
    tags_property: Annotated[
        NonBlankString, Field(default="tags", validation_alias="tags-property")
    ]
    language_property: Annotated[
        NonBlankString,
        Field(default="language", validation_alias="language-property"),
    ]
    default_language: Annotated[
        LanguageCode, Field(default="en", validation_alias="default-language")
    ]
    include_hidden: Annotated[
        bool, Field(default=True, validation_alias="include-hidden")
    ]

    @field_validator("endpoint_template")
    @classmethod
    def check_language_placeholder(cls, endpoint_template: str) -> str:
        if "{language}" not in endpoint_template:
            raise ValueError("endpoint-template must contain a {language} placeholder")
        try:
            endpoint_template.format(language="en")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"endpoint-template may only contain the {{language}} placeholder: {e!r}"
            ) from e
        return endpoint_template.rstrip("/")
