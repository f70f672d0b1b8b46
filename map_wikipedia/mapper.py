"""wikipedia mapper class."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

import singer_sdk._singerlib as singer
import singer_sdk.typing as th
from pydantic import ValidationError
from singer_sdk import InlineMapper

from map_wikipedia.models import Config, wikipedia
from map_wikipedia.wikipedia_tag_categorizer import WikipediaTagCategorizer

if TYPE_CHECKING:
    from collections.abc import Iterable


CATEGORIES_PROPERTY = "categories"

CATEGORIES_SCHEMA = th.ArrayType(
    th.ObjectType(
        th.Property("text", th.StringType),
        th.Property("link", th.StringType),
        th.Property("hidden", th.BooleanType),
    )
).to_dict()


class MapWikipedia(InlineMapper):
    """Singer Mapper that adds Wikipedia categories to the tags of each record."""

    name = "map-wikipedia"

    config_jsonschema = Config.model_json_schema()

    def __init__(self, *args: Any, **kwargs: Any):  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self.wikipedia_config = self.get_config()
        self.categorizer = WikipediaTagCategorizer(config=self.wikipedia_config)
        self.__logger = logging.getLogger(__name__)

    def get_config(self) -> Config:
        """Return the contents of Mapper configuration

        Returns:
            A Config object that contains configuration values for map-wikipedia
        """

        return Config(**self.config)

    def map_schema_message(self, message_dict: dict) -> Iterable[singer.Message]:
        """Add a `categories` property to the tag items of the stream schema."""

        schema = copy.deepcopy(message_dict["schema"])
        tag_schema = (
            schema.get("properties", {})
            .get(self.wikipedia_config.tags_property, {})
            .get("items")
        )
        if isinstance(tag_schema, dict) and self.__is_object_schema(tag_schema):
            tag_schema.setdefault("properties", {})[CATEGORIES_PROPERTY] = (
                CATEGORIES_SCHEMA
            )

        yield singer.SchemaMessage(
            stream=message_dict["stream"],
            schema=schema,
            key_properties=message_dict.get("key_properties"),
            bookmark_properties=message_dict.get("bookmark_properties"),
        )

    def map_record_message(self, message_dict: dict) -> Iterable[singer.Message]:
        """Categorize every tag of the record."""

        record = message_dict["record"]
        tags = record.get(self.wikipedia_config.tags_property)
        if isinstance(tags, list):
            record = {
                **record,
                self.wikipedia_config.tags_property: [
                    self.__categorize_tag(tag_json, record) for tag_json in tags
                ],
            }

        yield singer.RecordMessage(
            stream=message_dict["stream"],
            record=record,
            version=message_dict.get("version"),
        )

    def map_state_message(self, message_dict: dict) -> Iterable[singer.Message]:
        yield singer.StateMessage(value=message_dict["value"])

    def map_activate_version_message(
        self, message_dict: dict
    ) -> Iterable[singer.Message]:
        yield singer.ActivateVersionMessage(
            stream=message_dict["stream"], version=message_dict["version"]
        )

    @staticmethod
    def __is_object_schema(schema: dict) -> bool:
        schema_type = schema.get("type", [])
        if isinstance(schema_type, str):
            schema_type = [schema_type]
        return "properties" in schema or "object" in schema_type

    def __categorize_tag(self, tag_json: Any, record: dict) -> Any:  # noqa: ANN401
        """Return a copy of `tag_json` with its categories, or `tag_json` itself if it is not a tag."""

        if not isinstance(tag_json, dict):
            return tag_json

        if not str(tag_json.get("text") or "").strip():
            return {**tag_json, CATEGORIES_PROPERTY: []}

        try:
            tag = wikipedia.Tag(
                text=tag_json.get("text") or "",
                language=tag_json.get("language")
                or record.get(self.wikipedia_config.language_property)
                or self.wikipedia_config.default_language,
            )
        except ValidationError:
            self.__logger.warning(
                f"Skipping Wikipedia categorization of invalid tag: {tag_json!r}",
                exc_info=True,
            )
            return {**tag_json, CATEGORIES_PROPERTY: []}

        return {
            **tag_json,
            CATEGORIES_PROPERTY: [
                category.model_dump()
                for category in self.categorizer.categorize(tag)
                if self.wikipedia_config.include_hidden or not category.hidden
            ],
        }


if __name__ == "__main__":
    MapWikipedia.cli()
