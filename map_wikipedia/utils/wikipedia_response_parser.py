from __future__ import annotations

import json
from typing import Any

from map_wikipedia.models import wikipedia


class WikipediaResponseParseError(ValueError):
    """Raised when a Wikipedia API response body cannot be turned into categories."""


class WikipediaResponseParser:
    """
    Deserializer for MediaWiki `prop=categories` query responses.

    The categories of a query live under `query.pages.<pageid>.categories`.
    Every page of the envelope is visited in document order and its categories
    are flattened into a single tuple. A response without any of those keys
    (e.g. a title that does not exist) is a valid, empty response.
    """

    def __init__(self, article_base_url: str | None = None):
        self.__article_base_url = article_base_url

    def parse(self, raw: str | bytes) -> wikipedia.WikipediaResponse:
        """Parse the raw JSON body of a category query into a WikipediaResponse."""

        try:
            document = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise WikipediaResponseParseError(f"Response is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise WikipediaResponseParseError(
                f"Expected a JSON object, got {type(document).__name__}"
            )

        if "error" in document:
            error = document["error"]
            if isinstance(error, dict):
                error = f"{error.get('code')}: {error.get('info')}"
            raise WikipediaResponseParseError(f"Wikipedia API error {error}")

        return wikipedia.WikipediaResponse(
            categories=tuple(
                self.__parse_category(category_json)
                for page_json in self.__pages(document)
                for category_json in self.__ensure_list(
                    page_json.get("categories", []), "categories"
                )
            )
        )

    def __pages(self, document: dict[str, Any]) -> list[dict[str, Any]]:
        query = document.get("query", {})
        if not isinstance(query, dict):
            raise WikipediaResponseParseError("`query` is not a JSON object")

        pages = query.get("pages", {})
        # formatversion=2 returns a list, formatversion=1 an object keyed by page id
        if isinstance(pages, dict):
            pages = list(pages.values())

        return [
            page_json
            for page_json in self.__ensure_list(pages, "pages")
            if isinstance(page_json, dict) and "missing" not in page_json
        ]

    def __parse_category(self, category_json: Any) -> wikipedia.Category:  # noqa: ANN401
        if not isinstance(category_json, dict) or not isinstance(
            category_json.get("title"), str
        ):
            raise WikipediaResponseParseError(
                f"Category entry without a title: {category_json!r}"
            )

        title = category_json["title"]
        return wikipedia.Category(
            text=title,
            link=self.__category_link(title),
            hidden="hidden" in category_json and category_json["hidden"] is not False,
        )

    def __category_link(self, title: str) -> str | None:
        if self.__article_base_url is None:
            return None
        return self.__article_base_url + title.replace(" ", "_")

    @staticmethod
    def __ensure_list(value: Any, key: str) -> list[Any]:  # noqa: ANN401
        if not isinstance(value, list):
            raise WikipediaResponseParseError(f"`{key}` is not a JSON array")
        return value
