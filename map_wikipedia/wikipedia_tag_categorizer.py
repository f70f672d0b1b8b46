from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from requests import RequestException

from map_wikipedia.models import Config, wikipedia
from map_wikipedia.utils import ClientRegistry, WikipediaResponseParseError
from map_wikipedia.wikipedia_service import WikipediaService

if TYPE_CHECKING:
    from collections.abc import Callable


class WikipediaTagCategorizer:
    """
    Categorize tags with the categories of the matching Wikipedia page.

    Lookups are best-effort: transport and parse failures are logged and
    degrade to an empty tuple of categories, so a failed lookup never stops
    the processing of other tags.
    """

    name = "wikipedia"

    def __init__(
        self,
        config: Config | None = None,
        service_factory: Callable[[str], WikipediaService] | None = None,
    ):
        self.config = config or Config()
        self.__services: ClientRegistry[str, WikipediaService] = ClientRegistry(
            service_factory or self.__create_service
        )
        self.__logger = logging.getLogger(__name__)

    def __create_service(self, language: str) -> WikipediaService:
        return WikipediaService(language=language, config=self.config)

    def get_service(self, language: str) -> WikipediaService:
        """Get or create the WikipediaService for `language`."""

        return self.__services.get_or_create(language)

    def lookup(self, tag: wikipedia.Tag) -> wikipedia.CategoryLookupResult:
        """Look up the categories of `tag`, reporting failures as a CategoryLookupFailure."""

        service = self.get_service(tag.language)
        try:
            response = service.tag(tag.text)
        except (RequestException, WikipediaResponseParseError) as e:
            return wikipedia.CategoryLookupFailure(reason=f"{type(e).__name__}: {e}")

        return wikipedia.CategoryLookupSuccess(categories=response.categories)

    def categorize(self, tag: wikipedia.Tag) -> tuple[wikipedia.Category, ...]:
        """Return the categories of `tag`, or an empty tuple if the lookup failed."""

        result = self.lookup(tag)
        if isinstance(result, wikipedia.CategoryLookupFailure):
            self.__logger.warning(
                f"Error while getting the Wikipedia categories of tag {tag.text!r} ({tag.language}): {result.reason}"
            )
            return ()

        return result.categories
