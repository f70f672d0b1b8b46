from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from map_wikipedia.constants import WIKI_SUBDIRECTORY, MediaWikiApi
from map_wikipedia.models import Config, wikipedia
from map_wikipedia.utils import WikipediaResponseParser


class WikipediaService:
    """
    REST client for the Wikipedia of a single language.

    The endpoint is built from `Config.endpoint_template`, which defaults to
    `http://{language}.wikipedia.org/w`. Response bodies are decoded by a
    `WikipediaResponseParser` installed at construction time.
    """

    def __init__(
        self,
        language: str,
        config: Config | None = None,
        session: requests.Session | None = None,
    ):
        self.language = language
        self.__config = config or Config()
        self.endpoint = self.__config.endpoint_template.format(language=language)
        self.__session = session or requests.Session()
        self.__session.headers.update({"User-Agent": self.__config.user_agent})
        self.__parser = WikipediaResponseParser(
            article_base_url=self.__article_base_url()
        )
        self.__logger = logging.getLogger(__name__)
        self.__logger.debug(f"Created Wikipedia client for {self.endpoint}")

    def __article_base_url(self) -> str:
        # http://en.wikipedia.org/w -> http://en.wikipedia.org/wiki/
        endpoint = urlsplit(self.endpoint)
        return f"{endpoint.scheme}://{endpoint.netloc}{WIKI_SUBDIRECTORY}"

    def tag(self, text: str) -> wikipedia.WikipediaResponse:
        """
        Return the Wikipedia categories of the page titled `text`.

        Raises:
            requests.RequestException: on connection errors, timeouts and non-2xx responses.
            WikipediaResponseParseError: when the response body is not a category query result.
        """

        response = self.__session.get(
            url=self.endpoint + MediaWikiApi.PATH,
            params={**MediaWikiApi.CATEGORIES_QUERY_PARAMS, "titles": text},
            timeout=self.__config.timeout,
        )
        response.raise_for_status()

        return self.__parser.parse(response.content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.endpoint!r})"
