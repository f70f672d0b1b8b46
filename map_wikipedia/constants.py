WIKIPEDIA_ENDPOINT_TEMPLATE = "http://{language}.wikipedia.org/w"


WIKI_SUBDIRECTORY = "/wiki/"


class MediaWikiApi:
    """Paths and query parameters of the MediaWiki Action API category lookup."""

    PATH = "/api.php"

    # `titles` is added per call, everything else is fixed.
    CATEGORIES_QUERY_PARAMS = {
        "action": "query",
        "prop": "categories",
        "format": "json",
        "redirects": "1",
        "cllimit": "max",
        "clprop": "hidden",
    }
