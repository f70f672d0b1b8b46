from map_wikipedia.constants import WIKI_SUBDIRECTORY, WIKIPEDIA_ENDPOINT_TEMPLATE

from . import wikipedia
from .config import Config

__all__ = ["WIKI_SUBDIRECTORY", "WIKIPEDIA_ENDPOINT_TEMPLATE", "Config", "wikipedia"]
