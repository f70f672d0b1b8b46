import pytest
import requests

from map_wikipedia.models import Config
from map_wikipedia.utils import WikipediaResponseParseError
from map_wikipedia.wikipedia_service import WikipediaService
from tests.conftest import FakeResponse, FakeSession


def test_endpoint_per_language():
    assert WikipediaService("en", session=FakeSession()).endpoint == "http://en.wikipedia.org/w"
    assert WikipediaService("it", session=FakeSession()).endpoint == "http://it.wikipedia.org/w"


def test_tag_queries_categories_api(science_history_session):
    service = WikipediaService("it", session=science_history_session)

    response = service.tag("Scienza")

    assert [category.text for category in response.categories] == [
        "Category:Science",
        "Category:History",
    ]
    assert response.categories[0].link == "http://it.wikipedia.org/wiki/Category:Science"

    (call,) = science_history_session.calls
    assert call["url"] == "http://it.wikipedia.org/w/api.php"
    assert call["params"]["action"] == "query"
    assert call["params"]["prop"] == "categories"
    assert call["params"]["format"] == "json"
    assert call["params"]["titles"] == "Scienza"
    assert call["timeout"] is None


def test_tag_sends_configured_user_agent_and_timeout(science_history_session):
    config = Config(user_agent="crowd-pulse/1.0 (ops@example.org)", timeout=2.5)

    WikipediaService("en", config=config, session=science_history_session).tag("Science")

    assert science_history_session.headers["User-Agent"] == "crowd-pulse/1.0 (ops@example.org)"
    assert science_history_session.calls[0]["timeout"] == 2.5


def test_custom_endpoint_template(science_history_session):
    config = Config(endpoint_template="https://{language}.m.wikipedia.org/w/")
    service = WikipediaService("de", config=config, session=science_history_session)

    service.tag("Wissenschaft")

    assert service.endpoint == "https://de.m.wikipedia.org/w"
    assert science_history_session.calls[0]["url"] == "https://de.m.wikipedia.org/w/api.php"


def test_tag_raises_on_http_error_status():
    session = FakeSession(response=FakeResponse(b"Service Unavailable", status_code=503))

    with pytest.raises(requests.HTTPError):
        WikipediaService("en", session=session).tag("Science")


def test_tag_raises_on_connection_error():
    session = FakeSession(error=requests.ConnectionError("Connection refused"))

    with pytest.raises(requests.ConnectionError):
        WikipediaService("en", session=session).tag("Science")


def test_tag_raises_on_malformed_body():
    session = FakeSession(response=FakeResponse(b"<html></html>"))

    with pytest.raises(WikipediaResponseParseError):
        WikipediaService("en", session=session).tag("Science")


def test_category_links_use_host_of_endpoint_without_path(science_history_session):
    config = Config(endpoint_template="http://{language}.wikipedia.org")
    service = WikipediaService("en", config=config, session=science_history_session)

    response = service.tag("Science")

    assert science_history_session.calls[0]["url"] == "http://en.wikipedia.org/api.php"
    assert response.categories[0].link == "http://en.wikipedia.org/wiki/Category:Science"
