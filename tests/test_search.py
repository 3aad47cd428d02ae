"""Tests for the Google Custom Search adapter."""

from unittest.mock import MagicMock, patch

import pytest
from googleapiclient.errors import HttpError

from search_assistant.exceptions import SearchError
from search_assistant.models import SearchResultItem
from search_assistant.search import GoogleSearchClient, google_search


def make_service(response=None, error=None):
    service = MagicMock()
    request = service.cse.return_value.list.return_value
    if error is not None:
        request.execute.side_effect = error
    else:
        request.execute.return_value = response
    return service


class TestGoogleSearch:
    """Test the search call and response normalisation."""

    def test_items_normalised_in_order(self):
        """Provider items should become SearchResultItems in rank order."""
        service = make_service({
            "items": [
                {"title": "A", "link": "http://a", "snippet": "sa", "displayLink": "a"},
                {"title": "B", "link": "http://b", "snippet": "sb", "displayLink": "b"},
            ]
        })

        results = google_search(service, "cse-id", "rust vs go")

        assert results == [
            SearchResultItem(title="A", link="http://a", snippet="sa", display_link="a"),
            SearchResultItem(title="B", link="http://b", snippet="sb", display_link="b"),
        ]
        service.cse.return_value.list.assert_called_once_with(q="rust vs go", cx="cse-id")

    def test_no_items_is_empty_list(self):
        """A response without items should give an empty list, not an error."""
        service = make_service({"searchInformation": {"totalResults": "0"}})

        assert google_search(service, "cse-id", "nothing") == []

    def test_http_error_raises_search_error(self):
        """HTTP failures should be raised as SearchError without retrying."""
        error = HttpError(MagicMock(status=429, reason="Too Many Requests"), b"quota exceeded")
        service = make_service(error=error)

        with pytest.raises(SearchError) as exc_info:
            google_search(service, "cse-id", "q")

        assert exc_info.value.__cause__ is error
        assert service.cse.return_value.list.return_value.execute.call_count == 1

    def test_transport_error_raises_search_error(self):
        """Network failures should be raised as SearchError."""
        service = make_service(error=ConnectionError("connection reset"))

        with pytest.raises(SearchError, match="connection reset"):
            google_search(service, "cse-id", "q")

    def test_malformed_response(self):
        """A response that is not a mapping should be rejected."""
        service = make_service(["not", "a", "dict"])

        with pytest.raises(SearchError):
            google_search(service, "cse-id", "q")

    def test_malformed_items(self):
        """A non-list items entry should be rejected."""
        service = make_service({"items": "oops"})

        with pytest.raises(SearchError):
            google_search(service, "cse-id", "q")

    def test_malformed_item(self):
        """An items entry that is not a mapping should be rejected as a search error."""
        service = make_service({"items": [{"title": "A", "link": "http://a", "snippet": "sa"}, "oops"]})

        with pytest.raises(SearchError, match="Unexpected search result item"):
            google_search(service, "cse-id", "q")


class TestGoogleSearchClient:
    """Test the search client wrapper."""

    def test_builds_custom_search_service(self):
        """The client should build the customsearch v1 service from the API key."""
        with patch("search_assistant.search.build") as mock_build:
            client = GoogleSearchClient("api-key", "cse-id")

        mock_build.assert_called_once_with("customsearch", "v1", developerKey="api-key")
        assert client.google_service is mock_build.return_value

    def test_search_uses_cse_id(self):
        """Searches should be scoped to the configured engine."""
        service = make_service({"items": [{"title": "A", "link": "http://a", "snippet": "sa"}]})
        client = GoogleSearchClient("api-key", "cse-id", google_service=service)

        results = client.search("rust")

        assert [r.title for r in results] == ["A"]
        service.cse.return_value.list.assert_called_once_with(q="rust", cx="cse-id")
