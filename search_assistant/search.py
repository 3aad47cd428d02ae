"""
Functions for performing Google searches.
"""

from typing import Any, List, Optional
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .exceptions import SearchError
from .models import SearchResultItem

def google_search(google_service: Any, google_cse_id: str, query: str) -> List[SearchResultItem]:
    """
    Perform a single Google search using the Custom Search API.

    No retry is attempted: quota, network and payload errors are raised as
    SearchError so the caller decides how to recover.

    Args:
        google_service: Google API service instance
        google_cse_id: Custom Search Engine ID
        query: Non-empty search query string

    Returns:
        List of search result items in provider rank order (may be empty)
    """
    try:
        result = google_service.cse().list(
            q=query,
            cx=google_cse_id
        ).execute()
    except HttpError as e:
        raise SearchError(f"Google Custom Search request failed: {e}") from e
    except Exception as e:
        raise SearchError(f"Error during Google search: {e}") from e

    if not isinstance(result, dict):
        raise SearchError(f"Unexpected Google Custom Search response: {result!r}")

    items = result.get('items', [])
    if not isinstance(items, list):
        raise SearchError(f"Unexpected 'items' in Google Custom Search response: {items!r}")

    for item in items:
        if not isinstance(item, dict):
            raise SearchError(f"Unexpected search result item in Google Custom Search response: {item!r}")

    return [SearchResultItem.from_provider(item) for item in items]

class GoogleSearchClient:
    def __init__(self, google_api_key: str, google_cse_id: str, google_service: Optional[Any] = None):
        """
        Initialize the search client with its credentials.

        Args:
            google_api_key: API key for Google Custom Search
            google_cse_id: Custom Search Engine ID (the search context)
            google_service: Prebuilt service instance, built from the API key when omitted
        """
        self.google_cse_id = google_cse_id

        # Initialize the Google Custom Search API client
        if google_service is None:
            google_service = build("customsearch", "v1", developerKey=google_api_key)
        self.google_service = google_service

    def search(self, query: str) -> List[SearchResultItem]:
        return google_search(self.google_service, self.google_cse_id, query)
