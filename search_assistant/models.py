"""
Data models for the Search Assistant.
"""

from typing import Any, Callable, Dict
from urllib.parse import urlparse
from dataclasses import dataclass

@dataclass(frozen=True)
class SearchResultItem:
    """
    A single search result, in the rank order returned by the provider.
    """
    title: str              # Title of the result page
    link: str               # URL of the result page
    snippet: str            # Short excerpt shown by the provider
    display_link: str = ""  # Human-readable host shown alongside the link

    @classmethod
    def from_provider(cls, item: Dict[str, Any]) -> "SearchResultItem":
        """
        Build an item from a raw Custom Search API result entry.
        """
        link = item.get('link') or ''
        display_link = item.get('displayLink') or urlparse(link).netloc or link
        return cls(
            title=item.get('title') or '',
            link=link,
            snippet=item.get('snippet') or '',
            display_link=display_link
        )

@dataclass(frozen=True)
class Command:
    """
    A command-line command exposed by the Search Assistant.
    """
    name: str
    description: str
    usage: str
    execute: Callable[..., int]
