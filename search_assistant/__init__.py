"""
Search Assistant - An interactive command-line tool for searching the web with Google and analyzing the results with Gemini.
"""

from .models import SearchResultItem
from .search_assistant import SearchAssistant

__all__ = ['SearchAssistant', 'SearchResultItem']
