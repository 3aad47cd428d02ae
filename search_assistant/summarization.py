"""
Functions for summarizing search results with a generation provider.
"""

import sys
from typing import Any, List
from .models import SearchResultItem

NO_RESULTS_SUMMARY = "No relevant search results found."

ANALYSIS_INSTRUCTIONS = (
    "Provide a concise summary and analysis of these results, highlighting the main themes "
    "and insights. Put links at the end of the summary. Use markdown elements for better readability."
)

def analysis_error_message(provider_name: str = "Gemini") -> str:
    return f"Error analyzing search results with {provider_name}."

def build_analysis_prompt(query: str, search_results: List[SearchResultItem]) -> str:
    """
    Build the prompt asking the provider to analyze the search results.

    Args:
        query: The user's search query
        search_results: Search results in provider rank order

    Returns:
        Prompt text
    """
    formatted_results = "\n".join(
        f"- [{i+1}] Title: {item.title}\n  Link: {item.link}\n  Snippet: {item.snippet}"
        for i, item in enumerate(search_results)
    )
    return (
        f'Analyze the following search results for the query: "{query}". \n\n'
        f"Search Results:\n{formatted_results}\n\n"
        f"{ANALYSIS_INSTRUCTIONS}"
    )

def analyze_search_results(generation_client: Any, query: str, search_results: List[SearchResultItem]) -> str:
    """
    Use the generation provider to summarize the search results.

    Never raises: an empty result set and provider failures are reported
    as fixed messages so the caller always has something to render.

    Args:
        generation_client: Client exposing generate(prompt) and display_name
        query: The user's search query
        search_results: Search results in provider rank order

    Returns:
        The generated summary, or one of the fixed fallback messages
    """
    if not search_results:
        return NO_RESULTS_SUMMARY

    provider_name = getattr(generation_client, "display_name", "Gemini")
    prompt = build_analysis_prompt(query, search_results)

    try:
        return generation_client.generate(prompt)
    except Exception as e:
        print(f"Error during {provider_name} analysis: {e}", file=sys.stderr)
        return analysis_error_message(provider_name)
