"""
Functions for formatting search output for the terminal.
"""

from typing import List, Optional
from rich.console import Console
from rich.markdown import Markdown
from .models import Command, SearchResultItem

NO_SEARCH_RESULTS = "No search results found."

def format_result_item(rank: int, item: SearchResultItem) -> str:
    """
    Format a single search result as a markdown block.

    Args:
        rank: 1-based position in the result set
        item: Search result

    Returns:
        Markdown text with a heading, the quoted snippet and a labelled link
    """
    return f"# [{rank}] {item.title}\n> {item.snippet}\n\n[{item.display_link}]({item.link})\n"

def format_help(commands: List[Command]) -> str:
    """
    Format the command reference as markdown.
    """
    output = ["# Available commands:\n"]
    for command in commands:
        output.append(f"## {command.name}")
        output.append(f"- **Description**: {command.description}")
        output.append(f"- **Usage**: `{command.usage}`\n")
    return "\n".join(output)

class ResultRenderer:
    """Render markdown output to the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else Console()

    def print(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def render_markdown(self, content: str) -> None:
        # Links are written out as "label (url)" so they survive plain terminals
        self.console.print(Markdown(content, hyperlinks=False))

    def render_summary(self, summary: str) -> None:
        self.render_markdown(summary)

    def render_results(self, search_results: List[SearchResultItem]) -> None:
        if not search_results:
            self.print(NO_SEARCH_RESULTS)
            return

        for i, item in enumerate(search_results):
            self.render_markdown(format_result_item(i + 1, item))
