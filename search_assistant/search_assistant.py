"""
Main SearchAssistant class that runs the interactive search loop.
"""

import sys
from typing import Any, Callable, Optional

from .output import ResultRenderer
from .summarization import analyze_search_results

QUERY_PROMPT = 'Enter your search query (or type "exit"): '
EXIT_COMMAND = "exit"
EMPTY_QUERY_NOTICE = "No search query provided."

def analysis_prompt(provider_name: str = "Gemini") -> str:
    return f"Do you want to analyze the search results with {provider_name}? (yes/no): "

def wants_analysis(answer: str) -> bool:
    return answer.lower() in ("yes", "y")

class SearchAssistant:
    def __init__(self, search_client: Any, generation_client: Any,
                 renderer: Optional[ResultRenderer] = None,
                 input_func: Callable[[str], str] = input,
                 error_stream=None):
        """
        Initialize the search assistant with its collaborators.

        Args:
            search_client: Client exposing search(query) -> list of SearchResultItem
            generation_client: Client exposing generate(prompt) and display_name
            renderer: Renderer for terminal output
            input_func: Function that prints a prompt and returns one line of input
            error_stream: Stream for diagnostics, stderr by default
        """
        self.search_client = search_client
        self.generation_client = generation_client
        self.renderer = renderer if renderer is not None else ResultRenderer()
        self.input_func = input_func
        self.error_stream = error_stream
        self.provider_name = getattr(generation_client, "display_name", "Gemini")

    def _error(self, message: str) -> None:
        print(message, file=self.error_stream if self.error_stream is not None else sys.stderr)

    def run(self) -> None:
        """
        Prompt for queries until "exit" is entered or input runs out.
        """
        while True:
            try:
                query = self.input_func(QUERY_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.renderer.print()
                return

            if not self.process_query(query):
                return

    def process_query(self, query: str) -> bool:
        """
        Handle one query from the user.

        Args:
            query: The line entered at the query prompt

        Returns:
            False when the session should end, True to prompt again
        """
        if not query:
            self.renderer.print(EMPTY_QUERY_NOTICE)
            return True

        if query.lower() == EXIT_COMMAND:
            return False

        self.renderer.print()
        try:
            answer = self.input_func(analysis_prompt(self.provider_name))
        except (EOFError, KeyboardInterrupt):
            self.renderer.print()
            return False

        try:
            self.search_and_render(query, wants_analysis(answer))
        except Exception as e:
            self._error(f"Error during search or analysis: {e}")

        return True

    def search_and_render(self, query: str, analyze: bool) -> None:
        search_results = self.search_client.search(query)

        if analyze:
            analysis = analyze_search_results(self.generation_client, query, search_results)
            self.renderer.print(f"\nSearch Results Analysis by {self.provider_name}:\n")
            self.renderer.render_summary(analysis)
        else:
            self.renderer.print("\nSearch Results (Analysis Skipped):\n")
            self.renderer.render_results(search_results)
