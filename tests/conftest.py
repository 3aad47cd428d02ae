"""Shared fixtures for Search Assistant tests."""

import io
from typing import List

import pytest
from rich.console import Console

from search_assistant.models import SearchResultItem
from search_assistant.output import ResultRenderer


class ScriptedInput:
    """Feeds prepared answers to prompts and records every prompt shown."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class StubSearchClient:
    """Search client returning fixed results, or raising a fixed error."""

    def __init__(self, results=None, error: Exception = None):
        self.results = results or []
        self.error = error
        self.queries: List[str] = []

    def search(self, query: str) -> List[SearchResultItem]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.results)


class StubGenerationClient:
    """Generation client returning fixed text, or raising a fixed error."""

    display_name = "Gemini"

    def __init__(self, text: str = "Summary X", error: Exception = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_results():
    return [
        SearchResultItem(title="A", link="http://a", snippet="sa", display_link="a"),
        SearchResultItem(title="B", link="http://b", snippet="sb", display_link="b"),
    ]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=80, color_system=None, force_terminal=False)


@pytest.fixture
def renderer(console):
    return ResultRenderer(console)


@pytest.fixture
def rendered(console):
    """Return everything written to the test console so far."""
    return lambda: console.file.getvalue()
