"""
Clients for the text-generation providers used to analyze search results.
"""

from typing import Optional, Any
import anthropic
from google import genai

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_CLAUDE_MODEL = "claude-3-5-haiku-20241022"

class GeminiClient:
    """Generate text with Google Gemini."""

    display_name = "Gemini"

    def __init__(self, api_key: str, model: str = DEFAULT_GEMINI_MODEL, client: Optional[Any] = None):
        self.model = model
        self.client = client if client is not None else genai.Client(api_key=api_key)

    def generate(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt
        )
        # Blocked or empty candidates come back without text
        if response.text is None:
            raise ValueError("Gemini returned no text")
        return response.text

class ClaudeClient:
    """Generate text with Anthropic Claude."""

    display_name = "Claude"

    def __init__(self, api_key: str, model: str = DEFAULT_CLAUDE_MODEL, client: Optional[Any] = None):
        self.model = model
        self.client = client if client is not None else anthropic.Anthropic(api_key=api_key)

    def generate(self, prompt: str) -> str:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=2000,
            temperature=0.2,
            system="You are a helpful research assistant analyzing web search results.",
            messages=[
                {"role": "user", "content": prompt}
            ]
        )
        return response.content[0].text

def create_generation_client(config) -> Any:
    """
    Create the generation client selected by the configuration.

    Args:
        config: Resolved Config instance

    Returns:
        GeminiClient or ClaudeClient
    """
    if config.summary_provider == "claude":
        return ClaudeClient(config.anthropic_api_key, model=config.claude_model)
    return GeminiClient(config.gemini_api_key, model=config.gemini_model)
