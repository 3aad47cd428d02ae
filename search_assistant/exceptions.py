"""
Exceptions raised by the Search Assistant.
"""


class SearchAssistantError(Exception):
    """Base class for all Search Assistant errors."""


class ConfigurationError(SearchAssistantError):
    """Required configuration is missing or could not be read."""


class CommandNotFoundError(SearchAssistantError):
    """The requested command-line command is not registered."""


class SearchError(SearchAssistantError):
    """The search provider call failed."""
