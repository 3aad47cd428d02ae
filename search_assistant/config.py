"""
Configuration handling for the Search Assistant.
"""

import os
import sys
import json
from dataclasses import dataclass
from typing import Dict, Any, Optional
import yaml
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .generation import DEFAULT_CLAUDE_MODEL, DEFAULT_GEMINI_MODEL

REQUIRED_ENV_KEYS = ["GEMINI_API_KEY", "GOOGLE_CUSTOM_SEARCH_API_KEY", "GOOGLE_CSE_ID"]

SUMMARY_PROVIDERS = ("gemini", "claude")

@dataclass(frozen=True)
class Config:
    """
    Resolved configuration, built once at startup.
    """
    gemini_api_key: str
    google_api_key: str                    # Google Custom Search API key
    google_cse_id: str                     # Custom Search Engine ID
    summary_provider: str = "gemini"
    gemini_model: str = DEFAULT_GEMINI_MODEL
    anthropic_api_key: Optional[str] = None
    claude_model: str = DEFAULT_CLAUDE_MODEL

def _mask(value: Optional[str]) -> str:
    if not value:
        return "<not set>"
    if len(value) <= 10:
        return "*" * len(value)
    return f"{value[:5]}...{value[-5:]}"

def read_config_file(config_file: str) -> Dict[str, Any]:
    """
    Read a JSON or YAML config file mapping environment variable names to values.

    Args:
        config_file: Path to a .json, .yaml or .yml file

    Returns:
        Dictionary with the file's settings
    """
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            if config_file.endswith(('.yaml', '.yml')):
                file_config = yaml.safe_load(f) or {}
            else:
                file_config = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Error loading config file {config_file}: {e}") from e

    if not isinstance(file_config, dict):
        raise ConfigurationError(f"Config file {config_file} must contain a mapping of settings")

    return file_config

def load_config(config_file: Optional[str] = None, env_file: Optional[str] = None) -> Config:
    """
    Load configuration from a config file, a .env file and environment variables.

    Args:
        config_file: Optional path to a JSON or YAML config file
        env_file: Optional path to a .env file, searched for when omitted

    Returns:
        Validated Config
    """
    # Never overrides variables that are already set
    load_dotenv(env_file or find_dotenv(usecwd=True))

    if config_file:
        for key, value in read_config_file(config_file).items():
            # Lowest precedence: the environment and .env win
            if value is None:
                continue
            os.environ.setdefault(str(key), str(value))

    for env_key in REQUIRED_ENV_KEYS:
        if not os.environ.get(env_key):
            raise ConfigurationError(
                f"{env_key} environment variable is not set. "
                "Please set it before running this application."
            )

    summary_provider = os.environ.get("SUMMARY_PROVIDER", "gemini").strip().lower() or "gemini"
    if summary_provider not in SUMMARY_PROVIDERS:
        raise ConfigurationError(
            f"Unknown SUMMARY_PROVIDER '{summary_provider}'; expected one of: {', '.join(SUMMARY_PROVIDERS)}"
        )

    anthropic_api_key = os.environ.get("ANTHROPIC_API_KEY") or None
    if summary_provider == "claude" and not anthropic_api_key:
        raise ConfigurationError(
            "ANTHROPIC_API_KEY environment variable is not set. "
            "It is required when SUMMARY_PROVIDER is 'claude'."
        )

    return Config(
        gemini_api_key=os.environ["GEMINI_API_KEY"],
        google_api_key=os.environ["GOOGLE_CUSTOM_SEARCH_API_KEY"],
        google_cse_id=os.environ["GOOGLE_CSE_ID"],
        summary_provider=summary_provider,
        gemini_model=os.environ.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        anthropic_api_key=anthropic_api_key,
        claude_model=os.environ.get("CLAUDE_MODEL") or DEFAULT_CLAUDE_MODEL
    )

def print_config(config: Config, stream=None) -> None:
    """
    Print the resolved configuration with credentials masked.
    """
    stream = stream if stream is not None else sys.stderr
    print("Search Assistant Configuration:", file=stream)
    print(f"- Summary provider: {config.summary_provider}", file=stream)
    if config.summary_provider == "claude":
        print(f"- Claude model: {config.claude_model}", file=stream)
        print(f"- Using Anthropic API key: {_mask(config.anthropic_api_key)}", file=stream)
    else:
        print(f"- Gemini model: {config.gemini_model}", file=stream)
        print(f"- Using Gemini API key: {_mask(config.gemini_api_key)}", file=stream)
    print(f"- Google CSE ID: {_mask(config.google_cse_id)}", file=stream)
    print(f"- Using Google API key: {_mask(config.google_api_key)}", file=stream)
