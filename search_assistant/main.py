"""
Command-line interface for the Search Assistant.
"""

import sys
import argparse
from typing import List, Optional

from .config import Config, load_config, print_config
from .exceptions import CommandNotFoundError, SearchAssistantError
from .generation import create_generation_client
from .models import Command
from .output import ResultRenderer, format_help
from .search import GoogleSearchClient
from .search_assistant import SearchAssistant

PROG = "search-assistant"

def run_search(config: Config, renderer: ResultRenderer) -> int:
    """Start the interactive search loop."""
    search_client = GoogleSearchClient(config.google_api_key, config.google_cse_id)
    generation_client = create_generation_client(config)
    SearchAssistant(search_client, generation_client, renderer=renderer).run()
    return 0

def show_help(config: Config, renderer: ResultRenderer) -> int:
    """Print the command reference."""
    renderer.render_markdown(format_help(COMMANDS))
    return 0

COMMANDS: List[Command] = [
    Command(
        name="search",
        description="Browse for information using Google",
        usage=f"{PROG} search",
        execute=run_search
    ),
    Command(
        name="help",
        description="Show available commands",
        usage=f"{PROG} help",
        execute=show_help
    ),
]

def find_command(name: Optional[str], commands: List[Command] = COMMANDS) -> Command:
    for command in commands:
        if command.name == name:
            return command
    raise CommandNotFoundError(
        f'Command doesn\'t exist; please run "{PROG} help" for more information.'
    )

def main(argv: Optional[List[str]] = None, renderer: Optional[ResultRenderer] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = argparse.ArgumentParser(prog=PROG, description="Search the web with Google and analyze the results")
    parser.add_argument("command", nargs="?", help="Command to run (search, help)")
    parser.add_argument("--config", "-c", type=str, help="Path to a JSON or YAML config file with API keys")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print the resolved configuration")

    args = parser.parse_args(argv)

    try:
        # Credentials are checked before any command runs
        config = load_config(args.config)
        if args.verbose:
            print_config(config)

        command = find_command(args.command)
        return command.execute(config, renderer if renderer is not None else ResultRenderer())
    except SearchAssistantError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
