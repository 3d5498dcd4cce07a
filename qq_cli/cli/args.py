"""Command line argument parsing for qq_cli."""

import argparse
from qq_cli import __version__


def setup_argparse() -> argparse.ArgumentParser:
    """Set up the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="qq",
        description="Quick Question - Get fast answers in your terminal",
    )
    parser.add_argument("question", nargs="*", help="The question to ask")
    parser.add_argument(
        "--setup", action="store_true", help="Run the setup process"
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="Interactive mode - prompt for question",
    )
    parser.add_argument(
        "--api-key",
        "-k",
        help="Anthropic API key (defaults to CLAUDE_API_KEY, ANTHROPIC_API_KEY or the config file)",
    )
    parser.add_argument(
        "--model",
        "-m",
        help="Model to use (defaults to config file or claude-sonnet-4-20250514)",
    )
    parser.add_argument(
        "--max-tokens",
        "-t",
        type=int,
        help="Maximum tokens in the answer (defaults to config file or 300)",
    )
    parser.add_argument(
        "--no-md",
        "-p",
        action="store_true",
        help="Disable markdown formatting of responses",
    )
    parser.add_argument(
        "--typewriter",
        action="store_true",
        help="Print the answer with a simulated typing effect",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the request that would be sent and exit",
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", help="Enable debug output"
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show program version and exit",
    )
    return parser
