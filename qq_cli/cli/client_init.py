"""Client initialization for qq_cli.

This module handles the initialization of the LLM client from configuration.
"""

from typing import Any
from rich.console import Console

from qq_cli.utils.constants import get_debug
from qq_cli.config.providers import is_valid_model_for_provider


def validate_model(model: str, console: Console) -> bool:
    """Warn when the model doesn't look like an Anthropic model.

    Args:
        model: Model name
        console: Console instance for output

    Returns:
        True if valid, False otherwise
    """
    valid = is_valid_model_for_provider(model)

    if not valid:
        console.print(
            f"[bold yellow]Warning: Model '{model}' doesn't appear to be a "
            f"Claude model. This may cause errors.[/bold yellow]"
        )

    return valid


def initialize_llm_client(api_key: str, args: Any, console: Console):
    """Initialize LLM client with error handling.

    Args:
        api_key: Anthropic API key
        args: Command line arguments with model set
        console: Console for output

    Returns:
        Initialized LLM client
    """
    try:
        validate_model(args.model, console)

        # Lazy import LLMClient only when needed
        from qq_cli.utils.client import LLMClient

        client = LLMClient(api_key=api_key, model=args.model)

        if get_debug():
            console.print(f"[dim]Using model: {client.model}[/dim]")

        return client

    except Exception as e:
        console.print(f"[bold red]Error initializing LLM client: {str(e)}[/bold red]")
        console.print("[yellow]Please check your API key and try again.[/yellow]")
        raise
