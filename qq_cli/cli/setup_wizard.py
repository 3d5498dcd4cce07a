"""First-time setup for qq_cli."""

import sys
from typing import Optional

from prompt_toolkit import PromptSession
from rich.console import Console

from qq_cli.config.manager import ConfigManager
from qq_cli.config.providers import DEFAULT_MODEL, DEFAULT_MAX_TOKENS
from qq_cli.io.input import get_input
from qq_cli.io.output import setup_console


def run_setup(
    config_manager: ConfigManager,
    console: Console,
    session: Optional[PromptSession] = None,
) -> str:
    """Ask for an API key and write a fresh config file.

    Args:
        config_manager: Manager that owns the config file
        console: Console for output
        session: Optional prompt session for masked input

    Returns:
        Path of the written config file
    """
    console.print("Welcome to Quick Question setup! 🚀")
    console.print("")

    api_key = get_input(
        "Please enter your Claude API key: ", session=session, is_password=True
    ).strip()

    if not api_key:
        setup_console(stderr=True).print("[bold red]API key cannot be empty.[/bold red]")
        sys.exit(1)

    config_path = config_manager.save_config(
        {
            "API_KEY": api_key,
            "MODEL": DEFAULT_MODEL,
            "MAX_TOKENS": DEFAULT_MAX_TOKENS,
        }
    )
    config_manager.create_custom_prompt_file()

    console.print("✅ Configuration saved!")
    console.print(f"📁 Config file: {config_path}", highlight=False)
    console.print(
        f"📝 Custom prompt: {config_manager.custom_prompt_path}", highlight=False
    )
    console.print("🔧 You can edit model and max_tokens settings there if needed.")
    console.print("")
    console.print('Try it out: qq "What is Python?"', markup=False, highlight=False)

    return config_path
