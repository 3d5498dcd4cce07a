"""Main entry point for the qq_cli package."""

import os
import sys
from typing import Any, List, Optional, Tuple
from rich.console import Console
from rich.markup import escape

from qq_cli.config.manager import ConfigManager, ConfigNotFoundError
from qq_cli.cli.args import setup_argparse
from qq_cli.cli.client_init import initialize_llm_client
from qq_cli.cli.dry_run import handle_dry_run
from qq_cli.cli.setup_wizard import run_setup
from qq_cli.io.input import create_prompt_session, get_initial_question
from qq_cli.io.output import setup_console, print_response
from qq_cli.utils.constants import get_debug
from qq_cli.utils.helpers import handle_api_error
from qq_cli.utils.prompts import get_system_prompt


def initialize_cli(argv: Optional[List[str]] = None) -> Tuple[Any, Console]:
    """Initialize CLI arguments and console setup.

    Args:
        argv: Arguments to parse instead of sys.argv

    Returns:
        Tuple containing parsed arguments and console
    """
    parser = setup_argparse()
    args = parser.parse_args(argv)

    if args.debug:
        os.environ["QQ_DEBUG"] = "true"

    console = setup_console()

    if get_debug():
        console.print("[dim]Debug mode enabled[/dim]")

    return args, console


def load_configuration(
    config_manager: ConfigManager, args: Any, console: Console, prompt_session=None
) -> None:
    """Load the config file, running first-time setup when there is none.

    Setup is skipped when an API key is already available from the command
    line or the environment.

    Args:
        config_manager: Configuration manager
        args: Command line arguments
        console: Console for output
        prompt_session: Optional prompt session for setup input
    """
    try:
        config_manager.load_config()
    except ConfigNotFoundError:
        if config_manager.get_api_key(args):
            return
        console.print("🔧 First time setup needed!")
        run_setup(config_manager, console, prompt_session)
        config_manager.load_config()


def ask_question(
    client,
    question: str,
    system_prompt: str,
    args: Any,
    console: Console,
    err_console: Optional[Console] = None,
) -> int:
    """Send the question and print the answer.

    Args:
        client: LLM client
        question: The user's question
        system_prompt: System prompt
        args: Command line arguments
        console: Console for the answer
        err_console: Console for API errors, defaults to console

    Returns:
        Exit status
    """
    try:
        with console.status("[info]Thinking...[/info]"):
            answer = client.ask(question, system_prompt, max_tokens=args.max_tokens)
    except KeyboardInterrupt:
        console.print("\n[yellow]Request interrupted. Exiting.[/yellow]")
        return 0
    except Exception as e:
        return handle_api_error(e, err_console or console)

    print_response(
        console,
        answer,
        markdown=not args.no_md,
        typewriter=args.typewriter,
    )
    return 0


def main() -> None:
    """Main entry point for the CLI."""
    try:
        args, console = initialize_cli()

        config_manager = ConfigManager(console)
        err_console = setup_console(stderr=True)

        # Only build a prompt_toolkit session when there is a terminal to prompt on
        prompt_session = create_prompt_session(console) if sys.stdin.isatty() else None

        if args.setup:
            run_setup(config_manager, console, prompt_session)
            return

        question = get_initial_question(args, prompt_session, console)
        if not question.strip():
            console.print("❌ No question provided.")
            return

        load_configuration(config_manager, args, console, prompt_session)
        config_manager.configure_model_settings(args)

        system_prompt = get_system_prompt(config_manager.load_custom_prompt())

        if handle_dry_run(args, question, system_prompt, console):
            return

        api_key = config_manager.get_api_key(args)
        if not api_key:
            err_console.print(
                "[bold red]Error: API key not provided. Run 'qq --setup', set "
                "CLAUDE_API_KEY or use --api-key[/bold red]"
            )
            sys.exit(1)

        client = initialize_llm_client(api_key, args, console)

        sys.exit(
            ask_question(client, question, system_prompt, args, console, err_console)
        )

    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        # Last chance to catch any uncaught exceptions
        console = setup_console(stderr=True)
        console.print(f"\n[bold red]Fatal error: {escape(str(e))}[/bold red]")
        if get_debug():
            import traceback
            console.print(traceback.format_exc(), style="red", markup=False)
        console.print(
            "[yellow]The application encountered a fatal error and must exit.[/yellow]"
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
