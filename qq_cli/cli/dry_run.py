"""Dry run functionality for qq_cli."""

from typing import Any
from rich.console import Console
from rich.markup import escape


def handle_dry_run(
    args: Any,
    question: str,
    system_prompt: str,
    console: Console
) -> bool:
    """Handle dry run mode if enabled.

    Args:
        args: Command line arguments
        question: Question from the user
        system_prompt: System prompt that would be sent
        console: Console for output

    Returns:
        True if dry run was handled and program should exit, False otherwise
    """
    if not getattr(args, "dry_run", False):
        return False

    dry_run_output = (
        "\n===== DRY RUN MODE =====\n\n"
        f"[bold blue]Model:[/bold blue] {escape(str(args.model))}\n"
        f"[bold blue]Max tokens:[/bold blue] {args.max_tokens}\n\n"
        f"[bold green]System prompt:[/bold green]\n{escape(system_prompt)}\n\n"
        f"[bold yellow]User message:[/bold yellow]\n{escape(question)}\n"
    )

    console.print(dry_run_output)
    return True
