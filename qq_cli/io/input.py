"""Input handling for qq_cli."""

import sys
from typing import Any, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style
from rich.console import Console

from qq_cli.utils.constants import (
    HISTORY_PATH,
    QUESTION_PROMPT,
    get_debug,
)
from qq_cli.utils.helpers import looks_like_incomplete_input


def create_prompt_session(console: Console) -> PromptSession:
    """Create a PromptSession with persistent question history."""
    prompt_style = Style.from_dict(
        {
            "": "#ff8800",  # Orange input text
        }
    )

    prompt_session: PromptSession = PromptSession(
        history=FileHistory(HISTORY_PATH),
        style=prompt_style,
        mouse_support=False,  # Allow normal terminal scrolling
    )

    if get_debug():
        console.print(f"[dim]Using history file: {HISTORY_PATH}[/dim]")

    return prompt_session


def get_input(
    prompt: str = "",
    session: Optional[PromptSession] = None,
    is_password: bool = False,
) -> str:
    """
    Get user input using prompt_toolkit.

    Args:
        prompt: The prompt text to display
        session: Optional PromptSession object for history and styling
        is_password: Mask the typed characters

    Returns:
        The input text provided by the user

    Raises:
        SystemExit: If the user exits with Ctrl+C or Ctrl+D
    """
    try:
        if session:
            return session.prompt(prompt, is_password=is_password)
        return input(prompt)
    except (KeyboardInterrupt, EOFError):
        sys.exit(0)


def read_piped_input() -> str:
    """Read a question piped or redirected into stdin."""
    return sys.stdin.read().strip()


def ask_for_question(session: Optional[PromptSession] = None) -> str:
    """Read a question from stdin when it's piped, otherwise prompt for it."""
    if not sys.stdin.isatty():
        return read_piped_input()
    return get_input(QUESTION_PROMPT, session=session).strip()


def get_initial_question(
    args: Any, prompt_session: Optional[PromptSession], console: Console
) -> str:
    """
    Get the question from the command line, stdin or an interactive prompt.

    Args:
        args: Command line arguments
        prompt_session: Session used for interactive prompts
        console: Console for output

    Returns:
        The question string (may be empty)
    """
    if getattr(args, "interactive", False) or not args.question:
        return ask_for_question(prompt_session)

    question = " ".join(args.question)
    if looks_like_incomplete_input(question):
        console.print(
            "🤔 It looks like your question might have been cut off by the shell."
        )
        console.print(
            "💡 Tip: Put quotes around questions with apostrophes or special characters:"
        )
        console.print('   qq "your question here"', markup=False, highlight=False)
        console.print("   Or use interactive mode: qq -i", highlight=False)
        console.print("")
        return get_input(
            "Enter your complete question: ", session=prompt_session
        ).strip()

    if prompt_session is not None:
        prompt_session.history.append_string(question.strip())
    return question
