"""Helper functions used throughout the qq_cli package."""

from rich.console import Console
from rich.markup import escape

from qq_cli.utils.constants import SHELL_SPECIAL_CHARS, get_debug

NETWORK_ERROR_MESSAGE = "Sorry, I can't answer that without an active internet connection"
QUOTA_ERROR_MESSAGE = "Looks like you ran out of tokens, time to pay up."
AUTH_ERROR_MESSAGE = "Authentication failed. Check your API key configuration."


def looks_like_incomplete_input(text: str) -> bool:
    """
    Check whether a command-line question was probably cut off by the shell.

    Args:
        text: The question joined from the positional arguments

    Returns:
        True for unclosed quotes, a trailing backslash, empty input, or very
        short input containing shell special characters
    """
    return (
        text.endswith("'")
        or text.endswith('"')
        or text.endswith("\\")
        or text == ""
        or (len(text) < 5 and any(c in SHELL_SPECIAL_CHARS for c in text))
    )


def classify_api_error(e: Exception) -> str:
    """
    Map an error from the completion request to a user-facing message.

    Args:
        e: The exception that occurred

    Returns:
        The message to show the user
    """
    # Lazy import to reduce startup time
    import litellm

    if isinstance(e, (litellm.exceptions.APIConnectionError, litellm.exceptions.Timeout)):
        return NETWORK_ERROR_MESSAGE
    if isinstance(e, litellm.exceptions.RateLimitError):
        return QUOTA_ERROR_MESSAGE
    if isinstance(e, litellm.exceptions.AuthenticationError):
        return AUTH_ERROR_MESSAGE

    # Anything else is matched on its message
    error_str = str(e).lower()
    if "network" in error_str or "connection" in error_str:
        return NETWORK_ERROR_MESSAGE
    if "token" in error_str or "quota" in error_str:
        return QUOTA_ERROR_MESSAGE
    if "401" in error_str or "authentication" in error_str:
        return AUTH_ERROR_MESSAGE
    return f"Something went wrong: {e}"


def handle_api_error(e: Exception, console: Console) -> int:
    """
    Report a failed completion request.

    Args:
        e: The exception that occurred
        console: Console for output

    Returns:
        The exit status the program should end with
    """
    console.print(f"[bold red]{escape(classify_api_error(e))}[/bold red]")

    if get_debug():
        console.print(f"[dim]Error details ({type(e).__name__}): {escape(str(e))}[/dim]")

    return 1
