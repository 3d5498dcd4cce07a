"""Output handling for qq_cli."""

import re
import time
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from qq_cli.utils.constants import TYPEWRITER_DELAY
from qq_cli.utils.formatting import format_for_terminal

# One SGR sequence or one plain character
_TYPEWRITER_TOKEN = re.compile(r"\x1b\[[0-9;]*m|.", re.DOTALL)


def setup_console(stderr: bool = False) -> Console:
    """Set up and configure the Rich console for output.

    Args:
        stderr: Write to standard error, for error reports
    """
    # Custom theme for the console
    custom_theme = Theme(
        {
            "info": "dim cyan",
            "warning": "magenta",
            "error": "bold red",
            "prompt": "orange1",
            "subdued": "dim dim",
        }
    )

    return Console(theme=custom_theme, stderr=stderr)


def print_response(
    console: Console,
    response: str,
    markdown: bool = True,
    typewriter: bool = False,
    delay: float = TYPEWRITER_DELAY,
) -> None:
    """
    Print a model response.

    Args:
        console: Console instance for output
        response: The raw response text
        markdown: Convert Markdown emphasis to terminal styles
        typewriter: Simulate typing, one character at a time
        delay: Seconds between characters in typewriter mode
    """
    text = format_for_terminal(response) if markdown else response

    if typewriter and console.is_terminal:
        type_out(console, text, delay)
        return

    if markdown:
        console.print(Text.from_ansi(text), soft_wrap=True)
    else:
        console.print(text, markup=False, highlight=False, soft_wrap=True)


def type_out(console: Console, text: str, delay: float = TYPEWRITER_DELAY) -> None:
    """
    Write text to the console file one character at a time.

    Escape sequences are written whole so the terminal never sees half of one.

    Args:
        console: Console whose file receives the text
        text: Text to write, possibly containing SGR sequences
        delay: Seconds to wait after each visible character
    """
    stream = console.file
    for match in _TYPEWRITER_TOKEN.finditer(text):
        token = match.group(0)
        stream.write(token)
        if not token.startswith("\x1b"):
            stream.flush()
            time.sleep(delay)
    stream.write("\n")
    stream.flush()
