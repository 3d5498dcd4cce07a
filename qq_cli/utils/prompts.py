"""Prompt management for qq_cli."""

import os
from typing import Optional

from qq_cli.utils.constants import PROMPTS_DIR


def load_prompt(prompt_name: str) -> str:
    """
    Load a prompt from a file in the prompts directory.

    Args:
        prompt_name: Name of the prompt file (without .md extension)

    Returns:
        The content of the prompt file

    Raises:
        FileNotFoundError: If the prompt file doesn't exist
    """
    prompt_path = os.path.join(PROMPTS_DIR, f"{prompt_name}.md")

    with open(prompt_path, "r") as f:
        return f.read().strip()


def strip_prompt_comments(text: str) -> str:
    """Remove '#' comment lines from a user-written prompt."""
    lines = [line for line in text.splitlines() if not line.lstrip().startswith("#")]
    return "\n".join(lines).strip()


def get_system_prompt(custom_prompt: Optional[str] = None) -> str:
    """
    Build the system prompt sent with every question.

    Args:
        custom_prompt: Raw content of the user's custom prompt file, if any.
            It is appended to the default prompt once comments are removed.

    Returns:
        Complete system prompt string
    """
    system_prompt = load_prompt("base_system_prompt")

    if custom_prompt:
        extra = strip_prompt_comments(custom_prompt)
        if extra:
            system_prompt += f"\n\n{extra}"

    return system_prompt
