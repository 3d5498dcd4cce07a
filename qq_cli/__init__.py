"""
Quick Question - get fast answers from Claude in your terminal.
This package provides a small CLI that sends one question to the model
and prints the answer with terminal-friendly formatting.
"""

__version__ = "0.1.0"

from qq_cli.cli.main import main

__all__ = ["main"]
