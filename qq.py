#!/usr/bin/env python3
"""
Quick Question - fast answers from Claude in your terminal.
This module serves as the entry point for the qq_cli package.
"""

from qq_cli import main

if __name__ == "__main__":
    main()
