"""Configuration manager for qq_cli.

This module provides a unified interface for loading, saving and accessing
configuration from multiple sources (config file, environment variables,
command line arguments).
"""

import os
from typing import Dict, Any, Optional
from rich.console import Console

from qq_cli.config.providers import (
    DEFAULT_MODEL,
    DEFAULT_MAX_TOKENS,
    parse_max_tokens,
)
from qq_cli.utils.constants import (
    API_KEY_ENV_VARS,
    CONFIG_PATH,
    CUSTOM_PROMPT_PATH,
    CUSTOM_PROMPT_TEMPLATE,
    get_debug,
)


class ConfigNotFoundError(Exception):
    """Raised when the config file has not been created yet."""


class ConfigManager:
    """Configuration manager for qq_cli.

    Handles loading and accessing configuration from multiple sources:
    1. Command line arguments
    2. Environment variables
    3. Config file
    4. Default values
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        config_path: str = CONFIG_PATH,
        custom_prompt_path: str = CUSTOM_PROMPT_PATH,
    ):
        """Initialize the configuration manager.

        Args:
            console: Rich console for output
            config_path: Location of the KEY=VALUE config file
            custom_prompt_path: Location of the custom prompt file
        """
        self.console = console or Console()
        self.config_path = config_path
        self.custom_prompt_path = custom_prompt_path
        self.config_vars: Dict[str, str] = {}

    def exists(self) -> bool:
        """Return True if the config file has been created."""
        return os.path.exists(self.config_path)

    def load_config(self) -> Dict[str, str]:
        """Load configuration from file.

        Returns:
            Dictionary of configuration variables

        Raises:
            ConfigNotFoundError: If the config file doesn't exist
        """
        if not self.exists():
            raise ConfigNotFoundError(f"Config file not found: {self.config_path}")

        config_vars: Dict[str, str] = {}
        with open(self.config_path, "r") as f:
            lines = f.readlines()

        for line in lines:
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            # Drop inline comments
            if " #" in value:
                value = value.split(" #", 1)[0]
            config_vars[key.strip()] = value.strip()

        self.config_vars = config_vars

        if get_debug():
            self.console.print(
                f"[dim]Loaded {len(config_vars)} settings from {self.config_path}[/dim]"
            )

        return config_vars

    def save_config(self, values: Dict[str, Any]) -> str:
        """Write configuration to file, creating the config directory if needed.

        Args:
            values: Configuration variables to store

        Returns:
            The path of the written config file
        """
        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        lines = ["# Quick Question configuration\n"]
        for key, value in values.items():
            lines.append(f"{key}={value}\n")

        with open(self.config_path, "w") as f:
            f.writelines(lines)

        self.config_vars = {key: str(value) for key, value in values.items()}
        return self.config_path

    def get_api_key(self, args: Any) -> Optional[str]:
        """Resolve the API key.

        Args:
            args: Command line arguments

        Returns:
            The API key, or None if none is configured
        """
        if getattr(args, "api_key", None):
            return args.api_key

        for env_var in API_KEY_ENV_VARS:
            api_key = os.environ.get(env_var)
            if api_key:
                return api_key

        return self.config_vars.get("API_KEY") or None

    def configure_model_settings(self, args: Any) -> None:
        """Fill in model and max_tokens on args when not given on the command line.

        Args:
            args: Command line arguments
        """
        if not getattr(args, "model", None):
            args.model = self.config_vars.get("MODEL") or DEFAULT_MODEL

        if getattr(args, "max_tokens", None) is None:
            args.max_tokens = parse_max_tokens(
                self.config_vars.get("MAX_TOKENS", DEFAULT_MAX_TOKENS)
            )
        else:
            args.max_tokens = parse_max_tokens(args.max_tokens)

    def load_custom_prompt(self) -> Optional[str]:
        """Read the custom prompt file.

        Returns:
            The file content, or None if the file doesn't exist
        """
        if not os.path.exists(self.custom_prompt_path):
            return None

        try:
            with open(self.custom_prompt_path, "r") as f:
                return f.read()
        except OSError as e:
            self.console.print(
                f"[yellow]Could not read custom prompt file: {str(e)}[/yellow]"
            )
            return None

    def create_custom_prompt_file(self) -> bool:
        """Create the custom prompt template if it doesn't exist yet.

        Returns:
            True if the file was created, False if it already existed
        """
        if os.path.exists(self.custom_prompt_path):
            return False

        directory = os.path.dirname(self.custom_prompt_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.custom_prompt_path, "w") as f:
            f.write(CUSTOM_PROMPT_TEMPLATE)
        return True
