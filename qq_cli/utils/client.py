"""LLM client wrapper for qq_cli using LiteLLM."""

import os
from typing import Dict, List, Optional, Any
import litellm

from qq_cli.utils.constants import get_debug
from qq_cli.config.providers import (
    DEFAULT_MODEL,
    DEFAULT_MAX_TOKENS,
    format_model_name,
)


class ResponseFormatError(Exception):
    """Raised when a completion carries no answer text."""


class LLMClient:
    """Client wrapper for Anthropic models via LiteLLM."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """
        Initialize the LLM client.

        Args:
            api_key: Anthropic API key
            model: Model name to use
        """
        self.api_key = api_key
        self.model = format_model_name(model or DEFAULT_MODEL)

        # LiteLLM picks the key up from the environment
        if api_key:
            os.environ["ANTHROPIC_API_KEY"] = api_key

        self.client = litellm

        if get_debug():
            print(f"Initialized LLMClient with model={self.model}")

    def ask(
        self,
        question: str,
        system: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        **kwargs
    ) -> str:
        """
        Send a single question and return the answer text.

        Args:
            question: The user's question
            system: System prompt
            max_tokens: Maximum number of tokens to generate
            **kwargs: Additional arguments to pass to the API

        Returns:
            The text of the first choice

        Raises:
            ResponseFormatError: If the response has no text content
        """
        messages = self._build_messages(question, system)

        request_params = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
        }
        request_params.update(kwargs)

        if get_debug():
            print(f"LiteLLM request: model={self.model}, max_tokens={max_tokens}")

        try:
            response = self.client.completion(**request_params)
        except Exception as e:
            if get_debug():
                print(f"LiteLLM error ({type(e).__name__}): {str(e)}")
            raise

        return self._extract_text(response)

    def _build_messages(self, question: str, system: str) -> List[Dict[str, Any]]:
        """Build the LiteLLM message list for one question."""
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": question})
        return messages

    def _extract_text(self, response: Any) -> str:
        """
        Pull the answer text out of a LiteLLM response.

        Args:
            response: The response from LiteLLM

        Returns:
            The message content of the first choice

        Raises:
            ResponseFormatError: If there is no text to return
        """
        choices = getattr(response, "choices", None)
        if not choices:
            raise ResponseFormatError("Unexpected response format")

        message = getattr(choices[0], "message", None)
        if isinstance(message, dict):
            content = message.get("content")
        else:
            content = getattr(message, "content", None)

        if not isinstance(content, str):
            raise ResponseFormatError("Unexpected response format")

        return content
