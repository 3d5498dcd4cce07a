"""Tests for the LLM client module."""

import os
import pytest
from unittest.mock import patch, MagicMock

from qq_cli.utils.client import LLMClient, ResponseFormatError


def _completion_response(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


class TestLLMClient:
    """Tests for the LLMClient class."""

    def test_initialization_with_defaults(self, temp_env):
        client = LLMClient()
        assert client.model == "anthropic/claude-sonnet-4-20250514"

    def test_initialization_sets_api_key(self, temp_env):
        client = LLMClient(api_key="test_api_key", model="claude-3-7-sonnet-latest")

        assert client.model == "anthropic/claude-3-7-sonnet-latest"
        assert os.environ["ANTHROPIC_API_KEY"] == "test_api_key"

    @patch("litellm.completion")
    def test_ask(self, mock_completion, temp_env):
        mock_completion.return_value = _completion_response("**Paris**")

        client = LLMClient(api_key="key", model="claude-sonnet-4-20250514")
        answer = client.ask("Capital of France?", "Be brief", max_tokens=300)

        assert answer == "**Paris**"
        mock_completion.assert_called_once_with(
            model="anthropic/claude-sonnet-4-20250514",
            messages=[
                {"role": "system", "content": "Be brief"},
                {"role": "user", "content": "Capital of France?"},
            ],
            max_tokens=300,
        )

    @patch("litellm.completion")
    def test_ask_without_system_prompt(self, mock_completion, temp_env):
        mock_completion.return_value = _completion_response("hi")

        LLMClient(api_key="key").ask("hello", "")

        messages = mock_completion.call_args[1]["messages"]
        assert messages == [{"role": "user", "content": "hello"}]

    @patch("litellm.completion")
    def test_ask_dict_message(self, mock_completion, temp_env):
        response = MagicMock()
        choice = MagicMock()
        choice.message = {"content": "from dict"}
        response.choices = [choice]
        mock_completion.return_value = response

        assert LLMClient(api_key="key").ask("q", "s") == "from dict"

    @patch("litellm.completion")
    def test_ask_no_choices(self, mock_completion, temp_env):
        response = MagicMock()
        response.choices = []
        mock_completion.return_value = response

        with pytest.raises(ResponseFormatError):
            LLMClient(api_key="key").ask("q", "s")

    @patch("litellm.completion")
    def test_ask_missing_content(self, mock_completion, temp_env):
        mock_completion.return_value = _completion_response(None)

        with pytest.raises(ResponseFormatError, match="Unexpected response format"):
            LLMClient(api_key="key").ask("q", "s")

    @patch("litellm.completion")
    def test_ask_propagates_api_errors(self, mock_completion, temp_env):
        mock_completion.side_effect = RuntimeError("connection refused")

        with pytest.raises(RuntimeError):
            LLMClient(api_key="key").ask("q", "s")
