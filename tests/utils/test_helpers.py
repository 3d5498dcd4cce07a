"""Tests for helper functions module."""

import os
import pytest
from unittest.mock import MagicMock
import litellm

from qq_cli.utils.helpers import (
    looks_like_incomplete_input,
    classify_api_error,
    handle_api_error,
    NETWORK_ERROR_MESSAGE,
    QUOTA_ERROR_MESSAGE,
    AUTH_ERROR_MESSAGE,
)


class TestLooksLikeIncompleteInput:
    """Tests for shell-mangled input detection."""

    @pytest.mark.parametrize(
        "text",
        ["what'", 'say hi"', "trailing\\", "", "a`b"],
    )
    def test_incomplete(self, text):
        assert looks_like_incomplete_input(text)

    @pytest.mark.parametrize(
        "text",
        ["What is Python?", "hi", "don't panic please", "a`b`c`d`e"],
    )
    def test_complete(self, text):
        assert not looks_like_incomplete_input(text)


class TestClassifyApiError:
    """Tests for mapping API errors to user messages."""

    def test_connection_error(self):
        error = litellm.exceptions.APIConnectionError(
            message="boom", llm_provider="anthropic", model="claude"
        )
        assert classify_api_error(error) == NETWORK_ERROR_MESSAGE

    def test_rate_limit_error(self):
        error = litellm.exceptions.RateLimitError(
            message="slow down", llm_provider="anthropic", model="claude"
        )
        assert classify_api_error(error) == QUOTA_ERROR_MESSAGE

    def test_authentication_error(self):
        error = litellm.exceptions.AuthenticationError(
            message="invalid x-api-key", llm_provider="anthropic", model="claude"
        )
        assert classify_api_error(error) == AUTH_ERROR_MESSAGE

    def test_message_based_matching(self):
        assert classify_api_error(Exception("network unreachable")) == NETWORK_ERROR_MESSAGE
        assert classify_api_error(Exception("Connection reset")) == NETWORK_ERROR_MESSAGE
        assert classify_api_error(Exception("quota exceeded")) == QUOTA_ERROR_MESSAGE
        assert classify_api_error(Exception("max token limit")) == QUOTA_ERROR_MESSAGE
        assert classify_api_error(Exception("HTTP 401")) == AUTH_ERROR_MESSAGE

    def test_generic_error(self):
        assert classify_api_error(ValueError("odd")) == "Something went wrong: odd"


class TestHandleApiError:
    """Tests for handle_api_error."""

    def test_prints_message_and_returns_status(self, mock_console, temp_env):
        os.environ.pop("QQ_DEBUG", None)

        status = handle_api_error(Exception("quota exceeded"), mock_console)

        assert status == 1
        mock_console.print.assert_called_once()
        assert QUOTA_ERROR_MESSAGE in mock_console.print.call_args[0][0]

    def test_escapes_markup_in_error(self, mock_console, temp_env):
        handle_api_error(Exception("[bold]weird[/bold]"), mock_console)

        output = mock_console.print.call_args[0][0]
        assert "\\[bold]weird" in output

    def test_debug_details(self, mock_console, temp_env):
        os.environ["QQ_DEBUG"] = "true"

        handle_api_error(ValueError("odd"), mock_console)

        assert mock_console.print.call_count == 2
        assert "ValueError" in mock_console.print.call_args[0][0]
