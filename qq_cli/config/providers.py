"""Provider configuration for qq_cli.

qq talks to Anthropic through LiteLLM; this module holds the model
defaults and the LiteLLM naming rules.
"""

PROVIDER = "anthropic"

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 300

# Model name validation patterns
MODEL_PATTERNS = ["claude", "anthropic"]


def format_model_name(model_name: str) -> str:
    """Format a model name according to LiteLLM conventions.

    Args:
        model_name: The model name to format

    Returns:
        Formatted model name with provider prefix if needed
    """
    if "/" in model_name or ":" in model_name:
        return model_name  # Already has a prefix
    return f"{PROVIDER}/{model_name}"


def is_valid_model_for_provider(model: str) -> bool:
    """Check if a model name looks like an Anthropic model.

    Args:
        model: The model name

    Returns:
        True if the model matches a known pattern, False otherwise
    """
    model_lower = model.lower()
    return any(pattern in model_lower for pattern in MODEL_PATTERNS)


def parse_max_tokens(value) -> int:
    """Parse a max_tokens setting, falling back to the default.

    Args:
        value: Raw value from the config file or command line

    Returns:
        A positive token limit
    """
    try:
        if isinstance(value, str) and "#" in value:
            value = value.split("#")[0].strip()
        max_tokens = int(value)
    except (ValueError, TypeError):
        return DEFAULT_MAX_TOKENS
    return max_tokens if max_tokens > 0 else DEFAULT_MAX_TOKENS
