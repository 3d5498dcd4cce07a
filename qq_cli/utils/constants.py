"""Constants used throughout the qq_cli package."""

import os

# Environment variables
def get_debug():
    """Get DEBUG value from environment variables, ensuring it's current."""
    return os.environ.get("QQ_DEBUG", "false").lower() in ["true", "1", "yes", "y", "on"]

# API key environment overrides, checked in order
API_KEY_ENV_VARS = ["CLAUDE_API_KEY", "ANTHROPIC_API_KEY"]

# File Paths
CONFIG_DIR = os.path.expanduser("~/.config/quick-question")
CONFIG_PATH = os.path.join(CONFIG_DIR, "qq.conf")
CUSTOM_PROMPT_PATH = os.path.join(CONFIG_DIR, "custom_prompt.txt")
HISTORY_PATH = os.path.expanduser("~/.qqhistory")

# Prompts directory
PROMPTS_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "assets",
)

# Input
QUESTION_PROMPT = "❓ Enter your question: "
SHELL_SPECIAL_CHARS = "'\"`\\"

# Display options
TYPEWRITER_DELAY = 0.01  # Seconds between characters in typewriter mode

# Template written to the custom prompt file on setup
CUSTOM_PROMPT_TEMPLATE = """# Your custom prompt goes here
#
# This will be APPENDED to the default system prompt, so you can add
# additional instructions without losing the original behavior.
#
# Examples:
# - Always respond in a specific language
# - Add domain-specific knowledge
# - Modify the response style
# - Add personality traits
#
# Delete these comments and add your custom instructions below:

"""
