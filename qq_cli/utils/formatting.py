"""Terminal formatting of model responses for qq_cli.

Converts the small Markdown subset models tend to emit (bold, italic,
inline code, strikethrough and code fences) into ANSI SGR sequences.
This is not a Markdown parser: each marker type gets one left-to-right
scan, and anything that doesn't pair up is left as literal text.
"""

from typing import List, Tuple

# SGR sequences
ANSI_BOLD = "\x1b[1m"
ANSI_ITALIC = "\x1b[3m"
ANSI_STRIKETHROUGH = "\x1b[9m"
ANSI_BRIGHT_YELLOW = "\x1b[93m"
ANSI_RESET = "\x1b[0m"

CODE_FENCE = "```"
BOLD_MARKER = "**"

# Paired markers applied after bold, in order
PAIRED_MARKERS = [
    ("`", ANSI_BRIGHT_YELLOW, ANSI_RESET),
    ("~~", ANSI_STRIKETHROUGH, ANSI_RESET),
]

# A token is (piece, in_bold). Pieces are single characters of the input or
# whole inserted escape sequences, so a marker can never match inside an
# escape sequence.
Token = Tuple[str, bool]


def format_for_terminal(text: str) -> str:
    """
    Format a model response for display in a terminal.

    Asterisks inside bold text are kept literally; the italic pass does not
    look inside bold spans.

    Args:
        text: The complete response text

    Returns:
        The text with Markdown emphasis replaced by ANSI escape sequences
        and code fence markers removed
    """
    tokens = _tokenize(text.replace(CODE_FENCE, ""))

    tokens = _replace_pattern_tokens(
        tokens, BOLD_MARKER, ANSI_BOLD, ANSI_RESET, mark_bold=True
    )
    for marker, start_ansi, end_ansi in PAIRED_MARKERS:
        tokens = _replace_pattern_tokens(tokens, marker, start_ansi, end_ansi)

    return _render(_replace_italic_tokens(tokens))


def replace_markdown_pattern(
    text: str, marker: str, start_ansi: str, end_ansi: str
) -> str:
    """
    Replace every ``marker``-delimited span with ANSI-wrapped content.

    The content of a span is copied verbatim. An opening marker without a
    closing one contributes its first character as plain text and the scan
    carries on from the next character.

    Args:
        text: Text to scan
        marker: Delimiter string, e.g. "**"
        start_ansi: Sequence emitted in place of the opening marker
        end_ansi: Sequence emitted in place of the closing marker

    Returns:
        The transformed text
    """
    tokens = _replace_pattern_tokens(_tokenize(text), marker, start_ansi, end_ansi)
    return _render(tokens)


def replace_single_asterisk_italic(text: str) -> str:
    """
    Replace ``*italic*`` spans with ANSI italic.

    An asterisk touching another asterisk is never an italic marker.

    Args:
        text: Text to scan, normally after bold has been processed

    Returns:
        The transformed text
    """
    return _render(_replace_italic_tokens(_tokenize(text)))


def _tokenize(text: str) -> List[Token]:
    return [(char, False) for char in text]


def _render(tokens: List[Token]) -> str:
    return "".join(piece for piece, _ in tokens)


def _marker_at(tokens: List[Token], i: int, marker: str) -> bool:
    if i + len(marker) > len(tokens):
        return False
    return all(tokens[i + k][0] == char for k, char in enumerate(marker))


def _find_marker(tokens: List[Token], marker: str, start: int) -> int:
    for j in range(start, len(tokens) - len(marker) + 1):
        if _marker_at(tokens, j, marker):
            return j
    return -1


def _replace_pattern_tokens(
    tokens: List[Token],
    marker: str,
    start_ansi: str,
    end_ansi: str,
    mark_bold: bool = False,
) -> List[Token]:
    """Token version of replace_markdown_pattern; mark_bold flags span content."""
    result: List[Token] = []
    size = len(marker)
    length = len(tokens)
    i = 0

    while i < length:
        if _marker_at(tokens, i, marker):
            j = _find_marker(tokens, marker, i + size)
            if j != -1:
                result.append((start_ansi, False))
                for piece, in_bold in tokens[i + size:j]:
                    result.append((piece, in_bold or mark_bold))
                result.append((end_ansi, False))
                i = j + size
                continue
        result.append(tokens[i])
        i += 1

    return result


def _is_italic_marker(tokens: List[Token], i: int) -> bool:
    piece, in_bold = tokens[i]
    return piece == "*" and not in_bold


def _find_italic_close(tokens: List[Token], start: int) -> int:
    """Return the index of the first "*" from start not followed by "*", or -1."""
    length = len(tokens)
    for j in range(start, length):
        if _is_italic_marker(tokens, j) and (
            j + 1 >= length or tokens[j + 1][0] != "*"
        ):
            return j
    return -1


def _replace_italic_tokens(tokens: List[Token]) -> List[Token]:
    result: List[Token] = []
    length = len(tokens)
    i = 0

    while i < length:
        if _is_italic_marker(tokens, i):
            prev_is_asterisk = i > 0 and tokens[i - 1][0] == "*"
            next_is_asterisk = i + 1 < length and tokens[i + 1][0] == "*"

            if not prev_is_asterisk and not next_is_asterisk:
                j = _find_italic_close(tokens, i + 1)
                if j != -1:
                    result.append((ANSI_ITALIC, False))
                    result.extend(tokens[i + 1:j])
                    result.append((ANSI_RESET, False))
                    i = j + 1
                    continue

        result.append(tokens[i])
        i += 1

    return result
