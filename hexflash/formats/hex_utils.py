"""
Hex listing utilities.

Parsing and formatting of the plain hex listings firmware images are
distributed as: two-digit hex byte tokens separated by any whitespace.
"""

import re
import string
from typing import List

HEX_TOKEN_WIDTH = 2  # two hex digits per byte
TOKENS_PER_LINE = 16
HEX_DIGITS = frozenset(string.hexdigits)
# Separators are ASCII whitespace only; NBSP, NEL and \x1c-\x1f belong to tokens
TOKEN_PATTERN = re.compile(f"[^{re.escape(string.whitespace)}]+")


class MalformedHexToken(ValueError):
    """Raised when a listing token is not exactly two hex digits."""

    def __init__(self, token: str, position: int | None = None):
        self.token = token
        self.position = position
        if position is None:
            message = f"Malformed hex token {token!r}"
        else:
            message = f"Malformed hex token {token!r} at token {position}"
        super().__init__(message)


def tokenize_hex_text(text: str) -> List[str]:
    """
    Split a hex listing into tokens.

    Carriage returns are dropped first, then the text is split on any run
    of ASCII whitespace, so tokens are not tied to line boundaries. Other
    characters, including Unicode spaces, stay inside tokens.

    Args:
        text: Raw listing text

    Returns:
        Tokens in input order

    Example:
        >>> tokenize_hex_text("DE AD\\r\\nBE\\tEF\\n")
        ['DE', 'AD', 'BE', 'EF']
    """
    return TOKEN_PATTERN.findall(text.replace("\r", ""))


def parse_hex_token(token: str, position: int | None = None) -> int:
    """
    Decode a single two-digit hex token.

    Args:
        token: Token such as "A3" or "ff"
        position: 1-based token index, used in the error message

    Returns:
        Byte value (0-255)

    Raises:
        MalformedHexToken: If token is not exactly two hex digits
    """
    if len(token) != HEX_TOKEN_WIDTH or not all(c in HEX_DIGITS for c in token):
        raise MalformedHexToken(token, position)
    return int(token, 16)


def parse_hex_tokens(tokens: List[str]) -> bytes:
    """Decode tokens to bytes, reporting the 1-based index of a bad token."""
    return bytes(parse_hex_token(tok, i) for i, tok in enumerate(tokens, start=1))


def parse_hex_text(text: str) -> bytes:
    """
    Parse a whole hex listing to bytes.

    Example:
        >>> parse_hex_text("01 02\\nA3 FF")
        b'\\x01\\x02\\xa3\\xff'
    """
    return parse_hex_tokens(tokenize_hex_text(text))


def format_hex_bytes(data: bytes, per_line: int = TOKENS_PER_LINE) -> str:
    """
    Format bytes as a hex listing.

    Args:
        data: Bytes to format
        per_line: Tokens per output line

    Returns:
        Uppercase space-separated listing with a trailing newline,
        or an empty string for empty input

    Example:
        >>> format_hex_bytes(bytes([1, 2, 163, 255]), per_line=2)
        '01 02\\nA3 FF\\n'
    """
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")

    lines = []
    for start in range(0, len(data), per_line):
        chunk = data[start : start + per_line]
        lines.append(" ".join(f"{b:02X}" for b in chunk))
    return "".join(line + "\n" for line in lines)
