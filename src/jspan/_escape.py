"""Escape codec and scan-state primitives shared by the scanners and decoders."""

from __future__ import annotations

from typing import Final

WHITESPACE: Final = frozenset(" \t\n\r")

# Two-character escape sequences, keyed by the character following the backslash
UNESCAPE_MAP: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ESCAPE_TABLE: Final = str.maketrans(
    {raw: "\\" + code for code, raw in UNESCAPE_MAP.items()}
)

_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
_UNICODE_ESCAPE_LENGTH: Final = 6  # \uXXXX
_HIGH_SURROGATES: Final = range(0xD800, 0xDC00)
_LOW_SURROGATES: Final = range(0xDC00, 0xE000)


def is_whitespace(char: str) -> bool:
    """Returns True for the four JSON whitespace characters."""
    return char in WHITESPACE


def is_escaped(text: str, index: int) -> bool:
    """Decides whether the delimiter at ``index`` is escaped.

    Walks backward from ``index - 1`` counting consecutive backslashes,
    stopping at the start of the buffer. An odd count means the delimiter is
    ordinary content; an even count (including zero) means it is real.

    Args:
        text: The buffer text being scanned
        index: Position of the quote or brace under consideration

    Returns:
        True when the character at ``index`` is escaped
    """
    count = 0
    i = index - 1
    while i >= 0 and text[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def escape(text: str) -> str:
    """Escapes quotes, backslashes, slashes and the control characters."""
    return text.translate(_ESCAPE_TABLE)


def _read_code_unit(text: str, i: int) -> int | None:
    """Reads the four hex digits of a \\uXXXX escape starting at ``i``."""
    if i + _UNICODE_ESCAPE_LENGTH > len(text) or text[i + 1] != "u":
        return None
    hex_digits = text[i + 2 : i + _UNICODE_ESCAPE_LENGTH]
    if not all(c in _HEX_DIGITS for c in hex_digits):
        raise ValueError(f"Invalid unicode escape sequence: \\u{hex_digits}")
    return int(hex_digits, 16)


def unescape(text: str) -> str:
    """Reverses JSON string escaping.

    Recognizes the eight two-character escapes and ``\\uXXXX``. A surrogate
    pair spelled as two consecutive ``\\u`` escapes decodes to one code
    point. A ``\\u`` with fewer than four characters left in the input becomes
    a literal ``u``; unknown escapes and a lone trailing backslash are kept
    as they are.

    Raises:
        ValueError: If a complete ``\\uXXXX`` sequence holds non-hex digits
    """
    if "\\" not in text:
        return text

    result = []
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char != "\\" or i == length - 1:
            result.append(char)
            i += 1
            continue

        code = text[i + 1]
        if code in UNESCAPE_MAP:
            result.append(UNESCAPE_MAP[code])
            i += 2
        elif code == "u":
            code_unit = _read_code_unit(text, i)
            if code_unit is None:
                # Truncated escape at the end of input
                result.append("u")
                i += 2
                continue
            i += _UNICODE_ESCAPE_LENGTH
            if code_unit in _HIGH_SURROGATES and text.startswith("\\u", i):
                low = _read_code_unit(text, i)
                if low is not None and low in _LOW_SURROGATES:
                    code_unit = 0x10000 + ((code_unit - 0xD800) << 10) + (
                        low - 0xDC00
                    )
                    i += _UNICODE_ESCAPE_LENGTH
            result.append(chr(code_unit))
        else:
            result.append(char)
            i += 1

    return "".join(result)
