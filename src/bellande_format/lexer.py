"""Scalar lexer: single tokens to scalar Values and back."""

from __future__ import annotations

import re

from .errors import UnrepresentableValue
from .values import Null, Value, VBool, VFloat, VInteger, VString, _NullType


_INT_RE = re.compile(r"^-?[0-9]+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
    r"|^[+-]?(?:inf|infinity|nan)$",
    re.IGNORECASE,
)

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

_RESERVED_WORDS = frozenset({"true", "false", "null"})


# ---------------------------------------------------------------------------
# Lexing
# ---------------------------------------------------------------------------

def lex_scalar(token: str) -> Value:
    """Convert a trimmed token to a scalar Value. Never fails.

    First match wins:

    1. ``true`` / ``false`` (any case) → VBool
    2. ``null`` (any case) → Null
    3. ``"..."`` → VString with the outer quotes removed
    4. ``-?digits`` within 64 bits → VInteger
    5. decimal float literal, ``inf`` or ``nan`` → VFloat
    6. anything else → VString(token)
    """
    lowered = token.lower()
    if lowered == "true":
        return VBool(True)
    if lowered == "false":
        return VBool(False)
    if lowered == "null":
        return Null
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return VString(token[1:-1])
    if _INT_RE.match(token):
        number = int(token)
        if _INT64_MIN <= number <= _INT64_MAX:
            return VInteger(number)
    if _FLOAT_RE.match(token):
        return VFloat(float(token))
    return VString(token)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _needs_quotes(text: str) -> bool:
    if not text or text != text.strip():
        return True
    if " " in text or ":" in text or text.lower() in _RESERVED_WORDS:
        return True
    # Anything the lexer would read as another type (or strip quotes from)
    return lex_scalar(text) != VString(text)


def format_scalar(value: Value) -> str:
    """Render a scalar inline so that :func:`lex_scalar` reads it back."""
    if isinstance(value, VString):
        text = value.value
        if "\n" in text:
            raise UnrepresentableValue(f"string contains a line break: {text!r}")
        return f'"{text}"' if _needs_quotes(text) else text
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, VInteger):
        if not _INT64_MIN <= value.value <= _INT64_MAX:
            raise UnrepresentableValue(f"integer out of 64-bit range: {value.value}")
        return str(value.value)
    if isinstance(value, VFloat):
        return repr(value.value)
    if isinstance(value, _NullType):
        return "null"
    raise TypeError(f"not a scalar: {value!r}")
