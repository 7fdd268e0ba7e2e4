"""Bellande format: indentation-based documents parsed into Value trees."""

from .document import parse_document, write_document
from .errors import (
    DocumentError,
    DocumentIOError,
    MalformedLine,
    UnrepresentableValue,
    UnresolvedPath,
)
from .lexer import format_scalar, lex_scalar
from .options import DEFAULT_OPTIONS, FormatOptions
from .parser import parse_lines, parse_text
from .serializer import serialize
from .values import (
    Null,
    Value,
    ValueKind,
    VBool,
    VFloat,
    VInteger,
    VList,
    VMap,
    VString,
    _NullType,
    from_python,
    is_container,
    is_scalar,
    kind_of,
    to_python,
)

__all__ = [
    "parse_document",
    "write_document",
    "parse_text",
    "parse_lines",
    "serialize",
    "lex_scalar",
    "format_scalar",
    "FormatOptions",
    "DEFAULT_OPTIONS",
    "DocumentError",
    "DocumentIOError",
    "MalformedLine",
    "UnresolvedPath",
    "UnrepresentableValue",
    "Null",
    "Value",
    "ValueKind",
    "VBool",
    "VFloat",
    "VInteger",
    "VList",
    "VMap",
    "VString",
    "_NullType",
    "from_python",
    "to_python",
    "kind_of",
    "is_container",
    "is_scalar",
]
