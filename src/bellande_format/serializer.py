"""Serializer: Value tree to canonical indented text."""

from __future__ import annotations

from .errors import UnrepresentableValue
from .lexer import format_scalar
from .options import DEFAULT_OPTIONS, FormatOptions
from .values import Value, VList, VMap, is_container


def _check_key(key: str) -> None:
    if key != key.strip():
        raise UnrepresentableValue(f"key has surrounding whitespace: {key!r}")
    if ":" in key or "\n" in key:
        raise UnrepresentableValue(f"key contains ':' or a line break: {key!r}")
    if key.startswith("#"):
        raise UnrepresentableValue(f"key would read as a comment: {key!r}")
    if len(key) > 1 and key[0] == "-" and key[1].isspace():
        raise UnrepresentableValue(f"key would read as a list item: {key!r}")


def _render_map(value: VMap, indent: int, step: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []
    for key, item in value.entries.items():
        _check_key(key)
        if is_container(item):
            lines.append(f"{pad}{key}:")
            lines.extend(_render(item, indent + step, step))
        else:
            lines.append(f"{pad}{key}: {format_scalar(item)}")
    return lines


def _render_list(value: VList, indent: int, step: int) -> list[str]:
    pad = " " * indent
    lines: list[str] = []
    for item in value.items:
        if is_container(item):
            # Bare dash opens a block; children sit one step deeper.
            lines.append(f"{pad}-")
            lines.extend(_render(item, indent + step, step))
        else:
            lines.append(f"{pad}- {format_scalar(item)}")
    return lines


def _render(value: Value, indent: int, step: int) -> list[str]:
    if isinstance(value, VMap):
        return _render_map(value, indent, step)
    if isinstance(value, VList):
        return _render_list(value, indent, step)
    return [" " * indent + format_scalar(value)]


def serialize(value: Value, indent: int = 0, options: FormatOptions | None = None) -> str:
    """Render *value* as text starting at column *indent*.

    Map keys keep insertion order.  The result ends with a newline unless
    it is empty.
    """
    options = options or DEFAULT_OPTIONS
    lines = _render(value, indent, options.indent_step)
    return "\n".join(lines) + "\n" if lines else ""
