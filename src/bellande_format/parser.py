"""Structural parser: indented lines to a Value tree.

Each line carries an indent width.  A scope stack of open keys records
where the current line sits in the tree:

- a line pops every scope whose indent is >= its own (a sibling at the same
  depth closes the previous sibling's scope);
- ``key: value`` stores a scalar in the container at the top of the stack;
- ``key:`` stores an empty List placeholder and opens a scope for it;
- ``- value`` appends to the List at the top of the stack;
- ``-`` alone appends an empty String and opens a scope for it.

A line starting with ``-`` plus whitespace is always a list item, even when
it holds a ``:``, so ``- a: b`` is the item ``"a: b"``.  ``-x: 1`` is a key.

An open scope is typed by its first child line.  Key lines make it a Map,
item lines make it a List.  Mixing the two raises :class:`UnresolvedPath`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .errors import MalformedLine, UnresolvedPath
from .lexer import lex_scalar
from .options import DEFAULT_OPTIONS, FormatOptions
from .values import VList, VMap, VString

logger = logging.getLogger(__name__)

_Container = Union[VMap, VList]


# ---------------------------------------------------------------------------
# Scope stack
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Scope:
    """One open block.

    ``owner``/``slot`` locate the placeholder inside its parent (a dict key
    or a list index) so the placeholder can be replaced once the block's
    type is known.  ``container`` stays None until the first child line.
    """
    indent: int
    key: str
    owner: dict | list | None = None
    slot: str | int | None = None
    container: _Container | None = None


def _open(scope: _Scope, kind: type, line_number: int) -> _Container:
    """Return the container of *scope*, creating it as *kind* if needed."""
    if scope.container is None:
        if kind is VList and isinstance(scope.owner, dict):
            # Key placeholders are already Lists; keep the same object.
            scope.container = scope.owner[scope.slot]
        else:
            scope.container = kind()
            scope.owner[scope.slot] = scope.container
        logger.debug("line %d: %r opened as %s", line_number, scope.key, kind.__name__)
    if not isinstance(scope.container, kind):
        if kind is VList:
            reason = "list item where a key was expected"
        else:
            reason = "key where a list item was expected"
        raise UnresolvedPath(scope.key, line_number, reason)
    return scope.container


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def _indent_width(line: str, line_number: int, options: FormatOptions) -> int:
    content = line.lstrip()
    width = len(line) - len(content)
    if not options.allow_tabs and "\t" in line[:width]:
        raise MalformedLine(line_number, line, "tab in indentation")
    return width


def _is_item(stripped: str) -> bool:
    if not stripped.startswith("-"):
        return False
    rest = stripped[1:]
    return not rest or rest[0].isspace() or ":" not in stripped


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str], options: FormatOptions | None = None) -> VMap:
    """Build the root Map from a sequence of lines.

    Raises :class:`MalformedLine` or :class:`UnresolvedPath` on the first
    bad line; line numbers are 1-based.
    """
    options = options or DEFAULT_OPTIONS
    root = VMap()
    stack: list[_Scope] = [_Scope(indent=0, key="", container=root)]

    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indent_width(line, line_number, options)

        while len(stack) > 1 and stack[-1].indent >= indent:
            stack.pop()
        top = stack[-1]

        if _is_item(stripped):
            items = _open(top, VList, line_number).items
            text = stripped[1:].strip()
            if text:
                items.append(lex_scalar(text))
            else:
                items.append(VString(""))
                stack.append(_Scope(indent, top.key, items, len(items) - 1))
        elif ":" in stripped:
            key, _, text = stripped.partition(":")
            key = key.strip()
            text = text.strip()
            entries = _open(top, VMap, line_number).entries
            if text:
                entries[key] = lex_scalar(text)
            else:
                entries[key] = VList()
                stack.append(_Scope(indent, key, entries, key))
        else:
            raise MalformedLine(line_number, line)

    return root


def _split_lines(text: str) -> Iterator[str]:
    # Only "\n" ends a line; a "\r" before it is dropped.
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def parse_text(text: str, options: FormatOptions | None = None) -> VMap:
    """Parse a whole document held in memory."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return parse_lines(_split_lines(text), options)
