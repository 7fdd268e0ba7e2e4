"""File-level API: read and write whole documents."""

from __future__ import annotations

import logging
import os
from typing import Union

from .errors import DocumentIOError, UnrepresentableValue
from .options import DEFAULT_OPTIONS, FormatOptions
from .parser import parse_text
from .serializer import serialize
from .values import Value, VMap

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def parse_document(path: PathLike, options: FormatOptions | None = None) -> VMap:
    """Read the file at *path* and parse it into the root Map.

    Raises :class:`DocumentIOError` when the file cannot be read or decoded,
    and the parser's errors for bad content.
    """
    options = options or DEFAULT_OPTIONS
    try:
        with open(path, encoding=options.encoding, newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentIOError(path, exc) from exc
    logger.debug("read %s (%d chars)", path, len(text))
    return parse_text(text, options)


def write_document(value: Value, path: PathLike, options: FormatOptions | None = None) -> None:
    """Serialize *value* and write it to *path*, replacing any content.

    The text is rendered before the file is opened, so a value that cannot
    be written leaves an existing file untouched.
    """
    options = options or DEFAULT_OPTIONS
    if not isinstance(value, VMap):
        raise UnrepresentableValue(f"document root must be a map, got {type(value).__name__}")
    text = serialize(value, 0, options)
    try:
        with open(path, "w", encoding=options.encoding, newline="\n") as fh:
            fh.write(text)
    except (OSError, UnicodeEncodeError) as exc:
        raise DocumentIOError(path, exc) from exc
    logger.debug("wrote %s (%d entries)", path, len(value.entries))
