"""Format options shared by the parser, serializer and file API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatOptions:
    indent_step: int = 2     # spaces per nesting level when writing
    allow_tabs: bool = False  # tabs in indentation count as one column each
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.indent_step < 1:
            raise ValueError(f"indent_step must be >= 1, got {self.indent_step}")


DEFAULT_OPTIONS = FormatOptions()
