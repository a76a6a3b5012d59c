"""Diagnostic data structures.

Defines source points, positions, and the parse diagnostic record handed to
the caller's sink.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

__all__ = [
    "ParseDiagnostic",
    "SourcePoint",
    "SourcePosition",
]


@dataclass(frozen=True, slots=True)
class SourcePoint:
    """One place in the source.

    Values are copied unchanged from the parser event and never validated.

    Note:
        Offsets count characters (Unicode code points), not bytes and not
        UTF-16 code units.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset (0-indexed)
    """

    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def to_dict(self) -> dict[str, int]:
        """Return the point as ``{"line", "column", "offset"}``."""
        return {"line": self.line, "column": self.column, "offset": self.offset}


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Range between two source points.

    Attributes:
        start: Place of the first character
        end: Place after the last character
    """

    start: SourcePoint
    end: SourcePoint

    def __str__(self) -> str:
        """Return the range as ``"line:column-line:column"``."""
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Return the range as ``{"start": {...}, "end": {...}}``."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class ParseDiagnostic:
    """Structured report of one parse error.

    Mirrors the message shape used across the unified/vfile ecosystem, so
    ``to_dict()`` output can be compared against (or consumed by) tools
    that expect it.

    Attributes:
        rule_id: Hyphen-case rule code as reported by the parser
        message: Rendered reason
        reason: Same as ``message``, kept for compatibility
        note: Rendered description
        name: ``"<file>:<range>"`` when the file is known, else ``"<range>"``
        line: Start line
        column: Start column
        position: Start and end of the error
        fatal: True for severity 2, False for severity 1
        source: Origin tag, always ``"parse-error"``
        url: Documentation link, None when the rule has none
        file: Path of the parsed file, None when unknown
    """

    rule_id: str
    message: str
    reason: str
    note: str
    name: str
    line: int
    column: int
    position: SourcePosition
    fatal: bool | None
    source: str
    url: str | None
    file: str | None = None

    def __str__(self) -> str:
        """Return the rendered reason."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible message shape.

        The ``file`` key is only present when a file path was known.

        Example:
            >>> diagnostic.to_dict()  # doctest: +SKIP
            {'name': '1:1-1:1', 'message': 'Missing doctype before other content', ...}
        """
        data: dict[str, Any] = {
            "name": self.name,
            "message": self.message,
            "reason": self.reason,
            "line": self.line,
            "column": self.column,
            "source": self.source,
            "ruleId": self.rule_id,
            "position": self.position.to_dict(),
        }
        if self.file is not None:
            data["file"] = self.file
        data["fatal"] = self.fatal
        data["note"] = self.note
        data["url"] = self.url
        return data
