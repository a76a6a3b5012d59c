"""Interfaces of the external HTML parser and tree converter.

Tokenizing and tree construction live outside this package. Any parser that
follows the WHATWG parsing algorithm and reports its parse errors through a
callback can be plugged in by satisfying HtmlParser.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .source import SourceFile

__all__ = [
    "HtmlParser",
    "ParseErrorCallback",
    "RawParseError",
    "TreeConverter",
]


@dataclass(frozen=True, slots=True)
class RawParseError:
    """Low-level parse error event reported by a parser.

    Lines and columns are 1-indexed, offsets 0-indexed character offsets.

    Attributes:
        code: Hyphen-case rule code (e.g. ``"missing-doctype"``)
        start_line: Line of the first character
        start_col: Column of the first character
        start_offset: Offset of the first character
        end_line: Line after the last character
        end_col: Column after the last character
        end_offset: Offset after the last character
    """

    code: str
    start_line: int
    start_col: int
    start_offset: int
    end_line: int
    end_col: int
    end_offset: int

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RawParseError:
        """Build an event from a parser's camel-case wire format.

        Example:
            >>> RawParseError.from_mapping({
            ...     "code": "missing-doctype",
            ...     "startLine": 1, "startCol": 1, "startOffset": 0,
            ...     "endLine": 1, "endCol": 1, "endOffset": 0,
            ... }).code
            'missing-doctype'
        """
        return cls(
            code=data["code"],
            start_line=data["startLine"],
            start_col=data["startCol"],
            start_offset=data["startOffset"],
            end_line=data["endLine"],
            end_col=data["endCol"],
            end_offset=data["endOffset"],
        )


ParseErrorCallback: TypeAlias = Callable[[RawParseError], None]

TreeT = TypeVar("TreeT")
ResultT = TypeVar("ResultT")


class HtmlParser(Protocol[TreeT]):
    """Protocol for HTML parsers that report parse errors.

    ``on_parse_error`` must be called synchronously, once per parse error,
    in source order. When it is None the parser may skip error reporting.
    """

    def parse(
        self,
        source: str,
        *,
        fragment: bool,
        on_parse_error: ParseErrorCallback | None,
    ) -> TreeT:
        """Parse a document (or a fragment when ``fragment`` is True)."""
        ...  # pragma: no cover  # Protocol stub - not executable


class TreeConverter(Protocol[TreeT, ResultT]):
    """Protocol for converters from a parser tree to the caller's tree."""

    def __call__(self, tree: TreeT, file: SourceFile) -> ResultT:
        """Convert ``tree``, parsed from ``file``."""
        ...  # pragma: no cover  # Protocol stub - not executable
