"""Parse HTML with structured parse error reporting.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from .options import FromHtmlOptions
from .reporter import ParseErrorReporter
from .source import SourceFile

if TYPE_CHECKING:
    from .parser import HtmlParser, TreeConverter

__all__ = ["from_html"]

logger = logging.getLogger(__name__)

TreeT = TypeVar("TreeT")
ResultT = TypeVar("ResultT")


@overload
def from_html(
    value: str | SourceFile,
    *,
    parser: HtmlParser[TreeT],
    options: FromHtmlOptions | None = None,
    convert: None = None,
) -> TreeT: ...


@overload
def from_html(
    value: str | SourceFile,
    *,
    parser: HtmlParser[TreeT],
    options: FromHtmlOptions | None = None,
    convert: TreeConverter[TreeT, ResultT],
) -> ResultT: ...


def from_html(
    value: str | SourceFile,
    *,
    parser: HtmlParser[Any],
    options: FromHtmlOptions | None = None,
    convert: TreeConverter[Any, Any] | None = None,
) -> Any:
    """Parse HTML, reporting parse errors to ``options.on_error``.

    The parser reports raw parse errors while it runs; each one is turned
    into a ParseDiagnostic and delivered to the sink before the parser
    continues. Exceptions raised by the sink propagate out of this call.

    Args:
        value: HTML text, or a SourceFile whose path prefixes diagnostics
        parser: HTML parser to drive
        options: Fragment mode, sink and per-rule severities
        convert: Converter from the parser's tree to the result tree

    Returns:
        ``convert(tree, file)`` when a converter is given, else the
        parser's tree

    Example:
        >>> messages = []
        >>> tree = from_html(
        ...     "a",
        ...     parser=my_parser,
        ...     options=FromHtmlOptions(on_error=messages.append),
        ... )  # doctest: +SKIP
        >>> messages[0].rule_id  # doctest: +SKIP
        'missing-doctype'
    """
    options = options if options is not None else FromHtmlOptions()
    file = SourceFile.coerce(value)
    text = file.value

    reporter = None
    if options.on_error is not None:
        reporter = ParseErrorReporter(text, options=options, file_path=file.path)

    logger.debug(
        "Parsing %s (%d characters, %s mode)",
        file.path or "<input>",
        len(text),
        "fragment" if options.fragment else "document",
    )

    tree = parser.parse(text, fragment=options.fragment, on_parse_error=reporter)

    if convert is None:
        return tree
    return convert(tree, file)
