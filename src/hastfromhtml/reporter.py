"""Parse error reporter.

Turns raw parser events into ParseDiagnostic records and hands them to the
caller's sink. One reporter serves one parse call; it is invoked by the
parser synchronously, once per parse error, in source order.

Per event:
    1. Normalize the rule code to its catalog key
    2. Resolve the configured severity (OFF stops here)
    3. Render reason and description templates against the source
    4. Assemble the diagnostic and call the sink

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .constants import DIAGNOSTIC_SOURCE, PARSE_ERROR_URL_BASE
from .diagnostics.catalog import EMPTY_RULE, RuleEntry, get_rule
from .diagnostics.codes import ParseDiagnostic, SourcePoint, SourcePosition
from .diagnostics.rules import Severity, camelcase, resolve_severity
from .diagnostics.templates import render_template
from .options import FromHtmlOptions, Sink
from .parser import RawParseError

__all__ = ["ParseErrorReporter"]

logger = logging.getLogger(__name__)

# OFF never reaches assembly, so None is not produced in practice.
_FATALITIES: Mapping[Severity, bool | None] = MappingProxyType(
    {
        Severity.FATAL: True,
        Severity.WARNING: False,
        Severity.OFF: None,
    }
)


class ParseErrorReporter:
    """Callable parse error handler for one parse call.

    Args:
        source: Original text handed to the parser
        options: Sink and severity overrides
        file_path: Path of the parsed file, if known

    Example:
        >>> messages = []
        >>> reporter = ParseErrorReporter(
        ...     "a", options=FromHtmlOptions(on_error=messages.append)
        ... )
        >>> reporter(RawParseError("missing-doctype", 1, 1, 0, 1, 1, 0))
        >>> messages[0].name
        '1:1-1:1'
    """

    __slots__ = ("_file_path", "_options", "_source")

    def __init__(
        self,
        source: str,
        *,
        options: FromHtmlOptions,
        file_path: str | None = None,
    ) -> None:
        self._source = source
        self._options = options
        self._file_path = file_path

    def __call__(self, error: RawParseError) -> None:
        """Report one parse error to the sink, unless it is turned off."""
        diagnostic = self.build(error)
        if diagnostic is None:
            return

        logger.debug("Parse error %s at %s", diagnostic.rule_id, diagnostic.name)

        sink = self.sink
        if sink is not None:
            sink(diagnostic)

    def build(self, error: RawParseError) -> ParseDiagnostic | None:
        """Assemble the diagnostic for an event.

        Returns:
            The diagnostic, or None when the rule's severity is OFF
        """
        key = camelcase(error.code)
        level = resolve_severity(key, self._options.severities)
        if level is Severity.OFF:
            return None

        entry = self._lookup(key, error.code)
        start = SourcePoint(line=error.start_line, column=error.start_col, offset=error.start_offset)
        end = SourcePoint(line=error.end_line, column=error.end_col, offset=error.end_offset)
        position = SourcePosition(start=start, end=end)

        name = str(position)
        if self._file_path:
            name = f"{self._file_path}:{name}"

        reason = render_template(entry.reason, self._source, error.start_offset)

        return ParseDiagnostic(
            rule_id=error.code,
            message=reason,
            reason=reason,
            note=render_template(entry.description, self._source, error.start_offset),
            name=name,
            line=start.line,
            column=start.column,
            position=position,
            fatal=_FATALITIES[level],
            source=DIAGNOSTIC_SOURCE,
            url=PARSE_ERROR_URL_BASE + error.code if entry.url else None,
            file=self._file_path or None,
        )

    @property
    def sink(self) -> Sink | None:
        """The sink diagnostics are delivered to."""
        return self._options.on_error

    @staticmethod
    def _lookup(key: str, code: str) -> RuleEntry:
        entry = get_rule(key)
        if entry is None:
            logger.warning("No catalog entry for parse error '%s'", code)
            return EMPTY_RULE
        return entry
