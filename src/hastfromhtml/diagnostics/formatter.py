"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import ParseDiagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON message shape for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats ParseDiagnostic objects into human-readable or machine-readable
    output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate message and note text
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(diagnostic))  # doctest: +SKIP
        warning[missing-doctype]: Missing doctype before other content
          --> 1:1-1:1
          = note: Expected a `<!doctype html>` before anything else

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))  # doctest: +SKIP
        1:1-1:1: warning: Missing doctype before other content [missing-doctype]
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def __post_init__(self) -> None:
        """Validate formatter options.

        Raises:
            ValueError: If max_content_length is not positive.
        """
        if self.max_content_length <= 0:
            msg = "max_content_length must be positive"
            raise ValueError(msg)

    def format(self, diagnostic: ParseDiagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[ParseDiagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    @staticmethod
    def severity_label(diagnostic: ParseDiagnostic) -> str:
        """Return ``"error"`` for fatal diagnostics, else ``"warning"``."""
        return "error" if diagnostic.fatal else "warning"

    def _format_rust(self, diagnostic: ParseDiagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[end-tag-with-trailing-solidus]: Unexpected slash at end of closing tag
              --> example.html:1:5-1:5
              = note: Unexpected `/`. Expected `>` instead
              = help: see https://html.spec.whatwg.org/...
        """
        severity = self.severity_label(diagnostic)

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.rule_id}]: {message}"]
        parts.append(f"  --> {diagnostic.name}")

        if diagnostic.note:
            parts.append(f"  = note: {self._maybe_sanitize(diagnostic.note)}")

        if diagnostic.url:
            parts.append(f"  = help: see {diagnostic.url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: ParseDiagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            1:1-1:1: warning: Missing doctype before other content [missing-doctype]
        """
        message = self._maybe_sanitize(diagnostic.message)
        severity = self.severity_label(diagnostic)
        return f"{diagnostic.name}: {severity}: {message} [{diagnostic.rule_id}]"

    def _format_json(self, diagnostic: ParseDiagnostic) -> str:
        """Format diagnostic as its JSON message shape."""
        data = diagnostic.to_dict()
        data["message"] = self._maybe_sanitize(data["message"])
        data["reason"] = self._maybe_sanitize(data["reason"])
        data["note"] = self._maybe_sanitize(data["note"])
        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
