"""hast-from-html - HTML parse error diagnostics.

Sits between a WHATWG-conformant HTML parser and the code consuming its
errors. Each raw parse error the parser reports becomes a structured
diagnostic with a rule id, rendered message and note, position, severity
and a link to the HTML standard.

Public API:
    from_html - Parse HTML, reporting parse errors to a sink
    FromHtmlOptions - Fragment mode, sink and per-rule severities
    SourceFile - HTML text plus optional path
    ParseDiagnostic - Structured report of one parse error
    ParseErrorReporter - Per-call parse error handler (for custom drivers)
    RawParseError - Event reported by the parser

Exceptions:
    HastFromHtmlError - Base exception class
    ConfigurationError - Invalid options
    UnknownRuleError - Unknown rule in strict severity configuration

Submodules:
    hastfromhtml.diagnostics - Catalog, severities, templates, formatting
    hastfromhtml.parser - Protocols for the external parser and converter
"""

from .api import from_html
from .diagnostics import (
    ConfigurationError,
    HastFromHtmlError,
    ParseDiagnostic,
    UnknownRuleError,
)
from .options import FromHtmlOptions
from .parser import RawParseError
from .reporter import ParseErrorReporter
from .source import SourceFile

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("hast-from-html")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "FromHtmlOptions",
    "HastFromHtmlError",
    "ParseDiagnostic",
    "ParseErrorReporter",
    "RawParseError",
    "SourceFile",
    "UnknownRuleError",
    "__version__",
    "from_html",
]
