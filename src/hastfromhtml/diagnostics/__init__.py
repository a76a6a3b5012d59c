"""Diagnostic system for HTML parse errors.

Provides the rule catalog, severity policy, message templates, structured
diagnostics and their formatting.

Python 3.13+. Zero external dependencies.
"""

from .catalog import PARSE_ERRORS, RULE_KEYS, RuleEntry, get_rule
from .codes import ParseDiagnostic, SourcePoint, SourcePosition
from .docs import render_rule_list
from .errors import ConfigurationError, HastFromHtmlError, UnknownRuleError
from .formatter import DiagnosticFormatter, OutputFormat
from .rules import (
    Severity,
    SeverityConfig,
    SeveritySetting,
    camelcase,
    kebabcase,
    resolve_severity,
)
from .templates import render_template

__all__ = [
    "PARSE_ERRORS",
    "RULE_KEYS",
    "ConfigurationError",
    "DiagnosticFormatter",
    "HastFromHtmlError",
    "OutputFormat",
    "ParseDiagnostic",
    "RuleEntry",
    "Severity",
    "SeverityConfig",
    "SeveritySetting",
    "SourcePoint",
    "SourcePosition",
    "UnknownRuleError",
    "camelcase",
    "get_rule",
    "kebabcase",
    "render_rule_list",
    "render_template",
    "resolve_severity",
]
