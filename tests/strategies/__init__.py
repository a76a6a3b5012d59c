"""Hypothesis strategies for hast-from-html property-based testing.

Usage:
    from tests.strategies import rule_codes, severity_settings
"""

from .diagnostics import (
    raw_events,
    rule_codes,
    rule_keys,
    severity_settings,
    source_with_offset,
)

__all__ = [
    "raw_events",
    "rule_codes",
    "rule_keys",
    "severity_settings",
    "source_with_offset",
]
