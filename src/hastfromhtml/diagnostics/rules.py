"""Rule identifiers and severity policy.

Parsers report rule codes in hyphen-case (``missing-doctype``); the catalog
and the severity configuration are keyed by the camel-case form
(``missingDoctype``). This module converts between the two and resolves the
configured severity for a rule.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping
from enum import IntEnum
from typing import TypeAlias

__all__ = [
    "Severity",
    "SeverityConfig",
    "SeveritySetting",
    "camelcase",
    "kebabcase",
    "resolve_severity",
]

SeveritySetting: TypeAlias = bool | int | None
SeverityConfig: TypeAlias = Mapping[str, SeveritySetting]

_HYPHEN_LETTER = re.compile(r"-[a-z]")
_UPPER_LETTER = re.compile(r"[A-Z]")


class Severity(IntEnum):
    """Resolved severity of a parse error rule.

    Values:
        OFF: Suppressed, no diagnostic is emitted
        WARNING: Emitted with ``fatal=False``
        FATAL: Emitted with ``fatal=True`` (advisory, nothing is aborted)
    """

    OFF = 0
    WARNING = 1
    FATAL = 2


def camelcase(code: str) -> str:
    """Convert a hyphen-case rule code to its catalog key.

    Example:
        >>> camelcase("end-tag-with-trailing-solidus")
        'endTagWithTrailingSolidus'

    Malformed codes are converted as far as possible; they simply miss the
    catalog afterwards.
    """
    return _HYPHEN_LETTER.sub(lambda match: match.group()[1].upper(), code)


def kebabcase(key: str) -> str:
    """Convert a catalog key back to its hyphen-case rule code.

    Example:
        >>> kebabcase("endTagWithTrailingSolidus")
        'end-tag-with-trailing-solidus'
    """
    return _UPPER_LETTER.sub(lambda match: "-" + match.group().lower(), key)


def resolve_severity(key: str, config: SeverityConfig) -> Severity:
    """Resolve the severity for a rule from caller configuration.

    Missing and None settings default to ``True``, so absence always means
    "warn". Booleans map to WARNING/OFF. Numbers pass through when they name
    a severity; other values are coerced by truthiness.

    Args:
        key: Camel-case rule identifier
        config: Per-rule overrides

    Returns:
        Resolved Severity
    """
    setting = config.get(key)
    if setting is None:
        setting = True

    # bool is an int subclass: test it first
    if isinstance(setting, bool):
        return Severity.WARNING if setting else Severity.OFF
    if isinstance(setting, int | float) and setting in (0, 1, 2):
        return Severity(int(setting))
    return Severity.WARNING if setting else Severity.OFF
