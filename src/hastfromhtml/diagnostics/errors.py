"""Exception hierarchy for hast-from-html.

Parse errors themselves are never raised: they are reported to the caller's
sink as ParseDiagnostic records. Exceptions here cover misuse of the API,
such as invalid options.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

__all__ = [
    "ConfigurationError",
    "HastFromHtmlError",
    "UnknownRuleError",
]


class HastFromHtmlError(Exception):
    """Base exception for all hast-from-html errors."""


class ConfigurationError(HastFromHtmlError, ValueError):
    """Invalid options passed to the parser entry point."""


class UnknownRuleError(ConfigurationError):
    """Severity configured for rules the catalog does not know.

    Only raised in strict mode; otherwise unknown keys are logged and
    ignored.

    Attributes:
        keys: The unknown keys, sorted
    """

    def __init__(self, keys: Iterable[str]) -> None:
        """Initialize UnknownRuleError.

        Args:
            keys: Severity keys missing from the catalog
        """
        self.keys: tuple[str, ...] = tuple(sorted(keys))
        super().__init__(f"Unknown parse error rule(s): {', '.join(self.keys)}")
