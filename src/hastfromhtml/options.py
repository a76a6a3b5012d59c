"""Options for from_html.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from .diagnostics.catalog import RULE_KEYS
from .diagnostics.codes import ParseDiagnostic
from .diagnostics.errors import ConfigurationError, UnknownRuleError
from .diagnostics.rules import SeveritySetting

__all__ = ["FromHtmlOptions", "Sink"]

logger = logging.getLogger(__name__)

Sink: TypeAlias = Callable[[ParseDiagnostic], None]


@dataclass(frozen=True, slots=True)
class FromHtmlOptions:
    """Immutable configuration for one from_html call.

    All fields have defaults; ``FromHtmlOptions()`` parses a full document
    and reports nothing.

    Attributes:
        fragment: Parse a fragment instead of a complete document. In
            document mode, unopened ``html``, ``head`` and ``body`` elements
            are opened in just the right places.
        on_error: Sink called with each parse error diagnostic. Without a
            sink no diagnostics are observable.
        severities: Per-rule overrides keyed by camel-case rule identifier.
            ``False``/``0`` turns a rule off, ``True``/``1`` (the default)
            reports it as a warning, ``2`` marks it fatal.
        strict: Raise UnknownRuleError for severity keys the catalog does
            not know. Otherwise they are logged and ignored.

    Example:
        >>> messages = []
        >>> options = FromHtmlOptions(
        ...     on_error=messages.append,
        ...     severities={"missingDoctype": False, "duplicateAttribute": 2},
        ... )
    """

    fragment: bool = False
    on_error: Sink | None = None
    severities: Mapping[str, SeveritySetting] = field(
        default_factory=lambda: MappingProxyType({})
    )
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate and freeze the severity overrides.

        Raises:
            ConfigurationError: If on_error is not callable.
            UnknownRuleError: If strict and a severity key is unknown.
        """
        if self.on_error is not None and not callable(self.on_error):
            msg = f"on_error must be callable, got {type(self.on_error).__name__}"
            raise ConfigurationError(msg)

        unknown = [key for key in self.severities if key not in RULE_KEYS]
        if unknown:
            if self.strict:
                raise UnknownRuleError(unknown)
            for key in unknown:
                logger.warning("Ignoring severity for unknown parse error rule '%s'", key)

        known = {key: value for key, value in self.severities.items() if key in RULE_KEYS}
        # Frozen dataclass: bypass __setattr__ to store the cleaned copy
        object.__setattr__(self, "severities", MappingProxyType(known))
