"""Tests for options.py: FromHtmlOptions validation.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging

import pytest

from hastfromhtml.diagnostics.errors import ConfigurationError, UnknownRuleError
from hastfromhtml.options import FromHtmlOptions


class TestDefaults:
    """FromHtmlOptions()."""

    def test_defaults(self) -> None:
        options = FromHtmlOptions()

        assert options.fragment is False
        assert options.on_error is None
        assert dict(options.severities) == {}
        assert options.strict is False

    def test_frozen(self) -> None:
        options = FromHtmlOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.fragment = True  # type: ignore[misc]


class TestSeverities:
    """Per-rule overrides."""

    def test_known_keys_kept(self) -> None:
        options = FromHtmlOptions(severities={"missingDoctype": False, "eofInTag": 2})
        assert dict(options.severities) == {"missingDoctype": False, "eofInTag": 2}

    def test_stored_copy_is_read_only(self) -> None:
        source = {"missingDoctype": False}
        options = FromHtmlOptions(severities=source)
        source["missingDoctype"] = True

        assert options.severities["missingDoctype"] is False
        with pytest.raises(TypeError):
            options.severities["eofInTag"] = 2  # type: ignore[index]

    def test_unknown_keys_ignored_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="hastfromhtml.options"):
            options = FromHtmlOptions(severities={"missing-doctype": False, "eofInTag": 0})

        assert dict(options.severities) == {"eofInTag": 0}
        assert "missing-doctype" in caplog.text

    def test_unknown_keys_rejected_in_strict_mode(self) -> None:
        with pytest.raises(UnknownRuleError) as info:
            FromHtmlOptions(severities={"nope": 1, "alsoNope": 2, "eofInTag": 1}, strict=True)

        assert info.value.keys == ("alsoNope", "nope")

    def test_strict_accepts_known_keys(self) -> None:
        options = FromHtmlOptions(severities={"eofInTag": 1}, strict=True)
        assert options.severities["eofInTag"] == 1


class TestSink:
    """on_error validation."""

    def test_callable_accepted(self) -> None:
        messages: list[object] = []
        assert FromHtmlOptions(on_error=messages.append).on_error == messages.append

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="on_error must be callable"):
            FromHtmlOptions(on_error="print")  # type: ignore[arg-type]
