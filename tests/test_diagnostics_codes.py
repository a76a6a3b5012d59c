"""Tests for diagnostics/codes.py: source points, positions and diagnostics.

Properties tested:
- Immutability (frozen dataclasses)
- SourcePoint invariants
- to_dict() JSON shape, including conditional ``file``
- String forms used for diagnostic names

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hastfromhtml.diagnostics.codes import ParseDiagnostic, SourcePoint, SourcePosition

# ============================================================================
# HYPOTHESIS STRATEGIES
# ============================================================================


@st.composite
def source_points(draw: st.DrawFn) -> SourcePoint:
    """Generate arbitrary valid SourcePoint instances."""
    return SourcePoint(
        line=draw(st.integers(min_value=1, max_value=10000)),
        column=draw(st.integers(min_value=1, max_value=1000)),
        offset=draw(st.integers(min_value=0, max_value=100000)),
    )


def make_diagnostic(**overrides: object) -> ParseDiagnostic:
    """Build a missing-doctype diagnostic at 1:1, with overrides."""
    point = SourcePoint(line=1, column=1, offset=0)
    fields: dict[str, object] = {
        "rule_id": "missing-doctype",
        "message": "Missing doctype before other content",
        "reason": "Missing doctype before other content",
        "note": "Expected a `<!doctype html>` before anything else",
        "name": "1:1-1:1",
        "line": 1,
        "column": 1,
        "position": SourcePosition(start=point, end=point),
        "fatal": False,
        "source": "parse-error",
        "url": None,
    }
    fields.update(overrides)
    return ParseDiagnostic(**fields)  # type: ignore[arg-type]


class TestSourcePoint:
    """SourcePoint rendering."""

    def test_str(self) -> None:
        assert str(SourcePoint(line=2, column=7, offset=20)) == "2:7"

    def test_to_dict(self) -> None:
        point = SourcePoint(line=1, column=3, offset=2)
        assert point.to_dict() == {"line": 1, "column": 3, "offset": 2}

    @pytest.mark.parametrize(("line", "column", "offset"), [(0, 1, 0), (1, 0, 0), (1, 1, -1)])
    def test_out_of_range_values_kept(self, line: int, column: int, offset: int) -> None:
        """Points hold whatever the parser reported."""
        point = SourcePoint(line=line, column=column, offset=offset)
        assert point.to_dict() == {"line": line, "column": column, "offset": offset}

    def test_frozen(self) -> None:
        point = SourcePoint(line=1, column=1, offset=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.line = 2  # type: ignore[misc]

    @given(source_points())
    def test_str_matches_fields(self, point: SourcePoint) -> None:
        """PROPERTY: str(point) is "line:column"."""
        assert str(point) == f"{point.line}:{point.column}"


class TestSourcePosition:
    """SourcePosition rendering."""

    def test_str(self) -> None:
        position = SourcePosition(
            start=SourcePoint(line=1, column=5, offset=4),
            end=SourcePoint(line=2, column=1, offset=6),
        )
        assert str(position) == "1:5-2:1"

    @given(source_points(), source_points())
    def test_to_dict_nests_points(self, start: SourcePoint, end: SourcePoint) -> None:
        """PROPERTY: to_dict() nests both points."""
        data = SourcePosition(start=start, end=end).to_dict()
        assert data == {"start": start.to_dict(), "end": end.to_dict()}


class TestParseDiagnostic:
    """ParseDiagnostic shape."""

    def test_str_is_message(self) -> None:
        assert str(make_diagnostic()) == "Missing doctype before other content"

    def test_to_dict_without_file(self) -> None:
        assert make_diagnostic().to_dict() == {
            "name": "1:1-1:1",
            "message": "Missing doctype before other content",
            "reason": "Missing doctype before other content",
            "line": 1,
            "column": 1,
            "source": "parse-error",
            "ruleId": "missing-doctype",
            "position": {
                "start": {"line": 1, "column": 1, "offset": 0},
                "end": {"line": 1, "column": 1, "offset": 0},
            },
            "fatal": False,
            "note": "Expected a `<!doctype html>` before anything else",
            "url": None,
        }

    def test_to_dict_with_file(self) -> None:
        data = make_diagnostic(file="example.html", name="example.html:1:1-1:1").to_dict()
        assert data["file"] == "example.html"
        assert data["name"] == "example.html:1:1-1:1"

    def test_file_key_absent_without_file(self) -> None:
        assert "file" not in make_diagnostic().to_dict()

    def test_json_serializable(self) -> None:
        data = make_diagnostic(fatal=True, url="https://example.com").to_dict()
        assert json.loads(json.dumps(data)) == data

    def test_frozen(self) -> None:
        diagnostic = make_diagnostic()
        with pytest.raises(dataclasses.FrozenInstanceError):
            diagnostic.fatal = True  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        assert make_diagnostic() == make_diagnostic()
