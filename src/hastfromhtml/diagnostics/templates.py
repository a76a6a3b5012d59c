"""Message template rendering.

Catalog templates reference the source that triggered a parse error through
two placeholders:

    %c[+N|-N]  The character at the error's start offset, shifted by N
    %x         ``0x`` plus the upper-case hex code point at the start offset

Substitutions always read the original source text handed to the parser,
never an escaped or normalized copy.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = [
    "BACKTICK_ESCAPE",
    "char_at",
    "code_point_at",
    "render_template",
]

# A backtick inside inline code would end it early. Render it as a code span
# of its own, delimited by double backticks.
BACKTICK_ESCAPE = "` ` `"

_PLACEHOLDER = re.compile(r"%c(?:([-+])(\d+))?|%x")


def char_at(source: str, index: int) -> str:
    """Return the character at ``index``, or "" when out of range.

    Negative indices never wrap around to the end of the source.
    """
    if 0 <= index < len(source):
        return source[index]
    return ""


def code_point_at(source: str, index: int) -> str:
    """Return ``0x`` plus the upper-case hex code point at ``index``.

    Example:
        >>> code_point_at("\\x00", 0)
        '0x0'
        >>> code_point_at("\\ud800", 0)
        '0xD800'

    Returns "" when ``index`` is outside the source.
    """
    char = char_at(source, index)
    if not char:
        return ""
    return f"0x{ord(char):X}"


def render_template(template: str, source: str, offset: int) -> str:
    """Expand ``%c`` and ``%x`` placeholders in a catalog template.

    Placeholders are matched left to right without overlap. Text that is
    not a placeholder passes through unchanged.

    Args:
        template: Reason or description template from the catalog
        source: Original source text the parser consumed
        offset: Start offset of the parse error (0-indexed)

    Returns:
        Rendered message text

    Example:
        >>> render_template("Unexpected `%c-1`", "</x/>", 4)
        'Unexpected `/`'
    """

    def substitute(match: re.Match[str]) -> str:
        if match.group() == "%x":
            return code_point_at(source, offset)

        sign, digits = match.groups()
        shift = int(digits) if digits else 0
        if sign == "-":
            shift = -shift

        char = char_at(source, offset + shift)
        return BACKTICK_ESCAPE if char == "`" else char

    return _PLACEHOLDER.sub(substitute, template)
