"""Markdown documentation for the parse error catalog.

Renders one list item per catalog entry, suitable for pasting between the
``<!-- parse-error start -->`` and ``<!-- parse-error end -->`` markers of a
readme.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from hastfromhtml.constants import PARSE_ERROR_URL_BASE, REPOSITORY

from .catalog import PARSE_ERRORS, RuleEntry
from .rules import kebabcase

__all__ = [
    "NO_FIXTURE",
    "render_rule_item",
    "render_rule_list",
]

# Rules without an example fixture: a lone surrogate cannot be stored in a
# UTF-8 encoded file.
NO_FIXTURE: frozenset[str] = frozenset({"surrogateInInputStream"})


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def render_rule_item(key: str, entry: RuleEntry, *, repository: str = REPOSITORY) -> str:
    """Render a single catalog entry as a Markdown list item.

    Args:
        key: Camel-case rule identifier
        entry: Catalog entry for the rule
        repository: GitHub ``owner/name`` hosting the example fixtures

    Returns:
        One line starting with ``* ``
    """
    kebab = kebabcase(key)
    head = f"`{key}`"
    if entry.url:
        head = f"[{head}]({PARSE_ERROR_URL_BASE}{kebab})"

    line = f"* {head} — {_lower_first(entry.reason)}"

    if key not in NO_FIXTURE:
        example = f"https://github.com/{repository}/blob/main/test/parse-error/{kebab}/index.html"
        line += f" ([example]({example}))"

    return line


def render_rule_list(
    rules: Mapping[str, RuleEntry] = PARSE_ERRORS,
    *,
    repository: str = REPOSITORY,
) -> str:
    """Render the catalog as a Markdown list, in catalog order.

    Args:
        rules: Catalog to render (defaults to the built-in one)
        repository: GitHub ``owner/name`` hosting the example fixtures

    Returns:
        Markdown list with one item per rule, newline terminated
    """
    lines = [render_rule_item(key, entry, repository=repository) for key, entry in rules.items()]
    return "\n".join(lines) + "\n"
