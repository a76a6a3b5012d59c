"""Shared constants for hast-from-html.

Placing constants here avoids circular imports between the diagnostics
package and the reporter, and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "PARSE_ERROR_URL_BASE",
    "REPOSITORY",
    "WHATWG_PARSING_URL",
]

# ============================================================================
# DOCUMENTATION LINKS
# ============================================================================

# WHATWG parsing chapter. Every parse error has an anchor of the form
# ``#parse-error-<code>`` below it.
WHATWG_PARSING_URL: str = "https://html.spec.whatwg.org/multipage/parsing.html"

# Final diagnostic URL is this prefix plus the hyphen-case rule code,
# never the camel-case catalog key.
PARSE_ERROR_URL_BASE: str = WHATWG_PARSING_URL + "#parse-error-"

# Repository slug used for example links in the generated rule list.
REPOSITORY: str = "syntax-tree/hast-util-from-html"

# ============================================================================
# DIAGNOSTIC IDENTITY
# ============================================================================

# Constant ``source`` tag stamped on every emitted diagnostic.
DIAGNOSTIC_SOURCE: str = "parse-error"
