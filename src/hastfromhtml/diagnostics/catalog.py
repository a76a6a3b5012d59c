"""Parse error catalog.

Static table of human-readable templates and documentation policy for every
parse error a WHATWG-conformant HTML parser reports. Keys are the camel-case
form of the hyphen-case rule codes (``missing-doctype`` -> ``missingDoctype``).

Templates may contain two placeholders, expanded against the parsed source
by ``render_template``:

    %c, %c-1, %c+2   Character at (start offset + n)
    %x               Hexadecimal code point at the start offset

Entries with ``url=False`` describe errors the WHATWG specification does not
(yet) document with an anchor, so diagnostics for them carry no URL.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "EMPTY_RULE",
    "PARSE_ERRORS",
    "RULE_KEYS",
    "RuleEntry",
    "get_rule",
]


@dataclass(frozen=True, slots=True)
class RuleEntry:
    """Templates and URL policy for one parse error.

    Attributes:
        reason: Short summary template (becomes ``message``/``reason``)
        description: Longer explanation template (becomes ``note``)
        url: False when the rule has no WHATWG anchor
    """

    reason: str
    description: str
    url: bool = True


# Fallback for codes missing from the catalog. A miss is a completeness bug
# in this table, never a reason to fail a parse.
EMPTY_RULE = RuleEntry(reason="", description="")

_ENTRIES: dict[str, RuleEntry] = {
    "abandonedHeadElementChild": RuleEntry(
        reason="Unexpected metadata element after head",
        description="Unexpected element after head. Expected the element before `</head>`",
        url=False,
    ),
    "abruptClosingOfEmptyComment": RuleEntry(
        reason="Unexpected abruptly closed empty comment",
        description="Unexpected `>` or `->`. Expected `-->` to close comments",
    ),
    "abruptDoctypePublicIdentifier": RuleEntry(
        reason="Unexpected abruptly closed public identifier",
        description="Unexpected `>`. Expected a closing `\"` or `'` after the public identifier",
    ),
    "abruptDoctypeSystemIdentifier": RuleEntry(
        reason="Unexpected abruptly closed system identifier",
        description="Unexpected `>`. Expected a closing `\"` or `'` after the identifier identifier",
    ),
    "absenceOfDigitsInNumericCharacterReference": RuleEntry(
        reason="Unexpected non-digit at start of numeric character reference",
        description=(
            "Unexpected `%c`. Expected `[0-9]` for decimal references "
            "or `[0-9a-fA-F]` for hexadecimal references"
        ),
    ),
    "cdataInHtmlContent": RuleEntry(
        reason="Unexpected CDATA section in HTML",
        description=(
            "Unexpected `<![CDATA[` in HTML. Remove it, use a comment, "
            "or encode special characters instead"
        ),
    ),
    "characterReferenceOutsideUnicodeRange": RuleEntry(
        reason="Unexpected too big numeric character reference",
        description=(
            "Unexpectedly high character reference. Expected character references "
            "to be at most hexadecimal 10ffff (or decimal 1114111)"
        ),
    ),
    "closingOfElementWithOpenChildElements": RuleEntry(
        reason="Unexpected closing tag with open child elements",
        description="Unexpectedly closing tag. Expected other tags to be closed first",
        url=False,
    ),
    "controlCharacterInInputStream": RuleEntry(
        reason="Unexpected control character",
        description=(
            "Unexpected control character `%x`. "
            "Expected a non-control code point, 0x00, or ASCII whitespace"
        ),
    ),
    "controlCharacterReference": RuleEntry(
        reason="Unexpected control character reference",
        description=(
            "Unexpectedly control character in reference. "
            "Expected a non-control code point, 0x00, or ASCII whitespace"
        ),
    ),
    "disallowedContentInNoscriptInHead": RuleEntry(
        reason="Disallowed content inside `<noscript>` in `<head>`",
        description="Unexpected text character `%c`. Only use text in `<noscript>`s in `<body>`",
        url=False,
    ),
    "duplicateAttribute": RuleEntry(
        reason="Unexpected duplicate attribute",
        description="Unexpectedly double attribute. Expected attributes to occur only once",
    ),
    "endTagWithAttributes": RuleEntry(
        reason="Unexpected attribute on closing tag",
        description="Unexpected attribute. Expected `>` instead",
    ),
    "endTagWithTrailingSolidus": RuleEntry(
        reason="Unexpected slash at end of closing tag",
        description="Unexpected `%c-1`. Expected `>` instead",
    ),
    "endTagWithoutMatchingOpenElement": RuleEntry(
        reason="Unexpected unopened end tag",
        description="Unexpected end tag. Expected no end tag or another end tag",
        url=False,
    ),
    "eofBeforeTagName": RuleEntry(
        reason="Unexpected end of file",
        description="Unexpected end of file. Expected tag name instead",
    ),
    "eofInCdata": RuleEntry(
        reason="Unexpected end of file in CDATA",
        description="Unexpected end of file. Expected `]]>` to close the CDATA",
    ),
    "eofInComment": RuleEntry(
        reason="Unexpected end of file in comment",
        description="Unexpected end of file. Expected `-->` to close the comment",
    ),
    "eofInDoctype": RuleEntry(
        reason="Unexpected end of file in doctype",
        description="Unexpected end of file. Expected a valid doctype (such as `<!doctype html>`)",
    ),
    "eofInElementThatCanContainOnlyText": RuleEntry(
        reason="Unexpected end of file in element that can only contain text",
        description="Unexpected end of file. Expected text or a closing tag",
        url=False,
    ),
    "eofInScriptHtmlCommentLikeText": RuleEntry(
        reason="Unexpected end of file in comment inside script",
        description="Unexpected end of file. Expected `-->` to close the comment",
    ),
    "eofInTag": RuleEntry(
        reason="Unexpected end of file in tag",
        description="Unexpected end of file. Expected `>` to close the tag",
    ),
    "incorrectlyClosedComment": RuleEntry(
        reason="Incorrectly closed comment",
        description="Unexpected `%c-1`. Expected `-->` to close the comment",
    ),
    "incorrectlyOpenedComment": RuleEntry(
        reason="Incorrectly opened comment",
        description="Unexpected `%c`. Expected `<!--` to open the comment",
    ),
    "invalidCharacterSequenceAfterDoctypeName": RuleEntry(
        reason="Invalid sequence after doctype name",
        description="Unexpected sequence at `%c`. Expected `public` or `system`",
    ),
    "invalidFirstCharacterOfTagName": RuleEntry(
        reason="Invalid first character in tag name",
        description="Unexpected `%c`. Expected an ASCII letter instead",
    ),
    "misplacedDoctype": RuleEntry(
        reason="Misplaced doctype",
        description="Unexpected doctype. Expected doctype before head",
        url=False,
    ),
    "misplacedStartTagForHeadElement": RuleEntry(
        reason="Misplaced `<head>` start tag",
        description="Unexpected start tag `<head>`. Expected `<head>` directly after doctype",
        url=False,
    ),
    "missingAttributeValue": RuleEntry(
        reason="Missing attribute value",
        description="Unexpected `%c-1`. Expected an attribute value or no `%c-1` instead",
    ),
    "missingDoctype": RuleEntry(
        reason="Missing doctype before other content",
        description="Expected a `<!doctype html>` before anything else",
        url=False,
    ),
    "missingDoctypeName": RuleEntry(
        reason="Missing doctype name",
        description="Unexpected doctype end at `%c`. Expected `html` instead",
    ),
    "missingDoctypePublicIdentifier": RuleEntry(
        reason="Missing public identifier in doctype",
        description="Unexpected `%c`. Expected identifier for `public` instead",
    ),
    "missingDoctypeSystemIdentifier": RuleEntry(
        reason="Missing system identifier in doctype",
        description=(
            "Unexpected `%c`. Expected identifier for `system` instead "
            '(suggested: `"about:legacy-compat"`)'
        ),
    ),
    "missingEndTagName": RuleEntry(
        reason="Missing name in end tag",
        description="Unexpected `%c`. Expected an ASCII letter instead",
    ),
    "missingQuoteBeforeDoctypePublicIdentifier": RuleEntry(
        reason="Missing quote before public identifier in doctype",
        description="Unexpected `%c`. Expected `\"` or `'` instead",
    ),
    "missingQuoteBeforeDoctypeSystemIdentifier": RuleEntry(
        reason="Missing quote before system identifier in doctype",
        description="Unexpected `%c`. Expected `\"` or `'` instead",
    ),
    "missingSemicolonAfterCharacterReference": RuleEntry(
        reason="Missing semicolon after character reference",
        description="Unexpected `%c`. Expected `;` instead",
    ),
    "missingWhitespaceAfterDoctypePublicKeyword": RuleEntry(
        reason="Missing whitespace after public identifier in doctype",
        description="Unexpected `%c`. Expected ASCII whitespace instead",
    ),
    "missingWhitespaceAfterDoctypeSystemKeyword": RuleEntry(
        reason="Missing whitespace after system identifier in doctype",
        description="Unexpected `%c`. Expected ASCII whitespace instead",
    ),
    "missingWhitespaceBeforeDoctypeName": RuleEntry(
        reason="Missing whitespace before doctype name",
        description="Unexpected `%c`. Expected ASCII whitespace instead",
    ),
    "missingWhitespaceBetweenAttributes": RuleEntry(
        reason="Missing whitespace between attributes",
        description="Unexpected `%c`. Expected ASCII whitespace instead",
    ),
    "missingWhitespaceBetweenDoctypePublicAndSystemIdentifiers": RuleEntry(
        reason="Missing whitespace between public and system identifiers in doctype",
        description="Unexpected `%c`. Expected ASCII whitespace instead",
    ),
    "nestedComment": RuleEntry(
        reason="Unexpected nested comment",
        description="Unexpected `<!--`. Expected `-->`",
    ),
    "nestedNoscriptInHead": RuleEntry(
        reason="Unexpected nested `<noscript>` in `<head>`",
        description="Unexpected `<noscript>`. Expected a closing tag or a meta element",
        url=False,
    ),
    "nonConformingDoctype": RuleEntry(
        reason="Unexpected non-conforming doctype declaration",
        description=(
            'Expected `<!doctype html>` or `<!doctype html system "about:legacy-compat">`'
        ),
        url=False,
    ),
    "nonVoidHtmlElementStartTagWithTrailingSolidus": RuleEntry(
        reason="Unexpected trailing slash on start tag of non-void element",
        description="Unexpected `/`. Expected `>` instead",
    ),
    "noncharacterCharacterReference": RuleEntry(
        reason="Unexpected noncharacter code point referenced by character reference",
        description="Unexpected code point. Do not use noncharacters in HTML",
    ),
    "noncharacterInInputStream": RuleEntry(
        reason="Unexpected noncharacter character",
        description="Unexpected code point `%x`. Do not use noncharacters in HTML",
    ),
    "nullCharacterReference": RuleEntry(
        reason="Unexpected NULL character referenced by character reference",
        description="Unexpected code point. Do not use NULL characters in HTML",
    ),
    "openElementsLeftAfterEof": RuleEntry(
        reason="Unexpected end of file",
        description="Unexpected end of file. Expected closing tag instead",
        url=False,
    ),
    "surrogateCharacterReference": RuleEntry(
        reason="Unexpected surrogate character referenced by character reference",
        description="Unexpected code point. Do not use lone surrogate characters in HTML",
    ),
    "surrogateInInputStream": RuleEntry(
        reason="Unexpected surrogate character",
        description="Unexpected code point `%x`. Do not use lone surrogate characters in HTML",
    ),
    "unexpectedCharacterAfterDoctypeSystemIdentifier": RuleEntry(
        reason="Invalid character after system identifier in doctype",
        description="Unexpected character at `%c`. Expected `>`",
    ),
    "unexpectedCharacterInAttributeName": RuleEntry(
        reason="Unexpected character in attribute name",
        description=(
            "Unexpected `%c`. Expected whitespace, `/`, `>`, `=`, or probably an ASCII letter"
        ),
    ),
    "unexpectedCharacterInUnquotedAttributeValue": RuleEntry(
        reason="Unexpected character in unquoted attribute value",
        description="Unexpected `%c`. Quote the attribute value to include it",
    ),
    "unexpectedEqualsSignBeforeAttributeName": RuleEntry(
        reason="Unexpected equals sign before attribute name",
        description="Unexpected `%c`. Add an attribute name before it",
    ),
    "unexpectedNullCharacter": RuleEntry(
        reason="Unexpected NULL character",
        description="Unexpected code point `%x`. Do not use NULL characters in HTML",
    ),
    "unexpectedQuestionMarkInsteadOfTagName": RuleEntry(
        reason="Unexpected question mark instead of tag name",
        description="Unexpected `%c`. Expected an ASCII letter instead",
    ),
    "unexpectedSolidusInTag": RuleEntry(
        reason="Unexpected slash in tag",
        description=(
            "Unexpected `%c-1`. Expected it followed by `>` or in a quoted attribute value"
        ),
    ),
    "unknownNamedCharacterReference": RuleEntry(
        reason="Unexpected unknown named character reference",
        description=(
            "Unexpected character reference. Expected known named character references"
        ),
    ),
}

PARSE_ERRORS: MappingProxyType[str, RuleEntry] = MappingProxyType(_ENTRIES)

# Closed set of keys accepted in severity configuration.
RULE_KEYS: frozenset[str] = frozenset(_ENTRIES)


def get_rule(key: str) -> RuleEntry | None:
    """Look up a catalog entry by camel-case key.

    Args:
        key: Normalized rule identifier (e.g. ``"missingDoctype"``)

    Returns:
        The entry, or None when the catalog has no such rule
    """
    return PARSE_ERRORS.get(key)
