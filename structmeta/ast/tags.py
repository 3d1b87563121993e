"""
Annotation Parser

Parses Go struct tags into a key/value map and promotes the directives the
templates use (faker, fixture, json, db, graphql) to named fields.

Tags follow the reflect.StructTag convention: space-separated key:"value"
pairs whose values are Go interpreted string literals. Unparseable quoting
of the tag literal itself raises TagError, which aborts the run; scanning
the pairs stops quietly at the first malformed one.
"""

import re

from structmeta.ast.models import TagInfo
from structmeta.configs.constants import (
    FIXTURE_STRING_PREFIX,
    TAG_DB,
    TAG_FAKER,
    TAG_FIXTURE,
    TAG_GRAPHQL,
    TAG_JSON,
)
from structmeta.exceptions import TagError

# key:"value" with escaped quotes allowed inside the value
_PAIR_RE = re.compile(r'(?P<key>[^\s:"\x7f]+):(?P<value>"(?:[^"\\\n]|\\.)*")')

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}
_HEX_ESCAPES = {"x": 2, "u": 4, "U": 8}

_QUOTE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _decode_interpreted(body: str, literal: str) -> str:
    """Decode the escapes of a double-quoted Go string body."""
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '"' or ch == "\n":
            raise TagError("unescaped quote or newline in string literal", literal)
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= len(body):
            raise TagError("dangling escape in string literal", literal)
        esc = body[i + 1]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in _HEX_ESCAPES:
            width = _HEX_ESCAPES[esc]
            digits = body[i + 2:i + 2 + width]
            if len(digits) != width or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise TagError(f"invalid \\{esc} escape in string literal", literal)
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise TagError("escape is not a valid code point", literal)
            out.append(chr(code))
            i += 2 + width
        elif esc in "01234567":
            digits = body[i + 1:i + 4]
            if len(digits) != 3 or not all(c in "01234567" for c in digits):
                raise TagError("invalid octal escape in string literal", literal)
            code = int(digits, 8)
            if code > 0xFF:
                raise TagError("octal escape out of range", literal)
            out.append(chr(code))
            i += 4
        else:
            raise TagError(f"unknown escape \\{esc} in string literal", literal)
    return "".join(out)


def unquote(literal: str) -> str:
    """
    Unquote a Go string literal (raw `...` or interpreted "...").

    Raises:
        TagError: If the literal is not validly quoted
    """
    if len(literal) >= 2 and literal[0] == literal[-1] == "`":
        body = literal[1:-1]
        if "`" in body:
            raise TagError("backquote inside raw string literal", literal)
        return body.replace("\r", "")
    if len(literal) >= 2 and literal[0] == literal[-1] == '"':
        return _decode_interpreted(literal[1:-1], literal)
    raise TagError("tag is not a quoted string literal", literal)


def quote(value: str) -> str:
    """Quote a string as a Go interpreted string literal."""
    out = ['"']
    for ch in value:
        if ch in _QUOTE_ESCAPES:
            out.append(_QUOTE_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) < 0x80:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    out.append('"')
    return "".join(out)


def parse_pairs(tag: str) -> dict[str, str]:
    """
    Split an unquoted tag into its key/value pairs.

    Scanning stops at the first text that is not a key:"value" pair (or
    whose value does not decode); the pairs before it are kept, as
    reflect.StructTag lookups do. A repeated key keeps its last value.
    """
    values: dict[str, str] = {}
    pos = 0
    while pos < len(tag):
        if tag[pos].isspace():
            pos += 1
            continue
        match = _PAIR_RE.match(tag, pos)
        if match is None:
            break
        try:
            value = _decode_interpreted(match.group("value")[1:-1], tag)
        except TagError:
            break
        values[match.group("key")] = value
        pos = match.end()
    return values


def fixture_value(value: str) -> str:
    """Re-quote "string:"-prefixed fixture hints as a string literal."""
    if value.startswith(FIXTURE_STRING_PREFIX):
        return quote(value[len(FIXTURE_STRING_PREFIX):])
    return value


def parse_tag(literal: str) -> TagInfo:
    """
    Parse a struct tag literal as it appears in source.

    Args:
        literal: Quoted tag, e.g. `json:"id" faker:"uuid_digit"`

    Returns:
        TagInfo with the raw unquoted tag, its pairs, and promoted directives

    Raises:
        TagError: On malformed quoting
    """
    raw = unquote(literal)
    values = parse_pairs(raw)
    return TagInfo(
        raw=raw,
        values=values,
        faker=values.get(TAG_FAKER, ""),
        fixture=fixture_value(values.get(TAG_FIXTURE, "")),
        json=values.get(TAG_JSON, ""),
        db=values.get(TAG_DB, ""),
        graphql=values.get(TAG_GRAPHQL, ""),
    )
