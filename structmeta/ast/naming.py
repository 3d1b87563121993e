"""
Naming Normalizer

Derives every spelling the templates need from one declared Go identifier:
singular and plural forms, Go camel identifiers, lower camel (JSON-style),
snake case, and a short acronym alias.

All functions are pure and return "" for an empty identifier.
"""

import re

import inflection

from structmeta.ast.models import NameForms
from structmeta.configs.constants import COMMON_INITIALISMS, PLURAL_OVERRIDES

# Separators between words; letters and digits are matched Unicode-wide
_SEPARATOR_RE = re.compile(r"[\W_]+")

# Lower camel renderings soften this token
_SOFTENED = {"ID": "Id", "IDs": "Ids"}


def _is_lower(ch: str) -> bool:
    # Caseless letters (CJK and the like) extend a word like lower case
    return ch.isalpha() and not ch.isupper()


def _split_chunk(chunk: str) -> list[str]:
    """
    Split a separator-free chunk on case and digit boundaries.

    An upper-case run before a capitalized word loses its last letter to
    that word ("HTTPServer"); an upper-case run followed by a lone "s" is a
    plural initialism ("IDs").
    """
    words = []
    i, n = 0, len(chunk)
    while i < n:
        ch = chunk[i]
        j = i + 1
        if ch.isdecimal():
            while j < n and chunk[j].isdecimal():
                j += 1
        elif ch.isupper():
            while j < n and chunk[j].isupper():
                j += 1
            if j < n and _is_lower(chunk[j]):
                if j - i == 1:
                    while j < n and _is_lower(chunk[j]):
                        j += 1
                elif chunk[j] == "s" and (j + 1 == n or not _is_lower(chunk[j + 1])):
                    j += 1
                else:
                    j -= 1
        else:
            while j < n and _is_lower(chunk[j]):
                j += 1
        words.append(chunk[i:j])
        i = j
    return words


def split_words(identifier: str) -> list[str]:
    """Split an identifier on separators and case boundaries."""
    words = []
    for chunk in _SEPARATOR_RE.split(identifier):
        words.extend(_split_chunk(chunk))
    return words


def singular(word: str) -> str:
    """Singular form using the standard inflection rules."""
    if not word:
        return ""
    return inflection.singularize(word)


def plural(word: str) -> str:
    """
    Plural form using the standard inflection rules.

    "information" is uncountable in the rule set; downstream naming needs
    a distinct plural, so it becomes "informations".
    """
    if not word:
        return ""
    out = inflection.pluralize(word)
    return PLURAL_OVERRIDES.get(out, out)


def _camel_word(word: str) -> str:
    if word.upper() in COMMON_INITIALISMS:
        return word.upper()
    if len(word) > 2 and word.endswith("s") and word[:-1].isupper() and word[:-1] in COMMON_INITIALISMS:
        return word
    return word[:1].upper() + word[1:].lower()


def camel_identifier(identifier: str) -> str:
    """
    Go-style exported identifier: capitalized words, initialisms upper-cased.

    "user_id" and "UserId" both give "UserID". Characters that cannot
    appear in an identifier are dropped.
    """
    words = split_words(identifier)
    if not words:
        return ""
    out = "".join(_camel_word(w) for w in words)
    if out[0].isdigit():
        out = "_" + out
    return out


def lower_camel(identifier: str) -> str:
    """
    Lower camel case with "ID" softened to "Id".

    "UserID" gives "userId", "HTTPServer" gives "httpServer".
    """
    words = split_words(identifier)
    if not words:
        return ""
    parts = [words[0].lower()]
    for word in words[1:]:
        word = _SOFTENED.get(word, word)
        parts.append(word[:1].upper() + word[1:])
    return "".join(parts)


def lower_initial(identifier: str) -> str:
    """Lower only the first character, leaving the rest as written."""
    if not identifier:
        return ""
    return identifier[0].lower() + identifier[1:]


def snake(identifier: str) -> str:
    """Lower snake case: "UserID" gives "user_id"."""
    if not identifier:
        return ""
    return "_".join(word.lower() for word in split_words(identifier))


def short_name(camel: str) -> str:
    """Upper-case letters of a camel spelling, lowered: "UserAccount" gives "ua"."""
    return "".join(ch for ch in camel if ch.isupper()).lower()


def derive_names(identifier: str, singularize: bool = False) -> NameForms:
    """
    Compute every spelling of an identifier.

    Args:
        identifier: Name as declared in source (may be empty)
        singularize: Use the singular form as the canonical name
                     (type declarations); members keep their declared name

    Returns:
        NameForms with all spellings populated
    """
    if not identifier:
        return NameForms()

    canonical = singular(identifier) if singularize else identifier
    plural_form = plural(canonical)
    camel = camel_identifier(canonical)

    return NameForms(
        singular=canonical,
        plural=plural_form,
        camel=camel,
        camel_plural=camel_identifier(plural_form),
        lower_camel=lower_camel(identifier),
        lower_camel_plural=lower_camel(plural_form),
        lower_initial=lower_initial(identifier),
        snake=snake(identifier),
        short=short_name(camel),
    )
