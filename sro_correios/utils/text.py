"""Cosmetic capitalization helpers for carrier labels."""

import re

# A letter that starts a word: at the beginning, or after anything that is
# neither a letter nor an apostrophe. Digits count as boundaries ("2nd" -> "2Nd").
_LETTER = "a-zA-Z\u00C0-\u017F"
_WORD_START = re.compile(rf"(^|[^{_LETTER}'])([{_LETTER}])")

_TWO_CHAR_WORD = re.compile(r"(?<!\S)(\S{2})(?!\S)")


def capitalize_words(value: str) -> str:
    """Lower-case the text, then upper-case the first letter of each word.

    ``capitalize_words("SAO PAULO")`` -> ``"Sao Paulo"``;
    ``capitalize_words("sedex-hoje")`` -> ``"Sedex-Hoje"``.
    """
    return _WORD_START.sub(
        lambda match: match.group(1) + match.group(2).upper(),
        value.lower(),
    )


def upper_first_two_char_word(value: str) -> str:
    """Upper-case the first standalone two-character word, if any.

    Returns the text unchanged when no such word exists.
    """
    return _TWO_CHAR_WORD.sub(lambda match: match.group(1).upper(), value, count=1)
