"""Name utilities for catalogue fields.

Implements the parsing and ordering rules shared by the catalogue and
the interval report:
- split_names: delimited studio/producer strings -> individual names
- collation_key: locale-style sort key for titles and producer names
"""

import re
import unicodedata

# Comma, or the whole word "and" in any case. Word boundaries keep
# names such as "Andersen Productions" or "Brandy" intact.
_NAME_SEPARATOR = re.compile(r"\s*(?:,|\band\b)\s*", re.IGNORECASE)


def split_names(value: str) -> tuple[str, ...]:
    """Split a delimited list of names.

    "A, B and C" -> ("A", "B", "C"). Tokens are trimmed and empty
    tokens (e.g. from "A, and B" or a trailing comma) are dropped.

    Args:
        value: Raw studios or producers field.

    Returns:
        Names in their original order.
    """
    return tuple(token.strip() for token in _NAME_SEPARATOR.split(value) if token.strip())


# Punctuation in standard (CLDR root) collation order. Whitespace sorts
# before these, then other symbols, digits and letters.
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~"
_PUNCTUATION_RANK = {char: rank for rank, char in enumerate(_PUNCTUATION_ORDER)}

_WHITESPACE, _PUNCTUATION, _SYMBOL, _DIGIT, _LETTER = range(5)


def _primary_weights(char: str) -> list[tuple[int, int]]:
    if char.isspace():
        return [(_WHITESPACE, ord(char))]
    if char in _PUNCTUATION_RANK:
        return [(_PUNCTUATION, _PUNCTUATION_RANK[char])]
    if char.isdecimal():
        return [(_DIGIT, unicodedata.decimal(char))]
    if char.isalpha():
        return [(_LETTER, ord(folded)) for folded in char.casefold()]
    return [(_SYMBOL, ord(char))]


def collation_key(text: str) -> tuple:
    """Compute a multi-level sort key approximating standard collation.

    Levels, compared in order:
    1. Base characters, accents stripped and case folded; punctuation
       before digits before letters
    2. Accents, base character by base character (unaccented first)
    3. Case (lowercase sorts before uppercase)
    4. The raw string, so distinct strings never compare equal

    Args:
        text: String to order.

    Returns:
        Tuple usable as a sort key.
    """
    base_chars: list[str] = []
    accents: list[str] = []
    for char in unicodedata.normalize("NFD", text):
        if unicodedata.combining(char) and base_chars:
            accents[-1] += char
        else:
            base_chars.append(char)
            accents.append("")

    primary = tuple(weight for char in base_chars for weight in _primary_weights(char))
    case_levels = tuple(1 if char.isupper() else 0 for char in base_chars)

    return (primary, tuple(accents), case_levels, text)
