"""String preprocessing applied before scoring.

Three steps, always in this order:

1. trim leading/trailing spaces, tabs, newlines and carriage returns
2. lowercase ASCII letters and a fixed set of accented capitals
3. transliterate a fixed set of accented letters to their ASCII base

Steps 1-2 run when ``processor`` is set, step 3 when ``asciify`` is set.
Characters outside the tables pass through untouched.
"""

from __future__ import annotations

import string
from typing import Dict

_TRIM_CHARS = " \t\n\r"

# Accented capitals with a lowercase partner in the case table
_ACCENTED_UPPER = "ÀÁÂÃÄÅÈÉÊËÌÍÎÏÒÓÔÕÖÙÚÛÜÇÑŸ"
_ACCENTED_LOWER = "àáâãäåèéêëìíîïòóôõöùúûüçñÿ"

_ASCII_BASE: Dict[str, str] = {
    "a": "àáâãäå",
    "e": "èéêë",
    "i": "ìíîï",
    "o": "òóôõö",
    "u": "ùúûü",
    "c": "ç",
    "n": "ñ",
    "y": "ÿ",
    "A": "ÀÁÂÃÄÅ",
    "E": "ÈÉÊË",
    "I": "ÌÍÎÏ",
    "O": "ÒÓÔÕÖ",
    "U": "ÙÚÛÜ",
    "C": "Ç",
    "N": "Ñ",
    "Y": "Ÿ",
}

LOWERCASE_TABLE = str.maketrans(
    string.ascii_uppercase + _ACCENTED_UPPER,
    string.ascii_lowercase + _ACCENTED_LOWER,
)

ASCII_TABLE = str.maketrans({
    accented: base
    for base, variants in _ASCII_BASE.items()
    for accented in variants
})


def trim(text: str) -> str:
    """Strip leading and trailing spaces, tabs, newlines and carriage returns."""
    return text.strip(_TRIM_CHARS)


def to_lower(text: str) -> str:
    """Lowercase ASCII letters and the accented capitals in the case table."""
    return text.translate(LOWERCASE_TABLE)


def to_ascii(text: str) -> str:
    """Replace accented letters with their ASCII base letter, keeping case."""
    return text.translate(ASCII_TABLE)


def process_string(text: str, processor: bool = True, asciify: bool = False) -> str:
    """Normalize a string for comparison.

    Args:
        text: The string to process.
        processor: Trim surrounding whitespace and lowercase.
        asciify: Transliterate accented letters to ASCII.

    Returns:
        The processed string. The input is returned unchanged when both
        flags are off.

    Example::

        >>> process_string("  Éxâmple!  ", processor=True, asciify=True)
        'example!'
        >>> process_string("  Éxâmple!  ", processor=False, asciify=True)
        '  Example!  '
    """
    processed = text
    if processor:
        processed = to_lower(trim(processed))
    if asciify:
        processed = to_ascii(processed)
    return processed


normalize = process_string
