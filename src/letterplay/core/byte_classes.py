"""Byte class definitions for all 256 values.

Every byte value belongs to exactly one class:
- Letter: lowercase ASCII a-z
- Punctuation: a fixed list of 21 marks
- Symbol: everything else

The same tables back the content check applied to input files.
"""

import re
from enum import Enum


class ByteClass(Enum):
    LETTER = "letter"
    PUNCTUATION = "punctuation"
    SYMBOL = "symbol"


# 0x61-0x7A
LETTER_CODES = frozenset(range(ord("a"), ord("z") + 1))

# ! " & , . ? : ; - [ ] { } ( ) ' ` _ * # %
PUNCTUATION_CODES = frozenset((
    33, 34, 38, 44, 46, 63, 58, 59, 45, 91, 93, 123, 125, 40, 41, 39, 96,
    95, 42, 35, 37,
))

SYMBOL_CODES = frozenset(range(256)) - LETTER_CODES - PUNCTUATION_CODES

CLASS_CODES = {
    ByteClass.LETTER: LETTER_CODES,
    ByteClass.PUNCTUATION: PUNCTUATION_CODES,
    ByteClass.SYMBOL: SYMBOL_CODES,
}

# Letters and punctuation marks in any order. Same language as
# ([a-z]*[punct]*)* without the nested quantifiers.
_VALID_CONTENT = re.compile(
    rb"[a-z" + re.escape(bytes(sorted(PUNCTUATION_CODES))) + rb"]*"
)


def classify_byte(value: int) -> ByteClass:
    """Classify a single byte value."""
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value must be 0-255, got {value}")
    if value in LETTER_CODES:
        return ByteClass.LETTER
    if value in PUNCTUATION_CODES:
        return ByteClass.PUNCTUATION
    return ByteClass.SYMBOL


def is_valid_content(buffer: bytes) -> bool:
    """True if every byte is a lowercase letter or a punctuation mark.

    The empty buffer is valid.
    """
    return _VALID_CONTENT.fullmatch(buffer) is not None


# Build the complete table
CLASS_TABLE = tuple(classify_byte(v) for v in range(256))
