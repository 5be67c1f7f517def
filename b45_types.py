"""
Base45 Types & Constants — RFC 9285 QR Alphanumeric Codec
==========================================================

Foundational constants, lookup tables, enumerations, and error classes
for the Base45 codec. This module has ZERO external dependencies beyond
the Python standard library.

Specification Authority:
  - RFC 9285 "The Base45 Data Encoding" (alphabet, packing, error cases)
  - ISO/IEC 18004 QR alphanumeric mode (the same 45 symbols)
"""

from enum import IntEnum
from typing import Optional

# ═══════════════════════════════════════════════════════════════
# ALPHABET
# ═══════════════════════════════════════════════════════════════

# RFC 9285 Table 1, index order is significant
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

BASE = len(ALPHABET)  # 45
BASE_SQUARED = BASE * BASE  # 2025

assert BASE == 45 and len(set(ALPHABET)) == BASE, "Base45 alphabet corrupted"


def _build_decode_table() -> tuple:
    """Character code -> alphabet index, -1 for anything outside the set."""
    table = [-1] * 256
    for index, char in enumerate(ALPHABET):
        table[ord(char)] = index
    return tuple(table)


# Reverse lookup indexed by character code (0-255). Codes >= 256 are
# never alphabet members.
DECODE_TABLE = _build_decode_table()


# ═══════════════════════════════════════════════════════════════
# CHUNK & GROUP GEOMETRY
# ═══════════════════════════════════════════════════════════════

CHUNK_SIZE = 2        # bytes consumed per full encoding step
GROUP_SIZE = 3        # characters produced per full chunk
TAIL_GROUP_SIZE = 2   # characters produced for a trailing single byte

MAX_CHUNK_VALUE = 0xFFFF  # largest value a 3-char group may carry
MAX_TAIL_VALUE = 0xFF     # largest value a 2-char group may carry


# ═══════════════════════════════════════════════════════════════
# ERROR KINDS
# ═══════════════════════════════════════════════════════════════

class ErrorKind(IntEnum):
    """The three ways a decode can fail."""
    INVALID_CHARACTER  = 0x01  # symbol outside the 45-character alphabet
    DANGLING_CHARACTER = 0x02  # lone trailing character, len % 3 == 1
    OVERFLOW           = 0x03  # group value above 65535 / 255


# ═══════════════════════════════════════════════════════════════
# ERROR CLASSES
# ═══════════════════════════════════════════════════════════════

class Base45Error(ValueError):
    """Base error for all Base45 decoding failures."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InvalidCharacterError(Base45Error):
    """A character outside the RFC 9285 alphabet was found."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int):
        super().__init__(
            f"Invalid Base45 character {character!r} at position {position}",
            position,
        )
        self.character = character


class DanglingCharacterError(Base45Error):
    """Input ends with a single character that no encoding can produce."""

    kind = ErrorKind.DANGLING_CHARACTER

    def __init__(self, position: int):
        super().__init__(
            f"Dangling Base45 character at position {position} "
            f"(input length {position + 1} leaves 1 character after the last group)",
            position,
        )


class GroupOverflowError(Base45Error):
    """A group decodes to a value too large for its byte count."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, group: str, position: int, value: int, limit: int):
        super().__init__(
            f"Base45 group {group!r} at position {position} decodes to "
            f"{value}, above the maximum of {limit}",
            position,
        )
        self.group = group
        self.value = value
        self.limit = limit


# ═══════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════

def encoded_length(byte_count: int) -> int:
    """Number of Base45 characters produced for `byte_count` input bytes."""
    if byte_count < 0:
        raise ValueError(f"byte_count must be >= 0, got {byte_count}")
    full, tail = divmod(byte_count, CHUNK_SIZE)
    return full * GROUP_SIZE + (TAIL_GROUP_SIZE if tail else 0)


def decoded_length(char_count: int) -> int:
    """
    Number of bytes a well-formed Base45 string of `char_count` characters
    decodes to. Raises DanglingCharacterError when the length itself is
    impossible (one character left over after the last full group).
    """
    if char_count < 0:
        raise ValueError(f"char_count must be >= 0, got {char_count}")
    full, tail = divmod(char_count, GROUP_SIZE)
    if tail == 1:
        raise DanglingCharacterError(char_count - 1)
    return full * CHUNK_SIZE + (1 if tail == TAIL_GROUP_SIZE else 0)
