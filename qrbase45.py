"""
QR Base45 — RFC 9285 Base45 Codec
==================================

Self-contained encoder/decoder for the Base45 encoding used to embed
binary payloads in QR alphanumeric mode (e.g. health certificates).

    >>> encode(b"ietf!")
    'QED8WEX0'
    >>> decode("QED8WEX0")
    b'ietf!'
"""

from b45_types import (
    ALPHABET, ErrorKind,
    Base45Error, InvalidCharacterError, DanglingCharacterError,
    GroupOverflowError,
    encoded_length, decoded_length,
)
from b45_encoder import Base45Encoder, encode
from b45_decoder import Base45Decoder, decode, verify

__version__ = "1.0.0"
__all__ = [
    'encode', 'decode', 'verify',
    'Base45Encoder', 'Base45Decoder',
    'ALPHABET', 'ErrorKind', 'encoded_length', 'decoded_length',
    'Base45Error', 'InvalidCharacterError', 'DanglingCharacterError',
    'GroupOverflowError',
]
