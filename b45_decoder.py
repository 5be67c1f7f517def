"""
Base45 Decoder — RFC 9285 QR Alphanumeric Codec
================================================

Decodes Base45 text back to the original bytes.

Decoding is the strict left inverse of encoding and fails on the three
inputs no encoder can produce, in this order of precedence:

  1. InvalidCharacter:  any symbol outside the 45-character alphabet
  2. DanglingCharacter: a lone character after the last full group
  3. Overflow:          a group whose value exceeds 65535 (3 chars)
                         or 255 (2 chars)

decode() is atomic: it returns the complete byte string or raises,
never a partial result. verify() is the non-raising diagnostic pass
that reports every problem in the input at once.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from b45_types import (
    ALPHABET, BASE, BASE_SQUARED, DECODE_TABLE,
    GROUP_SIZE, TAIL_GROUP_SIZE, MAX_CHUNK_VALUE, MAX_TAIL_VALUE,
    Base45Error, InvalidCharacterError, DanglingCharacterError,
    GroupOverflowError,
)

TextLike = Union[str, bytes, bytearray, memoryview]


# ═══════════════════════════════════════════════════════════════
# DECODER
# ═══════════════════════════════════════════════════════════════

class Base45Decoder:
    """
    RFC 9285 Base45 decoder.

    Accepts a str, or an ASCII bytes-like object whose byte values are
    read as character codes. Whitespace is not skipped.

    Usage:
        decoder = Base45Decoder()
        data = decoder.decode("QED8WEX0")       # b"ietf!"
        report = decoder.verify("GGW")         # report['valid'] is False
    """

    # ─── Main Entry Points ────────────────────────────────────

    def decode(self, text: TextLike) -> bytes:
        """
        Decode a Base45 string.

        Args:
            text: str or ASCII bytes-like Base45 input.

        Returns:
            The decoded bytes.

        Raises:
            InvalidCharacterError, DanglingCharacterError, GroupOverflowError
        """
        indices = self._to_indices(self._char_codes(text))
        count = len(indices)
        if count % GROUP_SIZE == 1:
            raise DanglingCharacterError(count - 1)

        out = bytearray()
        for pos in range(0, count, GROUP_SIZE):
            group = indices[pos:pos + GROUP_SIZE]
            value = self._group_value(group)
            if len(group) == GROUP_SIZE:
                if value > MAX_CHUNK_VALUE:
                    raise self._overflow(group, pos, value, MAX_CHUNK_VALUE)
                out.extend(divmod(value, 256))
            else:
                if value > MAX_TAIL_VALUE:
                    raise self._overflow(group, pos, value, MAX_TAIL_VALUE)
                out.append(value)
        return bytes(out)

    def verify(self, text: TextLike) -> Dict[str, Any]:
        """
        Scan `text` and report every decoding problem without raising.

        Returns:
            dict with 'valid', 'length', 'groups', 'decoded_length'
            (None when the length is impossible) and 'errors', a list of
            {'kind', 'position', 'message'} entries in input order.
        """
        codes = self._char_codes(text)
        count = len(codes)
        errors: List[Dict[str, Any]] = []

        indices: List[Optional[int]] = []
        for pos, code in enumerate(codes):
            index = self._lookup(code)
            if index is None:
                errors.append(self._report(InvalidCharacterError(chr(code), pos)))
            indices.append(index)

        full_groups, tail = divmod(count, GROUP_SIZE)
        for pos in range(0, count - tail, GROUP_SIZE):
            err = self._check_group(indices[pos:pos + GROUP_SIZE], pos, MAX_CHUNK_VALUE)
            if err is not None:
                errors.append(self._report(err))

        decoded_length: Optional[int] = full_groups * 2
        if tail == TAIL_GROUP_SIZE:
            pos = count - tail
            err = self._check_group(indices[pos:], pos, MAX_TAIL_VALUE)
            if err is not None:
                errors.append(self._report(err))
            decoded_length += 1
        elif tail == 1:
            errors.append(self._report(DanglingCharacterError(count - 1)))
            decoded_length = None

        errors.sort(key=lambda e: e['position'])
        return {
            'valid': not errors,
            'length': count,
            'groups': full_groups + (1 if tail == TAIL_GROUP_SIZE else 0),
            'decoded_length': decoded_length,
            'errors': errors,
        }

    # ─── Character Lookup ─────────────────────────────────────

    @staticmethod
    def _char_codes(text: TextLike) -> Sequence[int]:
        if isinstance(text, str):
            return [ord(ch) for ch in text]
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        raise TypeError(
            f"Base45 decodes str or bytes-like objects, not {type(text).__name__}"
        )

    @staticmethod
    def _lookup(code: int) -> Optional[int]:
        if code >= len(DECODE_TABLE):
            return None
        index = DECODE_TABLE[code]
        return index if index >= 0 else None

    def _to_indices(self, codes: Sequence[int]) -> List[int]:
        """Map every character code to its alphabet index, or raise."""
        indices = []
        for pos, code in enumerate(codes):
            index = self._lookup(code)
            if index is None:
                raise InvalidCharacterError(chr(code), pos)
            indices.append(index)
        return indices

    # ─── Group Unpacking ──────────────────────────────────────

    @staticmethod
    def _group_value(group: Sequence[int]) -> int:
        # Least-significant digit first
        value = group[0] + group[1] * BASE
        if len(group) == GROUP_SIZE:
            value += group[2] * BASE_SQUARED
        return value

    @staticmethod
    def _overflow(group: Sequence[int], pos: int, value: int,
                  limit: int) -> GroupOverflowError:
        chars = "".join(ALPHABET[i] for i in group)
        return GroupOverflowError(chars, pos, value, limit)

    def _check_group(self, group: Sequence[Optional[int]], pos: int,
                     limit: int) -> Optional[GroupOverflowError]:
        """Overflow check for verify(); groups with invalid characters are skipped."""
        if any(index is None for index in group):
            return None
        value = self._group_value(group)
        if value > limit:
            return self._overflow(group, pos, value, limit)
        return None

    @staticmethod
    def _report(err: Base45Error) -> Dict[str, Any]:
        return {
            'kind': err.kind.name,
            'position': err.position,
            'message': str(err),
        }


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

_DECODER = Base45Decoder()


def decode(text: TextLike) -> bytes:
    """Convenience: decode a Base45 string in one call."""
    return _DECODER.decode(text)


def verify(text: TextLike) -> Dict[str, Any]:
    """Convenience: diagnostic scan of a Base45 string in one call."""
    return _DECODER.verify(text)
