"""
Base45 Encoder — RFC 9285 QR Alphanumeric Codec
================================================

Encodes arbitrary bytes into the 45-symbol QR alphanumeric alphabet:
  - every 2-byte chunk becomes a 3-character group
  - a trailing single byte becomes a 2-character group
  - digits are emitted least-significant first

Encoding is total: every byte sequence, including the empty one, has
exactly one Base45 form.
"""

from typing import Iterator, Union

from b45_types import ALPHABET, BASE, CHUNK_SIZE

BytesLike = Union[bytes, bytearray, memoryview]


# ═══════════════════════════════════════════════════════════════
# ENCODER
# ═══════════════════════════════════════════════════════════════

class Base45Encoder:
    """
    RFC 9285 Base45 encoder.

    Stateless: a single instance can be shared freely between callers
    and threads.

    Usage:
        encoder = Base45Encoder()
        text = encoder.encode(b"AB")     # "BB8"
        groups = list(encoder.iter_groups(b"ietf!"))  # ["QED", "8WE", "X0"]
    """

    # ─── Main Entry Points ────────────────────────────────────

    def encode(self, data: BytesLike) -> str:
        """
        Encode bytes to a Base45 string.

        Args:
            data: bytes, bytearray or memoryview to encode.

        Returns:
            str of length encoded_length(len(data)), drawn from ALPHABET.
        """
        return "".join(self.iter_groups(data))

    def iter_groups(self, data: BytesLike) -> Iterator[str]:
        """Yield the character groups for `data` in input order."""
        raw = self._as_bytes(data)
        full_end = len(raw) - (len(raw) % CHUNK_SIZE)

        for i in range(0, full_end, CHUNK_SIZE):
            yield self._encode_chunk(raw[i], raw[i + 1])

        if full_end < len(raw):
            yield self._encode_tail(raw[full_end])

    # ─── Group Packing ────────────────────────────────────────

    @staticmethod
    def _encode_chunk(hi: int, lo: int) -> str:
        value = hi * 256 + lo
        value, c = divmod(value, BASE)
        e, d = divmod(value, BASE)  # e <= 32 since 65535 // 2025 == 32
        return ALPHABET[c] + ALPHABET[d] + ALPHABET[e]

    @staticmethod
    def _encode_tail(byte: int) -> str:
        d, c = divmod(byte, BASE)
        return ALPHABET[c] + ALPHABET[d]

    # ─── Input Handling ───────────────────────────────────────

    @staticmethod
    def _as_bytes(data: BytesLike) -> bytes:
        """Accept any bytes-like object; text must be encoded by the caller."""
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        raise TypeError(
            f"Base45 encodes bytes-like objects, not {type(data).__name__}"
        )


# ═══════════════════════════════════════════════════════════════
# CONVENIENCE FUNCTIONS
# ═══════════════════════════════════════════════════════════════

_ENCODER = Base45Encoder()


def encode(data: BytesLike) -> str:
    """Convenience: encode bytes to Base45 in one call."""
    return _ENCODER.encode(data)
