"""SHAKE-based extendable-output streams seeded with a seed and a nonce."""

from __future__ import annotations

import hashlib

from .params import CRHBYTES, SEEDBYTES

SHAKE128_RATE = 168
SHAKE256_RATE = 136

STREAM128_BLOCKBYTES = SHAKE128_RATE
STREAM256_BLOCKBYTES = SHAKE256_RATE


class XofStream:
    """Sequential reader over the output of SHAKE128 or SHAKE256."""

    def __init__(self, data: bytes, security: int = 256) -> None:
        if security == 128:
            self._hash = hashlib.shake_128(bytes(data))
            self.block_bytes = SHAKE128_RATE
        elif security == 256:
            self._hash = hashlib.shake_256(bytes(data))
            self.block_bytes = SHAKE256_RATE
        else:
            raise ValueError(f"security must be 128 or 256, not {security}")
        self._buffer = b""
        self._pos = 0

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output."""
        if length < 0:
            raise ValueError("length must not be negative")
        end = self._pos + length
        if end > len(self._buffer):
            size = max(end, 2 * len(self._buffer), 4 * self.block_bytes)
            self._buffer = self._hash.digest(size)
        out = self._buffer[self._pos:end]
        self._pos = end
        return out

    def squeeze_blocks(self, count: int) -> bytes:
        """Return the next ``count`` full rate-sized blocks of output."""
        return self.squeeze(count * self.block_bytes)


def _nonce_bytes(nonce: int) -> bytes:
    return (nonce & 0xFFFF).to_bytes(2, "little")


def stream128(seed: bytes, nonce: int) -> XofStream:
    """SHAKE128(seed || nonce) with a 32-byte seed; nonce taken modulo 2**16."""
    if len(seed) != SEEDBYTES:
        raise ValueError(f"seed must be {SEEDBYTES} bytes, got {len(seed)}")
    return XofStream(bytes(seed) + _nonce_bytes(nonce), 128)


def stream256(seed: bytes, nonce: int) -> XofStream:
    """SHAKE256(seed || nonce) with a 64-byte seed; nonce taken modulo 2**16."""
    if len(seed) != CRHBYTES:
        raise ValueError(f"seed must be {CRHBYTES} bytes, got {len(seed)}")
    return XofStream(bytes(seed) + _nonce_bytes(nonce), 256)