"""Polynomials of the ring Z_Q[X]/(X^N + 1) and their samplers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from . import reduce as _reduce
from . import rounding as _rounding
from .packing import unpack_z
from .params import D, N, Q
from .symmetric import STREAM128_BLOCKBYTES, STREAM256_BLOCKBYTES, XofStream, stream128, stream256

_UNIFORM_NBLOCKS = (768 + STREAM128_BLOCKBYTES - 1) // STREAM128_BLOCKBYTES
_ETA_NBLOCKS = {
    2: (136 + STREAM256_BLOCKBYTES - 1) // STREAM256_BLOCKBYTES,
    4: (227 + STREAM256_BLOCKBYTES - 1) // STREAM256_BLOCKBYTES,
}
_GAMMA1_PACKED_BYTES = {1 << 17: 576, 1 << 19: 640}
_NORM_LIMIT = (Q - 1) // 8


@dataclass(frozen=True)
class Poly:
    """An immutable polynomial with N integer coefficients."""

    coeffs: tuple[int, ...]

    def __post_init__(self) -> None:
        values = tuple(int(c) for c in self.coeffs)
        if len(values) != N:
            raise ValueError(f"expected {N} coefficients, got {len(values)}")
        object.__setattr__(self, "coeffs", values)

    @classmethod
    def zero(cls) -> Poly:
        """Return the polynomial with all coefficients zero."""
        return cls((0,) * N)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coeffs)

    def __len__(self) -> int:
        return N

    def __getitem__(self, index: int) -> int:
        return self.coeffs[index]

    def _map(self, func) -> Poly:
        return Poly(func(c) for c in self.coeffs)

    def reduce(self) -> Poly:
        """Reduce every coefficient to a representative in [-6283008, 6283008]."""
        return self._map(_reduce.reduce32)

    def caddq(self) -> Poly:
        """Add Q to every negative coefficient."""
        return self._map(_reduce.caddq)

    def __add__(self, other: object) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        return Poly(a + b for a, b in zip(self.coeffs, other.coeffs))

    def __sub__(self, other: object) -> Poly:
        if not isinstance(other, Poly):
            return NotImplemented
        return Poly(a - b for a, b in zip(self.coeffs, other.coeffs))

    def shiftl(self) -> Poly:
        """Multiply by 2^D without reduction."""
        return self._map(lambda c: c << D)

    def pointwise_montgomery(self, other: Poly) -> Poly:
        """Coefficient-wise product multiplied by 2^-32 modulo Q."""
        return Poly(
            _reduce.montgomery_reduce(a * b) for a, b in zip(self.coeffs, other.coeffs)
        )

    def power2round(self) -> tuple[Poly, Poly]:
        """Split into (high, low) with c = high*2^D + low."""
        pairs = [_rounding.power2round(c) for c in self.coeffs]
        return Poly(p[0] for p in pairs), Poly(p[1] for p in pairs)

    def decompose(self, gamma2: int) -> tuple[Poly, Poly]:
        """Split into (high, low) with c mod Q = high*2*gamma2 + low."""
        pairs = [_rounding.decompose(c, gamma2) for c in self.coeffs]
        return Poly(p[0] for p in pairs), Poly(p[1] for p in pairs)

    def make_hint(self, high: Poly, gamma2: int) -> tuple[Poly, int]:
        """Hint polynomial for these low bits and ``high``, and its number of ones."""
        hint = Poly(
            _rounding.make_hint(a0, a1, gamma2) for a0, a1 in zip(self.coeffs, high.coeffs)
        )
        return hint, sum(hint.coeffs)

    def use_hint(self, hint: Poly, gamma2: int) -> Poly:
        """High bits of this polynomial corrected by ``hint``."""
        return Poly(
            _rounding.use_hint(a, h, gamma2) for a, h in zip(self.coeffs, hint.coeffs)
        )

    def chknorm(self, bound: int) -> bool:
        """True if the bound is too large or some |coefficient| >= bound.

        Coefficients are assumed to be reduced by :meth:`reduce`.
        """
        if bound > _NORM_LIMIT:
            return True
        return any(abs(c) >= bound for c in self.coeffs)


def _stream_bytes(stream: XofStream, first_blocks: int) -> Iterator[int]:
    yield from stream.squeeze_blocks(first_blocks)
    while True:
        yield from stream.squeeze_blocks(1)


def _uniform_candidates(stream: XofStream) -> Iterator[int]:
    data = _stream_bytes(stream, _UNIFORM_NBLOCKS)
    for b0, b1, b2 in zip(data, data, data):
        yield (b0 | (b1 << 8) | (b2 << 16)) & 0x7FFFFF


def uniform(seed: bytes, nonce: int) -> Poly:
    """Sample coefficients uniformly in [0, Q) from SHAKE128(seed || nonce)."""
    stream = stream128(seed, nonce)
    accepted = (t for t in _uniform_candidates(stream) if t < Q)
    return Poly(next(accepted) for _ in range(N))


def _eta_candidates(stream: XofStream, eta: int) -> Iterator[int]:
    for byte in _stream_bytes(stream, _ETA_NBLOCKS[eta]):
        for nibble in (byte & 0x0F, byte >> 4):
            if eta == 2 and nibble < 15:
                yield 2 - nibble % 5
            elif eta == 4 and nibble < 9:
                yield 4 - nibble


def uniform_eta(seed: bytes, nonce: int, eta: int) -> Poly:
    """Sample coefficients uniformly in [-eta, eta] from SHAKE256(seed || nonce)."""
    if eta not in _ETA_NBLOCKS:
        raise ValueError(f"unsupported eta {eta}")
    samples = _eta_candidates(stream256(seed, nonce), eta)
    return Poly(next(samples) for _ in range(N))


def uniform_gamma1(seed: bytes, nonce: int, gamma1: int) -> Poly:
    """Sample coefficients in [-(gamma1 - 1), gamma1] from SHAKE256(seed || nonce)."""
    try:
        size = _GAMMA1_PACKED_BYTES[gamma1]
    except KeyError:
        raise ValueError(f"unsupported gamma1 {gamma1}") from None
    return Poly(unpack_z(stream256(seed, nonce).squeeze(size), gamma1))


def challenge(seed: bytes, tau: int) -> Poly:
    """Sample a polynomial with ``tau`` coefficients in {-1, 1} from SHAKE256(seed)."""
    if not 0 <= tau <= 64:
        raise ValueError(f"tau must be between 0 and 64, got {tau}")
    stream = XofStream(bytes(seed), 256)
    data = _stream_bytes(stream, 1)
    signs = int.from_bytes(bytes(next(data) for _ in range(8)), "little")

    coeffs = [0] * N
    for i in range(N - tau, N):
        b = next(x for x in data if x <= i)
        coeffs[i] = coeffs[b]
        coeffs[b] = 1 - 2 * (signs & 1)
        signs >>= 1
    return Poly(coeffs)


def _from_iterable(values: Iterable[int]) -> Poly:
    return Poly(values)