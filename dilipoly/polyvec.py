"""Vectors and matrices of polynomials, and their samplers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from . import packing
from . import poly as _poly
from .poly import Poly


@dataclass(frozen=True)
class PolyVec:
    """An immutable vector of polynomials."""

    polys: tuple[Poly, ...]

    def __post_init__(self) -> None:
        values = tuple(self.polys)
        for p in values:
            if not isinstance(p, Poly):
                raise TypeError(f"expected Poly entries, got {type(p).__name__}")
        object.__setattr__(self, "polys", values)

    def __iter__(self) -> Iterator[Poly]:
        return iter(self.polys)

    def __len__(self) -> int:
        return len(self.polys)

    def __getitem__(self, index: int) -> Poly:
        return self.polys[index]

    def _check_length(self, other: PolyVec) -> None:
        if len(other) != len(self):
            raise ValueError(f"vector lengths differ: {len(self)} and {len(other)}")

    def reduce(self) -> PolyVec:
        """Reduce every coefficient to a representative in [-6283008, 6283008]."""
        return PolyVec(p.reduce() for p in self.polys)

    def caddq(self) -> PolyVec:
        """Add Q to every negative coefficient."""
        return PolyVec(p.caddq() for p in self.polys)

    def __add__(self, other: object) -> PolyVec:
        if not isinstance(other, PolyVec):
            return NotImplemented
        self._check_length(other)
        return PolyVec(a + b for a, b in zip(self.polys, other.polys))

    def __sub__(self, other: object) -> PolyVec:
        if not isinstance(other, PolyVec):
            return NotImplemented
        self._check_length(other)
        return PolyVec(a - b for a, b in zip(self.polys, other.polys))

    def shiftl(self) -> PolyVec:
        """Multiply every polynomial by 2^D without reduction."""
        return PolyVec(p.shiftl() for p in self.polys)

    def pointwise_poly_montgomery(self, a: Poly) -> PolyVec:
        """Multiply every entry pointwise by ``a`` and by 2^-32 modulo Q."""
        return PolyVec(a.pointwise_montgomery(p) for p in self.polys)

    def pointwise_acc_montgomery(self, other: PolyVec) -> Poly:
        """Inner product of two vectors in NTT domain, scaled by 2^-32."""
        self._check_length(other)
        if not self.polys:
            raise ValueError("cannot take the inner product of empty vectors")
        products = (a.pointwise_montgomery(b) for a, b in zip(self.polys, other.polys))
        first = next(products)
        return sum(products, first)

    def chknorm(self, bound: int) -> bool:
        """True if some entry's infinity norm is not strictly below ``bound``."""
        return any(p.chknorm(bound) for p in self.polys)

    def power2round(self) -> tuple[PolyVec, PolyVec]:
        """Split every entry into (high, low) with c = high*2^D + low."""
        pairs = [p.power2round() for p in self.polys]
        return PolyVec(h for h, _ in pairs), PolyVec(lo for _, lo in pairs)

    def decompose(self, gamma2: int) -> tuple[PolyVec, PolyVec]:
        """Split every entry into (high, low) with c mod Q = high*2*gamma2 + low."""
        pairs = [p.decompose(gamma2) for p in self.polys]
        return PolyVec(h for h, _ in pairs), PolyVec(lo for _, lo in pairs)

    def make_hint(self, high: PolyVec, gamma2: int) -> tuple[PolyVec, int]:
        """Hint vector for these low bits and ``high``, and its number of ones."""
        self._check_length(high)
        results = [lo.make_hint(h, gamma2) for lo, h in zip(self.polys, high.polys)]
        return PolyVec(h for h, _ in results), sum(n for _, n in results)

    def use_hint(self, hint: PolyVec, gamma2: int) -> PolyVec:
        """High bits of every entry corrected by ``hint``."""
        self._check_length(hint)
        return PolyVec(p.use_hint(h, gamma2) for p, h in zip(self.polys, hint.polys))

    def pack_w1(self, gamma2: int) -> bytes:
        """Concatenated w1 encodings of all entries."""
        return b"".join(packing.pack_w1(p.coeffs, gamma2) for p in self.polys)


def uniform_eta_vec(seed: bytes, nonce: int, length: int, eta: int) -> PolyVec:
    """Sample ``length`` polynomials in [-eta, eta] with nonces nonce, nonce+1, ..."""
    return PolyVec(_poly.uniform_eta(seed, nonce + i, eta) for i in range(length))


def uniform_gamma1_vec(seed: bytes, nonce: int, length: int, gamma1: int) -> PolyVec:
    """Sample ``length`` polynomials in [-(gamma1-1), gamma1] with nonces length*nonce + i."""
    return PolyVec(
        _poly.uniform_gamma1(seed, length * nonce + i, gamma1) for i in range(length)
    )


def matrix_expand(rho: bytes, k: int, l: int) -> tuple[PolyVec, ...]:  # noqa: E741
    """ExpandA: a k-by-l matrix whose entry (i, j) comes from SHAKE128(rho || j || i)."""
    return tuple(
        PolyVec(_poly.uniform(rho, (i << 8) + j) for j in range(l)) for i in range(k)
    )


def matrix_pointwise_montgomery(mat: Sequence[PolyVec] | Iterable[PolyVec], v: PolyVec) -> PolyVec:
    """Matrix-vector product in NTT domain, scaled by 2^-32."""
    return PolyVec(row.pointwise_acc_montgomery(v) for row in mat)