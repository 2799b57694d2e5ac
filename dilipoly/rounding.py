"""Splitting coefficients into high and low bits, and hint handling."""

from __future__ import annotations

from .params import D, Q

_GAMMA2_SMALL = (Q - 1) // 88
_GAMMA2_LARGE = (Q - 1) // 32


def power2round(a: int) -> tuple[int, int]:
    """Return (a1, a0) with a = a1*2^D + a0 and -2^(D-1) < a0 <= 2^(D-1).

    ``a`` must be a standard representative.
    """
    a1 = (a + (1 << (D - 1)) - 1) >> D
    return a1, a - (a1 << D)


def decompose(a: int, gamma2: int) -> tuple[int, int]:
    """Return (a1, a0) with a mod Q = a1*2*gamma2 + a0.

    Normally -gamma2 < a0 <= gamma2; when a1 would be (Q-1)/(2*gamma2) it is
    set to 0 and -gamma2 <= a0 < 0. ``a`` must be a standard representative.
    """
    a1 = (a + 127) >> 7
    if gamma2 == _GAMMA2_LARGE:
        a1 = ((a1 * 1025 + (1 << 21)) >> 22) & 15
    elif gamma2 == _GAMMA2_SMALL:
        a1 = (a1 * 11275 + (1 << 23)) >> 24
        if a1 > 43:
            a1 = 0
    else:
        raise ValueError(f"unsupported gamma2 {gamma2}")

    a0 = a - a1 * 2 * gamma2
    if a0 > (Q - 1) // 2:
        a0 -= Q
    return a1, a0


def make_hint(a0: int, a1: int, gamma2: int) -> int:
    """Return 1 if the low bits ``a0`` overflow into the high bits, else 0."""
    if a0 > gamma2 or a0 < -gamma2 or (a0 == -gamma2 and a1 != 0):
        return 1
    return 0


def use_hint(a: int, hint: int, gamma2: int) -> int:
    """Return the high bits of ``a`` corrected by ``hint``."""
    a1, a0 = decompose(a, gamma2)
    if hint == 0:
        return a1

    if gamma2 == _GAMMA2_LARGE:
        return (a1 + 1) & 15 if a0 > 0 else (a1 - 1) & 15
    if a0 > 0:
        return 0 if a1 == 43 else a1 + 1
    return 43 if a1 == 0 else a1 - 1