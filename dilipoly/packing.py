"""Bit packing of polynomial coefficients into their byte encodings.

Every encoding stores N fixed-width fields, least significant bit first,
one after another. Signed coefficients are first mapped to non-negative
fields by subtracting them from a fixed offset.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .params import D, N, Q

_GAMMA2_SMALL = (Q - 1) // 88
_GAMMA2_LARGE = (Q - 1) // 32

_T1_BITS = 10
_T0_BITS = D
_T0_OFFSET = 1 << (D - 1)


def _as_list(coeffs: Iterable[int]) -> list[int]:
    values = list(coeffs)
    if len(values) != N:
        raise ValueError(f"expected {N} coefficients, got {len(values)}")
    return values


def _check_range(values: Sequence[int], low: int, high: int, what: str) -> None:
    for value in values:
        if not low <= value <= high:
            raise ValueError(f"{what} coefficient {value} outside [{low}, {high}]")


def _pack_fields(fields: Iterable[int], bits: int) -> bytes:
    acc = 0
    for shift, field in zip(range(0, N * bits, bits), fields):
        acc |= field << shift
    return acc.to_bytes(N * bits // 8, "little")


def _unpack_fields(data: bytes, bits: int) -> list[int]:
    size = N * bits // 8
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    acc = int.from_bytes(bytes(data), "little")
    mask = (1 << bits) - 1
    return [(acc >> shift) & mask for shift in range(0, N * bits, bits)]


def _eta_bits(eta: int) -> int:
    if eta == 2:
        return 3
    if eta == 4:
        return 4
    raise ValueError(f"unsupported eta {eta}")


def _gamma1_bits(gamma1: int) -> int:
    if gamma1 == 1 << 17:
        return 18
    if gamma1 == 1 << 19:
        return 20
    raise ValueError(f"unsupported gamma1 {gamma1}")


def pack_eta(coeffs: Iterable[int], eta: int) -> bytes:
    """Pack coefficients in [-eta, eta]."""
    bits = _eta_bits(eta)
    values = _as_list(coeffs)
    _check_range(values, -eta, eta, "eta")
    return _pack_fields((eta - c for c in values), bits)


def unpack_eta(data: bytes, eta: int) -> list[int]:
    """Unpack a polynomial packed by :func:`pack_eta`."""
    bits = _eta_bits(eta)
    return [eta - field for field in _unpack_fields(data, bits)]


def pack_t1(coeffs: Iterable[int]) -> bytes:
    """Pack t1 coefficients, standard representatives of 10 bits."""
    values = _as_list(coeffs)
    _check_range(values, 0, (1 << _T1_BITS) - 1, "t1")
    return _pack_fields(values, _T1_BITS)


def unpack_t1(data: bytes) -> list[int]:
    """Unpack 10-bit t1 coefficients."""
    return _unpack_fields(data, _T1_BITS)


def pack_t0(coeffs: Iterable[int]) -> bytes:
    """Pack t0 coefficients in (-2^(D-1), 2^(D-1)]."""
    values = _as_list(coeffs)
    _check_range(values, 1 - _T0_OFFSET, _T0_OFFSET, "t0")
    return _pack_fields((_T0_OFFSET - c for c in values), _T0_BITS)


def unpack_t0(data: bytes) -> list[int]:
    """Unpack a polynomial packed by :func:`pack_t0`."""
    return [_T0_OFFSET - field for field in _unpack_fields(data, _T0_BITS)]


def pack_z(coeffs: Iterable[int], gamma1: int) -> bytes:
    """Pack coefficients in [-(gamma1 - 1), gamma1]."""
    bits = _gamma1_bits(gamma1)
    values = _as_list(coeffs)
    _check_range(values, 1 - gamma1, gamma1, "z")
    return _pack_fields((gamma1 - c for c in values), bits)


def unpack_z(data: bytes, gamma1: int) -> list[int]:
    """Unpack a polynomial packed by :func:`pack_z`."""
    bits = _gamma1_bits(gamma1)
    return [gamma1 - field for field in _unpack_fields(data, bits)]


def pack_w1(coeffs: Iterable[int], gamma2: int) -> bytes:
    """Pack high bits w1: in [0, 43] with 6 bits or [0, 15] with 4 bits."""
    if gamma2 == _GAMMA2_SMALL:
        bits, high = 6, 43
    elif gamma2 == _GAMMA2_LARGE:
        bits, high = 4, 15
    else:
        raise ValueError(f"unsupported gamma2 {gamma2}")
    values = _as_list(coeffs)
    _check_range(values, 0, high, "w1")
    return _pack_fields(values, bits)