"""Polynomial arithmetic, reduction, rounding, SHAKE streams, sampling and bit packing for Dilithium-style lattice signatures."""

__version__ = "0.1.0"

__all__ = [
    "packing",
    "params",
    "poly",
    "polyvec",
    "randombytes",
    "reduce",
    "rounding",
    "symmetric",
]