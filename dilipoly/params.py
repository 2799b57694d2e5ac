"""Parameter sets and fixed sizes of the lattice signature scheme."""

from __future__ import annotations

from dataclasses import dataclass

N = 256
Q = 8380417
D = 13

SEEDBYTES = 32
CRHBYTES = 64
TRBYTES = 64
RNDBYTES = 32

POLYT1_PACKEDBYTES = 320
POLYT0_PACKEDBYTES = 416


@dataclass(frozen=True)
class ParameterSet:
    """One security level: dimensions, bounds and encoded sizes."""

    name: str
    k: int
    l: int  # noqa: E741
    eta: int
    tau: int
    beta: int
    gamma1: int
    gamma2: int
    omega: int
    ctilde_bytes: int
    public_key_bytes: int
    secret_key_bytes: int
    signature_bytes: int

    def polyz_packed_bytes(self) -> int:
        """Size of one packed polynomial with coefficients below gamma1."""
        return 576 if self.gamma1 == 1 << 17 else 640

    def polyw1_packed_bytes(self) -> int:
        """Size of one packed high-bits polynomial w1."""
        return 192 if self.gamma2 == (Q - 1) // 88 else 128

    def polyeta_packed_bytes(self) -> int:
        """Size of one packed polynomial with coefficients in [-eta, eta]."""
        return 96 if self.eta == 2 else 128


_SETS = {
    params.name: params
    for params in (
        ParameterSet(
            name="dilithium2",
            k=4,
            l=4,
            eta=2,
            tau=39,
            beta=78,
            gamma1=1 << 17,
            gamma2=(Q - 1) // 88,
            omega=80,
            ctilde_bytes=32,
            public_key_bytes=1312,
            secret_key_bytes=2560,
            signature_bytes=2420,
        ),
        ParameterSet(
            name="dilithium3",
            k=6,
            l=5,
            eta=4,
            tau=49,
            beta=196,
            gamma1=1 << 19,
            gamma2=(Q - 1) // 32,
            omega=55,
            ctilde_bytes=48,
            public_key_bytes=1952,
            secret_key_bytes=4032,
            signature_bytes=3309,
        ),
        ParameterSet(
            name="dilithium5",
            k=8,
            l=7,
            eta=2,
            tau=60,
            beta=120,
            gamma1=1 << 19,
            gamma2=(Q - 1) // 32,
            omega=75,
            ctilde_bytes=64,
            public_key_bytes=2592,
            secret_key_bytes=4896,
            signature_bytes=4627,
        ),
    )
}


def by_name(name: str) -> ParameterSet:
    """Return the parameter set called ``name`` (case-insensitive)."""
    try:
        return _SETS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(_SETS))
        raise ValueError(f"unknown parameter set {name!r}; expected one of {known}") from None