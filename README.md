# dilipoly

Building blocks of Dilithium-style lattice signatures in plain Python, using
only the standard library.

## Modules

- `dilipoly.params` – constants (`N`, `Q`, `D`, `SEEDBYTES`, `CRHBYTES`,
  `TRBYTES`, `RNDBYTES`, `POLYT1_PACKEDBYTES`, `POLYT0_PACKEDBYTES`) and the
  frozen dataclass `ParameterSet` for `dilithium2`, `dilithium3` and
  `dilithium5`, holding dimensions, bounds and key and signature sizes.
  `ParameterSet.polyz_packed_bytes()`, `polyw1_packed_bytes()` and
  `polyeta_packed_bytes()` give the packed sizes of one polynomial.
  `by_name(name)` looks a set up case-insensitively and raises `ValueError`
  for an unknown name.
- `dilipoly.reduce` – reduction modulo Q = 8380417: `montgomery_reduce`,
  `reduce32`, `caddq`, `freeze`, and the constants `MONT` and `QINV`.
- `dilipoly.rounding` – `power2round(a)`, `decompose(a, gamma2)`,
  `make_hint(a0, a1, gamma2)` and `use_hint(a, hint, gamma2)`. The split
  functions return `(high, low)` tuples; an unsupported `gamma2` raises
  `ValueError`.
- `dilipoly.symmetric` – `XofStream`, a sequential reader over SHAKE128 or
  SHAKE256 output (`squeeze(length)`, `squeeze_blocks(count)`), and
  `stream128(seed, nonce)` / `stream256(seed, nonce)`, which absorb a 32- or
  64-byte seed followed by a 16-bit little-endian nonce.
- `dilipoly.randombytes` – `randombytes(length)`, bytes from `os.urandom`.
- `dilipoly.packing` – `pack_eta`/`unpack_eta`, `pack_t1`/`unpack_t1`,
  `pack_t0`/`unpack_t0`, `pack_z`/`unpack_z` and `pack_w1`. Packing checks
  the number of coefficients and their range; unpacking checks the length
  of the input. Errors raise `ValueError`.
- `dilipoly.poly` – the immutable `Poly` of N coefficients, with `+`, `-`,
  `reduce`, `caddq`, `shiftl`, `pointwise_montgomery`, `power2round`,
  `decompose`, `make_hint`, `use_hint` and `chknorm`, and the samplers
  `uniform(seed, nonce)`, `uniform_eta(seed, nonce, eta)`,
  `uniform_gamma1(seed, nonce, gamma1)` and `challenge(seed, tau)`.
- `dilipoly.polyvec` – the immutable `PolyVec` with the same operations
  applied entry by entry, plus `pointwise_poly_montgomery`,
  `pointwise_acc_montgomery` and `pack_w1`; the samplers `uniform_eta_vec`
  and `uniform_gamma1_vec`; `matrix_expand(rho, k, l)` and
  `matrix_pointwise_montgomery(mat, v)`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dilipoly.params import by_name
from dilipoly.poly import challenge, uniform_eta
from dilipoly.packing import pack_eta, unpack_eta
from dilipoly.polyvec import matrix_expand
from dilipoly.symmetric import stream256

params = by_name("dilithium2")

seed = bytes(64)
s = uniform_eta(seed, 0, params.eta)
packed = pack_eta(s.coeffs, params.eta)
assert len(packed) == params.polyeta_packed_bytes()
assert unpack_eta(packed, params.eta) == list(s.coeffs)

c = challenge(bytes(32), params.tau)
assert sum(1 for x in c.coeffs if x) == params.tau

a = matrix_expand(bytes(32), params.k, params.l)
assert len(a) == params.k and len(a[0]) == params.l

block = stream256(seed, 7).squeeze_blocks(1)
assert len(block) == 136
```

## What it does not do

The package has no forward or inverse NTT, so products such as
`pointwise_montgomery` and `matrix_pointwise_montgomery` expect inputs that
are already in the NTT domain. It does not generate keys, sign or verify,
and does not encode whole public keys, secret keys or signatures. There is
no command-line tool.

None of the code runs in constant time; it suits testing, teaching and
interoperability work, not guarding secret keys.