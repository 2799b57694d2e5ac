import pytest

from dilipoly.params import (
    CRHBYTES,
    POLYT0_PACKEDBYTES,
    POLYT1_PACKEDBYTES,
    SEEDBYTES,
    TRBYTES,
    by_name,
)

NAMES = ["dilithium2", "dilithium3", "dilithium5"]


@pytest.mark.parametrize(
    "name, pk, sk, sig",
    [
        ("dilithium2", 1312, 2560, 2420),
        ("dilithium3", 1952, 4032, 3309),
        ("dilithium5", 2592, 4896, 4627),
    ],
)
def test_documented_sizes(name, pk, sk, sig):
    params = by_name(name)
    assert params.public_key_bytes == pk
    assert params.secret_key_bytes == sk
    assert params.signature_bytes == sig


@pytest.mark.parametrize("name", NAMES)
def test_public_key_size_matches_packing(name):
    params = by_name(name)
    assert params.public_key_bytes == SEEDBYTES + params.k * POLYT1_PACKEDBYTES


@pytest.mark.parametrize("name", NAMES)
def test_secret_key_size_matches_packing(name):
    params = by_name(name)
    expected = (
        2 * SEEDBYTES
        + TRBYTES
        + (params.l + params.k) * params.polyeta_packed_bytes()
        + params.k * POLYT0_PACKEDBYTES
    )
    assert params.secret_key_bytes == expected


@pytest.mark.parametrize("name", NAMES)
def test_signature_size_matches_packing(name):
    params = by_name(name)
    expected = (
        params.ctilde_bytes
        + params.l * params.polyz_packed_bytes()
        + params.omega
        + params.k
    )
    assert params.signature_bytes == expected


@pytest.mark.parametrize("name", NAMES)
def test_beta_is_tau_times_eta(name):
    params = by_name(name)
    assert params.beta == params.tau * params.eta


def test_lookup_is_case_insensitive():
    assert by_name("Dilithium3") == by_name("dilithium3")


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        by_name("dilithium4")


@pytest.mark.parametrize(
    "name, k, l",
    [("dilithium2", 4, 4), ("dilithium3", 6, 5), ("dilithium5", 8, 7)],
)
def test_matrix_dimensions(name, k, l):
    params = by_name(name)
    assert (params.k, params.l) == (k, l)
    assert CRHBYTES == 2 * SEEDBYTES