import pytest

from dilipoly.symmetric import XofStream, stream128, stream256

SEED32 = bytes(range(32))
SEED64 = bytes(range(64))


def test_shake128_empty_known_output():
    out = XofStream(b"", 128).squeeze(16)
    assert out == bytes.fromhex("7f9c2ba4e88f827d616045507605853e")


def test_shake256_empty_known_output():
    out = XofStream(b"", 256).squeeze(16)
    assert out == bytes.fromhex("46b9dd2b0ba88d13233b3feb743eeb24")


def test_squeeze_in_pieces_matches_single_squeeze():
    whole = XofStream(b"abc", 128).squeeze(1000)
    stream = XofStream(b"abc", 128)
    pieces = stream.squeeze(7) + stream.squeeze(0) + stream.squeeze(500) + stream.squeeze(493)
    assert pieces == whole


def test_squeeze_blocks_lengths():
    assert len(stream128(SEED32, 0).squeeze_blocks(5)) == 5 * 168
    assert len(stream256(SEED64, 0).squeeze_blocks(2)) == 2 * 136


def test_squeeze_blocks_continue_stream():
    a = stream256(SEED64, 3)
    b = stream256(SEED64, 3)
    assert a.squeeze_blocks(1) + a.squeeze_blocks(1) == b.squeeze_blocks(2)


def test_nonce_is_little_endian_suffix():
    expected = XofStream(SEED32 + b"\x02\x01", 128).squeeze(64)
    assert stream128(SEED32, 0x0102).squeeze(64) == expected
    expected256 = XofStream(SEED64 + b"\x02\x01", 256).squeeze(64)
    assert stream256(SEED64, 0x0102).squeeze(64) == expected256


def test_nonce_wraps_at_sixteen_bits():
    assert stream128(SEED32, 65536 + 7).squeeze(32) == stream128(SEED32, 7).squeeze(32)


def test_different_nonces_give_different_streams():
    assert stream256(SEED64, 0).squeeze(32) != stream256(SEED64, 1).squeeze(32)


def test_wrong_seed_lengths_raise():
    with pytest.raises(ValueError):
        stream128(SEED64, 0)
    with pytest.raises(ValueError):
        stream256(SEED32, 0)


def test_bad_security_and_negative_length_raise():
    with pytest.raises(ValueError):
        XofStream(b"", 512)
    with pytest.raises(ValueError):
        XofStream(b"", 128).squeeze(-1)