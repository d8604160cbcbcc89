"""Tests for the integer <-> notch flag codec."""

import pytest

from core.errors import MalformedPatternError
from core.notch_codec import decode, decode_base, encode, encode_base, popcount


def test_round_trip_for_every_pattern():
    for r in range(64):
        assert encode(decode(r)) == r


def test_decode_is_low_bit_first():
    assert decode(46) == (0, 1, 1, 1, 0, 1)
    assert decode(1) == (1, 0, 0, 0, 0, 0)


@pytest.mark.parametrize("representation", [64, 127, -1, 1 << 10])
def test_decode_rejects_out_of_range(representation):
    with pytest.raises(MalformedPatternError):
        decode(representation)


def test_decode_rejects_non_integers():
    with pytest.raises(MalformedPatternError):
        decode("7")
    with pytest.raises(MalformedPatternError):
        decode(True)


def test_encode_rejects_wrong_shapes():
    with pytest.raises(MalformedPatternError):
        encode((1, 0, 1))
    with pytest.raises(MalformedPatternError):
        encode((1, 0, 2, 0, 0, 0))


def test_popcount():
    assert popcount(0) == 0
    assert popcount(46) == 4
    assert popcount(63) == 6


def test_base_pattern():
    assert decode_base(171) == (1, 1, 0, 1, 0, 1, 0, 1, 0)
    assert encode_base((1, 1, 0, 1, 0, 1, 0, 1, 0)) == 171
    assert decode_base(511) == (1,) * 9


def test_base_pattern_needs_nine_bits_at_most():
    with pytest.raises(MalformedPatternError):
        decode_base(512)
