import pytest

from gustools.bits import (
    bit_at16,
    bits_equal16,
    extract_bits,
    format_bin,
    format_hex32,
    invert_bit,
    rotate32,
    set_bit,
    swap_segments16,
)

VALUES = [0, 1, 456, 0xBEEF, 0x12345678, 0xFFFFFFFF]


@pytest.mark.parametrize("value", VALUES)
@pytest.mark.parametrize("width", [8, 16, 32, 64])
def test_format_bin_round_trip(value, width):
    text = format_bin(value, width)
    groups = text.split("-")
    assert all(len(group) == 4 for group in groups)
    assert len(groups) == width // 4
    assert int(text.replace("-", ""), 2) == value & ((1 << width) - 1)


def test_format_bin_rejects_bad_width():
    with pytest.raises(ValueError):
        format_bin(3, 6)


@pytest.mark.parametrize("value", VALUES)
def test_format_hex32_round_trip(value):
    text = format_hex32(value)
    assert len(text.split()) == 8
    assert int(text.replace(" ", ""), 16) == value


@pytest.mark.parametrize("value", VALUES)
def test_extract_full_range_is_identity(value):
    assert extract_bits(value, 0, 31) == value


@pytest.mark.parametrize("value", VALUES)
def test_extract_recombines(value):
    low = extract_bits(value, 0, 15)
    high = extract_bits(value, 16, 31)
    assert (high << 16) | low == value


def test_extract_rejects_reversed_range():
    with pytest.raises(ValueError):
        extract_bits(7, 5, 2)


def test_swap_segments_moves_low_nibble_high():
    assert swap_segments16(0x000F, 4) == 0xF000


@pytest.mark.parametrize("value", [0, 0x1234, 0xBEEF, 0xFFFF, 0x8001])
@pytest.mark.parametrize("nbits", range(9))
def test_swap_segments_is_involution(value, nbits):
    assert swap_segments16(swap_segments16(value, nbits), nbits) == value


def test_swap_segments_zero_is_identity():
    assert swap_segments16(0xBEEF, 0) == 0xBEEF


def test_swap_segments_rejects_bad_length():
    with pytest.raises(ValueError):
        swap_segments16(1, 17)


@pytest.mark.parametrize("position", [0, 5, 31])
def test_set_and_clear_bit(position):
    value = set_bit(0, position, True)
    assert extract_bits(value, position, position) == 1
    assert set_bit(value, position, False) == 0


@pytest.mark.parametrize("value", VALUES)
@pytest.mark.parametrize("position", [0, 7, 31])
def test_invert_bit_twice_is_identity(value, position):
    flipped = invert_bit(value, position)
    assert flipped != value
    assert invert_bit(flipped, position) == value


def test_bit_position_out_of_range():
    with pytest.raises(ValueError):
        set_bit(0, 32, True)
    with pytest.raises(ValueError):
        bit_at16(0, 16)


def test_rotate_wraps_top_bit():
    assert rotate32(0x80000000, 1) == 1


@pytest.mark.parametrize("value", VALUES)
@pytest.mark.parametrize("shifts", [0, 1, 5, 31, 32, 40])
def test_rotate_round_trip(value, shifts):
    assert rotate32(rotate32(value, shifts), -shifts) == value


@pytest.mark.parametrize("value", VALUES)
def test_rotate_full_turn_is_identity(value):
    assert rotate32(value, 32) == value


def test_bit_at16():
    assert bit_at16(1, 0) is True
    assert bit_at16(1, 1) is False


def test_bits_equal16():
    assert bits_equal16(0xFFFF, 0x0001, 0) is True
    assert bits_equal16(0xFFFF, 0x0001, 1) is False
    assert bits_equal16(0, 0, 15) is True