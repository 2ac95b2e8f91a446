import pytest

from squares import modes
from squares.bitarray import BitArray
from squares.errors import InvalidCharacter, KanjiRangeFailure, TooLong
from squares.modes import (
    check_length, encode_data, finalize_bits, numeric_symbols, select_level,
    select_mode, select_version
)
from squares.tables import (
    LEVELS, MODES, alphanumeric_symbols, capacity, capacity_table
)


@pytest.mark.parametrize("data, mode", [
    ("0123456789", "numeric"),
    ("HELLO WORLD", "alphanumeric"),
    ("$%*+-./: ", "alphanumeric"),
    ("hello world", "byte"),
    ("caf\xe9", "byte"),
    ("茗荷", "kanji"),
    ("漢 字", "kanji"),
    ("", "numeric"),
])
def test_select_mode(data, mode):
    assert select_mode(data) == mode


def test_repertoires_are_nested():
    assert all(char in alphanumeric_symbols for char in numeric_symbols)
    assert all(ord(char) <= 0xFF for char in alphanumeric_symbols)


@pytest.mark.parametrize("data, character", [
    ("•", "•"),
    ("ab•cd", "•"),
    ("smile \U0001F600", "\U0001F600"),
    ("caf\xe9 漢", "漢"),
])
def test_invalid_character(data, character):
    with pytest.raises(InvalidCharacter) as excinfo:
        select_mode(data)
    assert excinfo.value.character == character
    assert repr(character) in str(excinfo.value)


def test_select_level():
    assert select_level(11, "alphanumeric") == "H"
    assert select_level(3057, "numeric") == "H"
    assert select_level(3058, "numeric") == "Q"
    assert select_level(7089, "numeric") == "L"
    assert select_level(1273, "byte") == "H"
    assert select_level(2953, "byte") == "L"


def test_check_length():
    check_length(7089, "numeric")
    with pytest.raises(TooLong):
        check_length(7090, "numeric")
    with pytest.raises(TooLong):
        check_length(2954, "byte")


def test_select_version():
    assert select_version("alphanumeric", "H", 11) == 2
    assert select_version("numeric", "H", 41) == 3
    assert select_version("numeric", "L", 41) == 1
    assert select_version("byte", "L", 2953) == 40


def test_select_version_boundaries():
    for level in LEVELS:
        for mode in MODES:
            for version in range(1, 41):
                length = capacity(level, version, mode)
                assert select_version(mode, level, length) == version
                previous = capacity(level, version - 1, mode)
                assert select_version(mode, level, previous + 1) == version


def test_select_version_without_fit():
    with pytest.raises(RuntimeError):
        select_version("byte", "H", 5000)


def test_encode_numeric():
    bits = encode_data("01234567", "numeric", 1)
    assert bits.to_bitstring() == (
        "0001" "0000001000" "0000001100" "0101011001" "1000011"
    )
    bits = encode_data("8675309", "numeric", 1)
    assert bits.to_bitstring() == (
        "0001" "0000000111" "1101100011" "1000010010" "1001"
    )


def test_encode_alphanumeric():
    bits = encode_data("HELLO WORLD", "alphanumeric", 1)
    assert bits.to_bitstring() == (
        "0010" "000001011" "01100001011" "01111000110" "10001011100"
        "10110111000" "10011010100" "001101"
    )


def test_encode_byte():
    bits = encode_data("hi\xff", "byte", 1)
    assert bits.to_bitstring() == (
        "0100" "00000011" "01101000" "01101001" "11111111"
    )


def test_encode_kanji():
    bits = encode_data("茗荷", "kanji", 1)
    assert bits.to_bitstring() == (
        "1000" "00000010" "1101010101010" "0011010010111"
    )


def test_encode_kanji_space():
    bits = encode_data("漢 字", "kanji", 1)
    assert len(bits) == 4 + 8 + 3 * 13
    assert bits.to_bitstring()[4:12] == "00000011"
    assert bits.to_bitstring()[25:38] == "0" * 13


def test_count_indicator_widens():
    assert encode_data("1", "numeric", 10).to_bitstring() == \
        "0001" "000000000001" "0001"
    assert encode_data("A", "alphanumeric", 27).to_bitstring() == \
        "0010" "0000000000001" "001010"


def test_kanji_range_failure(monkeypatch):
    monkeypatch.setattr(modes, "kanji_code", lambda char: 0xF040)
    with pytest.raises(KanjiRangeFailure) as excinfo:
        encode_data("茗", "kanji", 1)
    assert excinfo.value.code == 0xF040
    assert excinfo.value.character == "茗"


def test_finalize_hello_world():
    bits = encode_data("HELLO WORLD", "alphanumeric", 1)
    finalize_bits(bits, capacity_table["Q", 1])
    expected = (0b00100000010110110000101101111000110100010111001011011100010011010100001101000000111011000001000111101100).to_bytes(13, "big")
    assert bits.to_bytes() == expected


def test_finalize_pad_codewords():
    bits = BitArray()
    bits.extend(0b0100, 4)
    bits.extend(0, 8)
    finalize_bits(bits, capacity_table["H", 1])
    assert bits.to_bytes() == bytes(
        [0x40, 0x00, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC]
    )


def test_finalize_short_terminator():
    bits = BitArray()
    bits.extend(0, 150)
    finalize_bits(bits, capacity_table["L", 1])
    assert len(bits) == 152


def test_finalize_overflow():
    bits = BitArray()
    bits.extend(0, 153)
    with pytest.raises(RuntimeError):
        finalize_bits(bits, capacity_table["L", 1])
