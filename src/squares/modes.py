import logging

from .bitarray import BitArray
from .errors import InvalidCharacter, KanjiRangeFailure, TooLong
from .tables import (
    MAX_VERSION, MIN_VERSION, alphanumeric_symbols, capacity,
    count_indicator_length, mode_indicators
)


logger = logging.getLogger(__name__)

numeric_symbols = "0123456789"

IDEOGRAPHIC_SPACE = "\u3000"

# Shift JIS double byte ranges and the offsets subtracted from them
kanji_ranges = (
    (0x8140, 0x9FFC, 0x8140),
    (0xE040, 0xEBBF, 0xC140)
)

numeric_group_bits = {3: 10, 2: 7, 1: 4}

PAD_CODEWORDS = (0xEC, 0x11)


def kanji_code(char):
    """Shift JIS double byte code of char, None when it has none"""
    try:
        encoded = char.encode("shift_jis")
    except UnicodeEncodeError:
        return None
    if len(encoded) != 2:
        return None
    return int.from_bytes(encoded, "big")


def normalize_kanji(s):
    return s.replace(" ", IDEOGRAPHIC_SPACE)


def is_kanji(s):
    return all(kanji_code(char) is not None for char in normalize_kanji(s))


def is_latin1(s):
    return all(ord(char) <= 0xFF for char in s)


def select_mode(s):
    """Picks the first of numeric, alphanumeric, kanji and byte modes
    able to represent the whole string."""
    if all(char in numeric_symbols for char in s):
        return "numeric"
    if all(char in alphanumeric_symbols for char in s):
        return "alphanumeric"
    if is_kanji(s):
        return "kanji"
    if is_latin1(s):
        return "byte"
    wide = [char for char in s if ord(char) > 0xFF]
    for char in wide:
        if kanji_code(char) is None:
            raise InvalidCharacter(char)
    # kanji mixed with Latin-1 characters, one mode can't hold both
    raise InvalidCharacter(wide[0])


def check_length(length, mode):
    max_length = capacity("L", MAX_VERSION, mode)
    if length > max_length:
        raise TooLong(length, mode, max_length)


def select_level(length, mode):
    """Strictest error correction level able to hold length characters"""
    for level in ("H", "Q", "M"):
        if length <= capacity(level, MAX_VERSION, mode):
            return level
    return "L"


def select_version(mode, level, length):
    """Smallest version with enough capacity, found by binary search"""
    low = MIN_VERSION
    high = MAX_VERSION
    version = 20
    while low <= high:
        current_max = capacity(level, version, mode)
        previous_max = capacity(level, version - 1, mode)
        if previous_max < length <= current_max:
            return version
        if current_max < length:
            low = version + 1
        else:
            high = version - 1
        version = (low + high) // 2
    raise RuntimeError(
        "No version holds {} {} characters at level {}".format(
            length, mode, level
        )
    )


def encode_alnum_char(c):
    index = alphanumeric_symbols.find(c)
    if index < 0:
        raise ValueError("Symbol is not in QRCode alphanumeric alphabet")
    return index


def encode_numeric(bits, data):
    for i in range(0, len(data), 3):
        group = data[i:i + 3]
        bits.extend(int(group), numeric_group_bits[len(group)])


def encode_alphanumeric(bits, data):
    length = len(data)
    for i in range(0, length - 1, 2):
        encoded = 45 * encode_alnum_char(data[i])
        encoded += encode_alnum_char(data[i + 1])
        bits.extend(encoded, 11)
    if length & 1:
        bits.extend(encode_alnum_char(data[-1]), 6)


def encode_byte(bits, data):
    for char in data.encode("iso 8859-1"):
        bits.extend(char, 8)


def encode_kanji(bits, data):
    for char in data:
        code = kanji_code(char)
        if code is None:
            raise InvalidCharacter(char)
        for start, end, offset in kanji_ranges:
            if start <= code <= end:
                code -= offset
                break
        else:
            raise KanjiRangeFailure(char, code)
        bits.extend((code >> 8) * 0xC0 + (code & 0xFF), 13)


mode_encoders = {
    "numeric": encode_numeric,
    "alphanumeric": encode_alphanumeric,
    "byte": encode_byte,
    "kanji": encode_kanji
}


def encode_data(data, mode, version):
    """Mode indicator, character count indicator and data bits"""
    if mode == "kanji":
        data = normalize_kanji(data)
    bits = BitArray()
    bits.extend(mode_indicators[mode], 4)
    bits.extend(len(data), count_indicator_length(version, mode))
    mode_encoders[mode](bits, data)
    return bits


def finalize_bits(bits, entry):
    """Appends terminator, byte alignment and pad codewords until bits
    fill all data codewords of the symbol"""
    required_bits = 8 * entry.total_data_codewords
    if len(bits) > required_bits:
        raise RuntimeError(
            "Encoded data is {} bits long, only {} fit into version "
            "{}-{}".format(len(bits), required_bits, entry.version,
                           entry.level)
        )
    bits.extend(0, min(4, required_bits - len(bits)))
    bits.extend(0, -len(bits) % 8)
    pad_count = (required_bits - len(bits)) // 8
    for i in range(pad_count):
        bits.extend(PAD_CODEWORDS[i & 1], 8)
    logger.debug(
        "Data bits padded with %d pad codewords to %d bits",
        pad_count, required_bits
    )
    return bits
