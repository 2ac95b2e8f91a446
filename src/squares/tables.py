from collections import namedtuple
from types import MappingProxyType

from .galoisfield import modulo_gf2


LEVELS = ("L", "M", "Q", "H")
MODES = ("numeric", "alphanumeric", "byte", "kanji")
MIN_VERSION = 1
MAX_VERSION = 40

mode_indicators = {
    "numeric": 0b0001,
    "alphanumeric": 0b0010,
    "byte": 0b0100,
    "kanji": 0b1000
}

ec_level_code = {
    "L": 0b01,
    "M": 0b00,
    "Q": 0b11,
    "H": 0b10
}

# character count indicator lengths for versions 1-9, 10-26 and 27-40
count_indicator_lengths = {
    "numeric": (10, 12, 14),
    "alphanumeric": (9, 11, 13),
    "byte": (8, 16, 16),
    "kanji": (8, 10, 12)
}

alphanumeric_symbols = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

# (group1 blocks, group1 data codewords, group2 blocks,
#  group2 data codewords, error correction codewords per block)
# for levels L, M, Q, H
blocks = (
    ((1, 19, 0, 0, 7), (1, 16, 0, 0, 10),
     (1, 13, 0, 0, 13), (1, 9, 0, 0, 17)),  # 1
    ((1, 34, 0, 0, 10), (1, 28, 0, 0, 16),
     (1, 22, 0, 0, 22), (1, 16, 0, 0, 28)),  # 2
    ((1, 55, 0, 0, 15), (1, 44, 0, 0, 26),
     (2, 17, 0, 0, 18), (2, 13, 0, 0, 22)),  # 3
    ((1, 80, 0, 0, 20), (2, 32, 0, 0, 18),
     (2, 24, 0, 0, 26), (4, 9, 0, 0, 16)),  # 4
    ((1, 108, 0, 0, 26), (2, 43, 0, 0, 24),
     (2, 15, 2, 16, 18), (2, 11, 2, 12, 22)),  # 5
    ((2, 68, 0, 0, 18), (4, 27, 0, 0, 16),
     (4, 19, 0, 0, 24), (4, 15, 0, 0, 28)),  # 6
    ((2, 78, 0, 0, 20), (4, 31, 0, 0, 18),
     (2, 14, 4, 15, 18), (4, 13, 1, 14, 26)),  # 7
    ((2, 97, 0, 0, 24), (2, 38, 2, 39, 22),
     (4, 18, 2, 19, 22), (4, 14, 2, 15, 26)),  # 8
    ((2, 116, 0, 0, 30), (3, 36, 2, 37, 22),
     (4, 16, 4, 17, 20), (4, 12, 4, 13, 24)),  # 9
    ((2, 68, 2, 69, 18), (4, 43, 1, 44, 26),
     (6, 19, 2, 20, 24), (6, 15, 2, 16, 28)),  # 10
    ((4, 81, 0, 0, 20), (1, 50, 4, 51, 30),
     (4, 22, 4, 23, 28), (3, 12, 8, 13, 24)),  # 11
    ((2, 92, 2, 93, 24), (6, 36, 2, 37, 22),
     (4, 20, 6, 21, 26), (7, 14, 4, 15, 28)),  # 12
    ((4, 107, 0, 0, 26), (8, 37, 1, 38, 22),
     (8, 20, 4, 21, 24), (12, 11, 4, 12, 22)),  # 13
    ((3, 115, 1, 116, 30), (4, 40, 5, 41, 24),
     (11, 16, 5, 17, 20), (11, 12, 5, 13, 24)),  # 14
    ((5, 87, 1, 88, 22), (5, 41, 5, 42, 24),
     (5, 24, 7, 25, 30), (11, 12, 7, 13, 24)),  # 15
    ((5, 98, 1, 99, 24), (7, 45, 3, 46, 28),
     (15, 19, 2, 20, 24), (3, 15, 13, 16, 30)),  # 16
    ((1, 107, 5, 108, 28), (10, 46, 1, 47, 28),
     (1, 22, 15, 23, 28), (2, 14, 17, 15, 28)),  # 17
    ((5, 120, 1, 121, 30), (9, 43, 4, 44, 26),
     (17, 22, 1, 23, 28), (2, 14, 19, 15, 28)),  # 18
    ((3, 113, 4, 114, 28), (3, 44, 11, 45, 26),
     (17, 21, 4, 22, 26), (9, 13, 16, 14, 26)),  # 19
    ((3, 107, 5, 108, 28), (3, 41, 13, 42, 26),
     (15, 24, 5, 25, 30), (15, 15, 10, 16, 28)),  # 20
    ((4, 116, 4, 117, 28), (17, 42, 0, 0, 26),
     (17, 22, 6, 23, 28), (19, 16, 6, 17, 30)),  # 21
    ((2, 111, 7, 112, 28), (17, 46, 0, 0, 28),
     (7, 24, 16, 25, 30), (34, 13, 0, 0, 24)),  # 22
    ((4, 121, 5, 122, 30), (4, 47, 14, 48, 28),
     (11, 24, 14, 25, 30), (16, 15, 14, 16, 30)),  # 23
    ((6, 117, 4, 118, 30), (6, 45, 14, 46, 28),
     (11, 24, 16, 25, 30), (30, 16, 2, 17, 30)),  # 24
    ((8, 106, 4, 107, 26), (8, 47, 13, 48, 28),
     (7, 24, 22, 25, 30), (22, 15, 13, 16, 30)),  # 25
    ((10, 114, 2, 115, 28), (19, 46, 4, 47, 28),
     (28, 22, 6, 23, 28), (33, 16, 4, 17, 30)),  # 26
    ((8, 122, 4, 123, 30), (22, 45, 3, 46, 28),
     (8, 23, 26, 24, 30), (12, 15, 28, 16, 30)),  # 27
    ((3, 117, 10, 118, 30), (3, 45, 23, 46, 28),
     (4, 24, 31, 25, 30), (11, 15, 31, 16, 30)),  # 28
    ((7, 116, 7, 117, 30), (21, 45, 7, 46, 28),
     (1, 23, 37, 24, 30), (19, 15, 26, 16, 30)),  # 29
    ((5, 115, 10, 116, 30), (19, 47, 10, 48, 28),
     (15, 24, 25, 25, 30), (23, 15, 25, 16, 30)),  # 30
    ((13, 115, 3, 116, 30), (2, 46, 29, 47, 28),
     (42, 24, 1, 25, 30), (23, 15, 28, 16, 30)),  # 31
    ((17, 115, 0, 0, 30), (10, 46, 23, 47, 28),
     (10, 24, 35, 25, 30), (19, 15, 35, 16, 30)),  # 32
    ((17, 115, 1, 116, 30), (14, 46, 21, 47, 28),
     (29, 24, 19, 25, 30), (11, 15, 46, 16, 30)),  # 33
    ((13, 115, 6, 116, 30), (14, 46, 23, 47, 28),
     (44, 24, 7, 25, 30), (59, 16, 1, 17, 30)),  # 34
    ((12, 121, 7, 122, 30), (12, 47, 26, 48, 28),
     (39, 24, 14, 25, 30), (22, 15, 41, 16, 30)),  # 35
    ((6, 121, 14, 122, 30), (6, 47, 34, 48, 28),
     (46, 24, 10, 25, 30), (2, 15, 64, 16, 30)),  # 36
    ((17, 122, 4, 123, 30), (29, 46, 14, 47, 28),
     (49, 24, 10, 25, 30), (24, 15, 46, 16, 30)),  # 37
    ((4, 122, 18, 123, 30), (13, 46, 32, 47, 28),
     (48, 24, 14, 25, 30), (42, 15, 32, 16, 30)),  # 38
    ((20, 117, 4, 118, 30), (40, 47, 7, 48, 28),
     (43, 24, 22, 25, 30), (10, 15, 67, 16, 30)),  # 39
    ((19, 118, 6, 119, 30), (18, 47, 31, 48, 28),
     (34, 24, 34, 25, 30), (20, 15, 61, 16, 30)),  # 40
)

alignments = (
    (),               # 1
    (6, 18),          # 2
    (6, 22),          # 3
    (6, 26),          # 4
    (6, 30),          # 5
    (6, 34),          # 6
    (6, 22, 38),      # 7
    (6, 24, 42),      # 8
    (6, 26, 46),      # 9
    (6, 28, 50),      # 10
    (6, 30, 54),      # 11
    (6, 32, 58),      # 12
    (6, 34, 62),      # 13
    (6, 26, 46, 66),  # 14
    (6, 26, 48, 70),  # 15
    (6, 26, 50, 74),  # 16
    (6, 30, 54, 78),  # 17
    (6, 30, 56, 82),  # 18
    (6, 30, 58, 86),  # 19
    (6, 34, 62, 90),  # 20
    (6, 28, 50, 72, 94),              # 21
    (6, 26, 50, 74, 98),              # 22
    (6, 30, 54, 78, 102),             # 23
    (6, 28, 54, 80, 106),             # 24
    (6, 32, 58, 84, 110),             # 25
    (6, 30, 58, 86, 114),             # 26
    (6, 34, 62, 90, 118),             # 27
    (6, 26, 50, 74, 98, 122),         # 28
    (6, 30, 54, 78, 102, 126),        # 29
    (6, 26, 52, 78, 104, 130),        # 30
    (6, 30, 56, 82, 108, 134),        # 31
    (6, 34, 60, 86, 112, 138),        # 32
    (6, 30, 58, 86, 114, 142),        # 33
    (6, 34, 62, 90, 118, 146),        # 34
    (6, 30, 54, 78, 102, 126, 150),   # 35
    (6, 24, 50, 76, 102, 128, 154),   # 36
    (6, 28, 54, 80, 106, 132, 158),   # 37
    (6, 32, 58, 84, 110, 136, 162),   # 38
    (6, 26, 54, 82, 110, 138, 166),   # 39
    (6, 30, 58, 86, 114, 142, 170)    # 40
)

remainder_bits = (
    0, 7, 7, 7, 7, 7, 0, 0, 0, 0,     # 1 - 10
    0, 0, 0, 3, 3, 3, 3, 3, 3, 3,     # 11 - 20
    4, 4, 4, 4, 4, 4, 4, 3, 3, 3,     # 21 - 30
    3, 3, 3, 3, 0, 0, 0, 0, 0, 0      # 31 - 40
)

FORMAT_GENERATOR = 0b10100110111
FORMAT_MASK = 0b101010000010010
VERSION_GENERATOR = 0b1111100100101


ModeCapacities = namedtuple(
    "ModeCapacities", MODES
)

CapacityEntry = namedtuple(
    "CapacityEntry", [
        "level",
        "version",
        "total_data_codewords",
        "group1_blocks",
        "group1_data_codewords",
        "group2_blocks",
        "group2_data_codewords",
        "ec_codewords_per_block",
        "capacities"
    ]
)


def count_indicator_length(version, mode):
    if version < 10:
        tier = 0
    elif version < 27:
        tier = 1
    else:
        tier = 2
    return count_indicator_lengths[mode][tier]


def character_capacity(data_bits, version, mode):
    """Maximum number of characters encodable in data_bits in a single
    segment of given mode"""
    bits = data_bits - 4 - count_indicator_length(version, mode)
    if mode == "numeric":
        groups, rest = divmod(bits, 10)
        capacity = 3 * groups
        if rest >= 7:
            capacity += 2
        elif rest >= 4:
            capacity += 1
    elif mode == "alphanumeric":
        groups, rest = divmod(bits, 11)
        capacity = 2 * groups
        if rest >= 6:
            capacity += 1
    elif mode == "byte":
        capacity = bits // 8
    elif mode == "kanji":
        capacity = bits // 13
    else:
        raise ValueError("Unknown encoding: " + repr(mode))
    return capacity


def _capacity_entry(level, version):
    g1_blocks, g1_len, g2_blocks, g2_len, ec_len = \
        blocks[version - 1][LEVELS.index(level)]
    total = g1_blocks * g1_len + g2_blocks * g2_len
    capacities = ModeCapacities(*(
        character_capacity(8 * total, version, mode) for mode in MODES
    ))
    return CapacityEntry(
        level, version, total, g1_blocks, g1_len, g2_blocks, g2_len,
        ec_len, capacities
    )


def format_string(ec_level, mask):
    ec_code = ec_level_code[ec_level]
    format_bits = (ec_code << 13) | (mask << 10)
    format_ec_bits = modulo_gf2(format_bits, FORMAT_GENERATOR)
    format_s = format_bits | format_ec_bits
    format_s ^= FORMAT_MASK
    return format_s


def version_string(version):
    version_bits = version << 12
    version_ec_bits = modulo_gf2(version_bits, VERSION_GENERATOR)
    version_s = version_bits | version_ec_bits
    return version_s


capacity_table = MappingProxyType({
    (level, version): _capacity_entry(level, version)
    for level in LEVELS
    for version in range(MIN_VERSION, MAX_VERSION + 1)
})

# 15 bit strings keyed by (mask, level)
format_info_strings = MappingProxyType({
    (mask, level): format_string(level, mask)
    for mask in range(8)
    for level in LEVELS
})

# 18 bit strings keyed by version, versions 7 and up only
version_info_strings = MappingProxyType({
    version: version_string(version)
    for version in range(7, MAX_VERSION + 1)
})


def capacity(level, version, mode):
    """Maximum character count, zero for version 0"""
    if version < MIN_VERSION:
        return 0
    return getattr(capacity_table[level, version].capacities, mode)
