from collections import namedtuple
from enum import Enum

from .tables import alignments, version_info_strings


class Kind(Enum):
    FUNCTION = "function"
    RESERVED = "reserved"
    UNFILLED = "unfilled"
    DATA = "data"


Module = namedtuple("Module", ["kind", "dark"])

FUNCTION_DARK = Module(Kind.FUNCTION, True)
FUNCTION_LIGHT = Module(Kind.FUNCTION, False)
RESERVED = Module(Kind.RESERVED, False)
UNFILLED = Module(Kind.UNFILLED, False)
DATA_DARK = Module(Kind.DATA, True)
DATA_LIGHT = Module(Kind.DATA, False)


def function_module(dark):
    return FUNCTION_DARK if dark else FUNCTION_LIGHT


def data_module(dark):
    return DATA_DARK if dark else DATA_LIGHT


class QRMatrix:
    """Module grid of a single QR symbol.

    Coordinates are (x, y) with x being the column and y the row, both
    counted from the top left corner. Next to the modules a grid of
    occupied flags marks everything data placement and masking must
    leave alone.
    """
    def __init__(self, version):
        self.version = version
        self.width = 17 + 4 * version
        self.modules = [
            [UNFILLED for i in range(self.width)]
            for j in range(self.width)
        ]
        self.occupied = [
            [False for i in range(self.width)]
            for j in range(self.width)
        ]

    def copy(self):
        other = QRMatrix(self.version)
        other.modules = [list(row) for row in self.modules]
        other.occupied = [list(row) for row in self.occupied]
        return other

    def mark(self, x, y, module):
        self.modules[y][x] = module
        self.occupied[y][x] = True

    def mark_rectangle(self, x, y, width, height, module):
        for i in range(y, y + height):
            for j in range(x, x + width):
                self.mark(j, i, module)

    def build(self):
        """Marks all function patterns and reserves format areas"""
        self.mark_finder_patterns()
        self.mark_separators()
        self.mark_alignment_patterns()
        self.mark_timing_pattern()
        self.mark_dark_module()
        self.reserve_format_information_area()
        self.mark_version_information()
        return self

    def mark_finder_pattern(self, x, y):
        self.mark_rectangle(x, y, 7, 7, FUNCTION_DARK)
        self.mark_rectangle(x + 1, y + 1, 5, 5, FUNCTION_LIGHT)
        self.mark_rectangle(x + 2, y + 2, 3, 3, FUNCTION_DARK)

    def mark_finder_patterns(self):
        self.mark_finder_pattern(0, 0)
        self.mark_finder_pattern(self.width - 7, 0)
        self.mark_finder_pattern(0, self.width - 7)

    def mark_separators(self):
        self.mark_rectangle(7, 0, 1, 8, FUNCTION_LIGHT)
        self.mark_rectangle(0, 7, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(self.width - 8, 7, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(self.width - 8, 0, 1, 8, FUNCTION_LIGHT)
        self.mark_rectangle(0, self.width - 8, 8, 1, FUNCTION_LIGHT)
        self.mark_rectangle(7, self.width - 8, 1, 8, FUNCTION_LIGHT)

    def mark_alignment_pattern(self, x, y):
        self.mark_rectangle(x, y, 5, 5, FUNCTION_DARK)
        self.mark_rectangle(x + 1, y + 1, 3, 3, FUNCTION_LIGHT)
        self.mark(x + 2, y + 2, FUNCTION_DARK)

    def alignment_pattern_corners(self):
        """Top left corners of alignment patterns not colliding with
        finder patterns and their separators"""
        positions = alignments[self.version - 1]
        far_edge = self.width - 8
        for center_y in positions:
            for center_x in positions:
                x = center_x - 2
                y = center_y - 2
                if x <= 7 and (y <= 7 or y + 4 >= far_edge):
                    continue
                if x + 4 >= far_edge and y <= 7:
                    continue
                yield (x, y)

    def mark_alignment_patterns(self):
        for x, y in self.alignment_pattern_corners():
            self.mark_alignment_pattern(x, y)

    def mark_timing_pattern(self):
        for i in range(8, self.width - 8):
            module = function_module(i % 2 == 0)
            self.mark(i, 6, module)
            self.mark(6, i, module)

    def mark_dark_module(self):
        self.mark(8, self.width - 8, FUNCTION_DARK)

    def format_positions(self):
        """Both copies of the format information area, each listed from
        the most significant bit"""
        around_finder = [(x, 8) for x in range(6)]
        around_finder += [(7, 8), (8, 8), (8, 7)]
        around_finder += [(8, y) for y in range(5, -1, -1)]
        split = [(8, self.width - 1 - i) for i in range(7)]
        split += [(self.width - 8 + i, 8) for i in range(8)]
        return (around_finder, split)

    def reserve_format_information_area(self):
        for positions in self.format_positions():
            for x, y in positions:
                self.mark(x, y, RESERVED)

    def mark_version_information(self):
        # bit i goes to column i // 3, row width - 11 + i % 3 of the
        # bottom left block, the top right block is its transposition
        if self.version < 7:
            return
        version_s = version_info_strings[self.version]
        for bit_index in range(18):
            module = function_module((version_s >> bit_index) & 1)
            a = bit_index // 3
            b = self.width - 11 + bit_index % 3
            self.mark(a, b, module)
            self.mark(b, a, module)

    def data_positions(self):
        """Free module coordinates in the order data bits are placed"""
        right = self.width - 1
        upward = True
        while right > 0:
            if upward:
                rows = range(self.width - 1, -1, -1)
            else:
                rows = range(self.width)
            for y in rows:
                for x in (right, right - 1):
                    if not self.occupied[y][x]:
                        yield (x, y)
            upward = not upward
            # column 6 holds the vertical timing pattern
            right = 5 if right == 8 else right - 2

    def place_data(self, bits):
        positions = list(self.data_positions())
        if len(positions) != len(bits):
            raise RuntimeError(
                "Version {} has {} free modules for {} bits".format(
                    self.version, len(positions), len(bits)
                )
            )
        for (x, y), bit in zip(positions, bits):
            self.modules[y][x] = data_module(bit)

    def to_bits(self):
        return [[int(module.dark) for module in row] for row in self.modules]
