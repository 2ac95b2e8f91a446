import logging
from itertools import groupby

from .matrix import data_module, function_module
from .tables import format_info_strings


logger = logging.getLogger(__name__)

# modules where the condition holds are inverted
mask_functions = (
    lambda row, col: (row + col) % 2 == 0,
    lambda row, col: row % 2 == 0,
    lambda row, col: col % 3 == 0,
    lambda row, col: (row + col) % 3 == 0,
    lambda row, col: (row // 2 + col // 3) % 2 == 0,
    lambda row, col: (row * col) % 2 + (row * col) % 3 == 0,
    lambda row, col: ((row * col) % 2 + (row * col) % 3) % 2 == 0,
    lambda row, col: ((row + col) % 2 + (row * col) % 3) % 2 == 0
)

finder_like_patterns = (
    (1, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0),
    (0, 0, 0, 0, 1, 0, 1, 1, 1, 0, 1)
)


def mark_format_information(matrix, level, mask):
    format_s = format_info_strings[mask, level]
    for positions in matrix.format_positions():
        for i, (x, y) in enumerate(positions):
            bit = (format_s >> (14 - i)) & 1
            matrix.mark(x, y, function_module(bit))


def apply_mask(matrix, mask):
    fn = mask_functions[mask]
    for x, y in matrix.data_positions():
        if fn(y, x):
            module = matrix.modules[y][x]
            matrix.modules[y][x] = data_module(not module.dark)


def masked_matrix(matrix, level, mask):
    """Copy of matrix with format information and mask applied"""
    candidate = matrix.copy()
    mark_format_information(candidate, level, mask)
    apply_mask(candidate, mask)
    return candidate


def lines(grid):
    return [list(row) for row in grid] + [list(col) for col in zip(*grid)]


def penalty_runs(grid):
    score = 0
    for line in lines(grid):
        for _, run in groupby(line):
            length = sum(1 for _ in run)
            if length >= 5:
                score += length - 2
    return score


def penalty_blocks(grid):
    score = 0
    for upper, lower in zip(grid, grid[1:]):
        for x in range(len(upper) - 1):
            if upper[x] == upper[x + 1] == lower[x] == lower[x + 1]:
                score += 3
    return score


def penalty_finder_like(grid):
    score = 0
    for line in lines(grid):
        line = tuple(line)
        for i in range(len(line) - 10):
            if line[i:i + 11] in finder_like_patterns:
                score += 40
    return score


def penalty_balance(grid):
    total = sum(len(row) for row in grid)
    dark = sum(sum(row) for row in grid)
    percentage = dark * 100 // total
    previous = percentage - percentage % 5
    following = previous if percentage % 5 == 0 else previous + 5
    return min(abs(previous - 50), abs(following - 50)) // 5 * 10


def penalty(grid):
    return (
        penalty_runs(grid) + penalty_blocks(grid) +
        penalty_finder_like(grid) + penalty_balance(grid)
    )


def select_mask(matrix, level):
    """Tries all eight masks, the first one with the lowest penalty
    wins.

    :return:    tuple of mask number, masked matrix and its penalty
    """
    best_matrix = None
    best_penalty_score = None
    best_mask_index = None
    for mask_index in range(len(mask_functions)):
        candidate = masked_matrix(matrix, level, mask_index)
        penalty_score = penalty(candidate.to_bits())
        logger.debug("Mask %d penalty: %d", mask_index, penalty_score)
        if best_penalty_score is None or penalty_score < best_penalty_score:
            best_penalty_score = penalty_score
            best_matrix = candidate
            best_mask_index = mask_index
    return (best_mask_index, best_matrix, best_penalty_score)
