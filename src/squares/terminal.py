"""Text renderings of module grids for terminals and debugging"""

MARGIN_WIDTH = 4

WHITE_BACKGROUND = "\x1b[47m"
BLACK_BACKGROUND = "\x1b[40m"
RESET = "\x1b[0m"


def with_quiet_zone(matrix, margin=MARGIN_WIDTH):
    if margin < 0:
        raise ValueError("Margin can't be negative")
    width = len(matrix[0]) + 2 * margin if matrix else 2 * margin
    blank = [0] * width
    rows = [list(blank) for _ in range(margin)]
    for line in matrix:
        rows.append([0] * margin + list(line) + [0] * margin)
    rows.extend(list(blank) for _ in range(margin))
    return rows


def render_text(matrix, margin=MARGIN_WIDTH, dark="██", light="  "):
    return "\n".join(
        "".join(dark if module else light for module in line)
        for line in with_quiet_zone(matrix, margin)
    )


def render_numbers(matrix, margin=MARGIN_WIDTH):
    return render_text(matrix, margin, dark="1", light="0")


def render_ansi(matrix, margin=MARGIN_WIDTH):
    return render_text(
        matrix, margin,
        dark=BLACK_BACKGROUND + "  " + RESET,
        light=WHITE_BACKGROUND + "  " + RESET
    )
