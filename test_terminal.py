import pytest

from squares.terminal import (
    BLACK_BACKGROUND, RESET, WHITE_BACKGROUND, render_ansi, render_numbers,
    render_text, with_quiet_zone
)


matrix = [
    [1, 0],
    [0, 1]
]


def test_quiet_zone():
    assert with_quiet_zone(matrix, 1) == [
        [0, 0, 0, 0],
        [0, 1, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 0]
    ]
    assert with_quiet_zone(matrix, 0) == matrix
    assert len(with_quiet_zone(matrix)) == 10
    with pytest.raises(ValueError):
        with_quiet_zone(matrix, -1)


def test_quiet_zone_copies_rows():
    result = with_quiet_zone(matrix, 0)
    result[0][0] = 0
    assert matrix[0][0] == 1


def test_render_numbers():
    assert render_numbers(matrix, 0) == "10\n01"
    assert render_numbers(matrix, 1).split("\n")[0] == "0000"


def test_render_text():
    assert render_text(matrix, 0) == "██  \n  ██"
    assert render_text(matrix, 0, dark="#", light=".") == "#.\n.#"


def test_render_ansi():
    dark = BLACK_BACKGROUND + "  " + RESET
    light = WHITE_BACKGROUND + "  " + RESET
    assert render_ansi(matrix, 0) == dark + light + "\n" + light + dark
    lines = render_ansi(matrix, 2).split("\n")
    assert len(lines) == 6
    assert lines[0] == light * 6
