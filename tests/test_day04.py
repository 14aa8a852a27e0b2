import pytest

from advent2024.day04 import count_x_mas, count_xmas, main

EXAMPLE = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def _rows(text):
    return text.splitlines()


def _join(rows):
    return "\n".join(rows) + "\n"


def _transpose(text):
    return _join("".join(column) for column in zip(*_rows(text)))


def _mirror(text):
    return _join(row[::-1] for row in _rows(text))


def _rotate(text):
    return _transpose(_join(reversed(_rows(text))))


def test_example_xmas_count():
    assert count_xmas(EXAMPLE) == 18


def test_example_x_mas_count():
    assert count_x_mas(EXAMPLE) == 9


def test_no_x_means_no_xmas():
    assert count_xmas("MMMM\nAAAA\nSSSS\nMASM\n") == 0


@pytest.mark.parametrize("transform", [_transpose, _mirror, _rotate])
def test_counts_are_symmetric(transform):
    changed = transform(EXAMPLE)
    assert count_xmas(changed) == count_xmas(EXAMPLE)
    assert count_x_mas(changed) == count_x_mas(EXAMPLE)


def test_single_row_word_is_found_in_both_directions():
    forward = "XMAS\nMMMM\nMMMM\nMMMM\n"
    backward = "SAMX\nMMMM\nMMMM\nMMMM\n"
    assert count_xmas(forward) == count_xmas(backward)
    assert count_xmas(forward) >= 1


def test_grid_too_small_for_cross():
    assert count_x_mas("XM\nAS\n") == count_x_mas("MS\nAX\n")
    assert count_x_mas("XM\nAS\n") == count_xmas("XM\nAS\n")


def test_non_square_grid_is_rejected():
    with pytest.raises(ValueError):
        count_xmas("XMAS\nXMAS\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == [str(count_xmas(EXAMPLE)), str(count_x_mas(EXAMPLE))]