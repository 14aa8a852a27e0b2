import pytest

from advent2024.day05 import (
    is_valid_update,
    main,
    parse_input,
    sum_valid_middle_pages,
)

EXAMPLE = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_example_sum():
    assert sum_valid_middle_pages(EXAMPLE) == 143


def test_parse_input_builds_both_rule_maps():
    befores, afters, updates = parse_input(EXAMPLE)
    assert 47 in befores[53]
    assert 53 in afters[47]
    assert updates[0] == [75, 47, 61, 53, 29]
    assert len(updates) == 6


@pytest.mark.parametrize(
    "index, expected",
    [(0, True), (1, True), (2, True), (3, False), (4, False), (5, False)],
)
def test_example_update_validity(index, expected):
    befores, afters, updates = parse_input(EXAMPLE)
    assert is_valid_update(updates[index], befores, afters) is expected


def test_reversed_pair_is_invalid():
    befores, afters, _ = parse_input("47|53\n\n47,53\n")
    assert is_valid_update([47, 53], befores, afters)
    assert not is_valid_update([53, 47], befores, afters)


def test_unrelated_pages_are_valid():
    befores, afters, _ = parse_input("1|2\n\n3,4\n")
    assert is_valid_update([3, 4, 5], befores, afters)


def test_middle_page_of_single_valid_update():
    assert sum_valid_middle_pages("47|53\n\n47,99,53\n") == 99


def test_invalid_updates_contribute_nothing():
    assert sum_valid_middle_pages("47|53\n\n53,99,47\n47,12,53\n") == 12


def test_missing_blank_line_is_rejected():
    with pytest.raises(ValueError):
        parse_input("47|53\n47,53\n")


def test_malformed_rule_is_rejected():
    with pytest.raises(ValueError):
        parse_input("47-53\n\n47,53\n")


def test_main_prints_sum(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(sum_valid_middle_pages(EXAMPLE))