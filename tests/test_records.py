import random

import pytest

from hireboard.records import (
    Hiree,
    Hirer,
    RecordError,
    append_hiree,
    append_hirer,
    filter_by_skill,
    find_hiree,
    find_hirer,
    generate_id,
    parse_hirees,
    parse_hirers,
    read_hirees,
    read_hirers,
    skill_for_choice,
)


def _hirees():
    return [
        Hiree("Asha", 30, "F", 10001, "Driving", 12345),
        Hiree("Ravi", 41, "M", 10002, "Cooking", 23456),
        Hiree("Meena", 25, "F", 10003, "Driving", 34567),
    ]


def test_hiree_line_round_trip():
    hirees = _hirees()
    text = "".join(h.to_line() for h in hirees)
    assert parse_hirees(text) == hirees


def test_hiree_line_layout():
    hiree = Hiree("Asha", 30, "F", 10001, "Driving", 12345)
    assert hiree.to_line().split() == ["Asha", "30", "F", "10001", "Driving", "12345"]
    assert hiree.to_line().endswith("\n")


def test_hirer_line_round_trip():
    password = "password"
    hirer = Hirer("Ann", 40, "ann@example.com", password)
    assert parse_hirers(hirer.to_line()) == [hirer]


def test_to_line_rejects_spaces():
    with pytest.raises(RecordError):
        Hiree("Asha K", 30, "F", 10001, "Driving", 12345).to_line()


def test_records_limited_to_line_breaks():
    text = Hiree("Asha", 30, "F", 10001, "Driving", 12345).to_line()
    text += "Ravi 41 M 10002 Cooking 23456"
    assert [h.name for h in parse_hirees(text)] == ["Asha"]


def test_incomplete_record_raises():
    with pytest.raises(RecordError):
        parse_hirees("Asha 30 F\n")


def test_bad_number_raises():
    with pytest.raises(RecordError):
        parse_hirers("Ann old ann@example.com password\n")


def test_append_and_read(tmp_path):
    hiree_file = tmp_path / "hiree.txt"
    hirer_file = tmp_path / "hirer.txt"
    for hiree in _hirees():
        append_hiree(hiree_file, hiree)
    password = "password"
    hirer = Hirer("Ann", 40, "ann@example.com", password)
    append_hirer(hirer_file, hirer)
    assert read_hirees(hiree_file) == _hirees()
    assert read_hirers(hirer_file) == [hirer]


def test_generate_id_range():
    rng = random.Random(7)
    ids = [generate_id(rng) for _ in range(2000)]
    assert min(ids) >= 9999
    assert max(ids) <= 9999 + 1110


def test_skill_choices():
    assert skill_for_choice(1) == "Driving"
    assert skill_for_choice(5) == "Beautician"
    assert skill_for_choice(6, "Plumbing") == "Plumbing"


@pytest.mark.parametrize("choice", [0, 7, -1])
def test_invalid_skill_choice(choice):
    with pytest.raises(ValueError):
        skill_for_choice(choice)


def test_custom_skill_required():
    with pytest.raises(ValueError):
        skill_for_choice(6)


def test_filter_by_skill():
    result = filter_by_skill(_hirees(), "Driving")
    assert [h.name for h in result] == ["Asha", "Meena"]
    assert filter_by_skill(_hirees(), "driving") == []


def test_find_hiree():
    hirees = _hirees()
    assert find_hiree(hirees, "Ravi", 10002, 23456) == hirees[1]
    assert find_hiree(hirees, "Ravi", 10002, 99999) is None


def test_find_hirer():
    password = "password"
    hirers = [Hirer("Ann", 40, "ann@example.com", password)]
    assert find_hirer(hirers, "ann@example.com", "password") == hirers[0]
    assert find_hirer(hirers, "ann@example.com", "secret") is None