import pytest

from rustlings.lessons.data import Point
from rustlings.lessons.ownership import (
    ReportCard,
    Wrapper,
    describe_point,
    drain_optionals,
    fill_vec,
    get_char,
    maybe_icecream,
    new_filled_vec,
    offset_sums,
    string_uppercase,
)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.render() == "Gary Plotter (11) - achieved a grade of A+"


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_check_icecream():
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecream = maybe_icecream(12)
    icecreams = icecream if icecream is not None else 0
    assert icecreams == 5


def test_fill_vec_leaves_input_alone():
    original = []
    filled = fill_vec(original)
    filled.append(88)
    assert original == []
    assert filled == [22, 44, 66, 88]


def test_new_filled_vec():
    assert new_filled_vec() == [22, 44, 66]


def test_get_char_and_uppercase(capsys):
    data = "Rust is great!"
    assert get_char(data) == "!"
    assert string_uppercase(data) == "RUST IS GREAT!"
    assert capsys.readouterr().out == "RUST IS GREAT!\n"


def test_get_char_of_empty_text():
    with pytest.raises(ValueError):
        get_char("")


def test_drain_optionals_pops_from_end():
    values = list(range(1, 10))
    assert drain_optionals(values) == [9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert values == []


def test_drain_optionals_stops_at_missing_value():
    values = [1, None, 2, 3]
    assert drain_optionals(values) == [3, 2]
    assert values == [1]


def test_describe_point():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "
    assert describe_point(None) == "no match"


def test_offset_sums_small():
    assert offset_sums([1, 2, 3, 4], 2) == [6, 4]


def test_offset_sums_cover_everything():
    sums = offset_sums(range(100), 8)
    assert len(sums) == 8
    assert sum(sums) == 4950


def test_offset_sums_needs_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2], 0)