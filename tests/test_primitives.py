import pytest

from rustlings.lessons.primitives import (
    add_option,
    add_through_references,
    big_array,
    classify_char,
    computed_numbers,
    describe_cat,
    describe_point,
    fill_new_vec,
    fill_vec,
    floats_differ,
    nice_slice,
    pop_all,
    print_number,
    second,
    spell_number,
)
from rustlings.lessons.enums import Point


def test_slice_out_of_array():
    assert list(nice_slice([1, 2, 3, 4, 5])) == [2, 3, 4]


def test_indexing_tuple():
    assert second((1, 2, 3)) == 2


@pytest.mark.parametrize(
    ("ch", "expected"),
    [
        ("C", "Alphabetical!"),
        ("3", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) == expected


def test_classify_char_rejects_strings():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_big_array_has_at_least_100_elements():
    assert len(big_array()) >= 100


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_spell_number():
    assert spell_number("T-H-R-E-E") == "Spell a Number : T-H-R-E-E"


def test_print_number(capsys):
    print_number(13)
    assert capsys.readouterr().out == "printing: 13\n"


def test_print_number_without_value():
    with pytest.raises(ValueError):
        print_number(None)


def test_computed_numbers_invariants():
    numbers = computed_numbers()
    assert len(numbers) == 5
    assert numbers[0] == 0
    assert numbers == sorted(numbers)
    assert all(0 <= n < 2**16 for n in numbers)


def test_pop_all_takes_every_value_in_reverse():
    assert pop_all(list(range(1, 10))) == list(range(9, 0, -1))


def test_pop_all_stops_at_missing_value():
    assert pop_all([1, 2, None, 3]) == [3]
    assert pop_all([]) == []


def test_describe_point():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "
    assert describe_point(None) == "no match"


def test_fill_vec_leaves_input_untouched():
    original: list[int] = []
    filled = fill_vec(original)
    assert filled == [22, 44, 66]
    assert original == []


def test_fill_new_vec():
    assert fill_new_vec() == [22, 44, 66]


def test_add_through_references():
    assert add_through_references(100) == 1200


def test_floats_differ():
    assert floats_differ(1.2331, 1.2332)
    assert not floats_differ(1.5, 1.5)


def test_add_option():
    assert add_option(42, 12) == 54
    assert add_option(42, None) == 42