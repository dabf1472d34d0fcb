import pytest

from rustlings.lessons.generics import ReportCard, Wrapper, append_bar, shopping_list


def test_shopping_list():
    assert shopping_list() == ["milk"]


def test_store_int_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_append_bar_to_string():
    assert append_bar("Foo") == "FooBar"


def test_append_bar_twice():
    assert append_bar(append_bar("")) == "BarBar"


def test_append_bar_to_list():
    items = append_bar(["Foo"])
    assert items.pop() == "Bar"
    assert items.pop() == "Foo"
    assert items == []


def test_append_bar_leaves_original_list_alone():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(3)