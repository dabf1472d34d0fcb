import pytest

from rustlings.lessons.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_defaults_are_untouched_without_messages():
    state = State()
    assert state.color == (0, 0, 0)
    assert state.position == Point(0, 0)
    assert state.quit is False


def test_unknown_message_is_rejected():
    state = State()
    with pytest.raises(TypeError):
        state.process("Quit")


def test_messages_compare_by_value():
    assert Move(Point(1, 2)) == Move(Point(1, 2))
    assert Echo("a") != Echo("b")