"""Greetings, module visibility, re-exported names and a variadic printer."""

from __future__ import annotations

import time

_BANNER_LINES = (
    "Hello and",
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
    "",
    "This exercise compiles successfully. The remaining exercises contain a compiler",
    "or logic error. The central concept behind Rustlings is to fix these errors and",
    "solve the exercises. Good luck!",
)

_FRUIT = "Pear"
_VEGGIE = "Cucumber"


def banner() -> str:
    """The welcome text shown by the first exercise."""
    return "\n".join(_BANNER_LINES)


def greet(name: str) -> str:
    """A greeting for the given name."""
    return f"Hello {name}!"


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> None:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    print("sausage!")


def favorite_snacks() -> str:
    """Name the favourite fruit and vegetable."""
    return f"favorite snacks: {_FRUIT} and {_VEGGIE}"


def seconds_since_epoch() -> int:
    """Whole seconds since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def my_macro(*args: object) -> None:
    """Print a fixed message, or a message about the single value given."""
    match args:
        case ():
            print("Check out my macro!")
        case (value,):
            print(f"Look at this other macro: {value}")
        case _:
            raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")