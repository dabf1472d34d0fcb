"""Small functions and conditionals."""

from __future__ import annotations


def call_me(num: int) -> None:
    """Ring the given number of times."""
    for call in range(1, num + 1):
        print(f"Ring! Call number {call}")


def is_even(num: int) -> bool:
    """Whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def fizz_if_foo(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"