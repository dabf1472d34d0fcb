"""Quiz solutions: apple pricing, string handling, doubling and greetings."""

from __future__ import annotations


def calculate_apple_price(quantity: int) -> int:
    """Price of an order of apples: 2 each for small orders, 1 each for large ones."""
    if quantity < 65:
        return quantity * 2
    return quantity


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned piece of text."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(text: str) -> str:
    """Prefix the text with a greeting."""
    return f"Hello {text}"