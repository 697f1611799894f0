"""Basic hexcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from hexcolor import (
    HexColor,
    ParseHexColorError,
    parse_hex,
    random_color,
    colors_to_array,
)


def demonstrate_parsing() -> None:
    # Every accepted notation, normalized on output.
    for text in ("#F00", "00f8", " #7f7f7f ", "#12345678"):
        color = parse_hex(text)
        print(f"{text!r:>14} -> {color} (alpha {'absent' if color.a is None else color.a})")

    try:
        parse_hex("#GHIJKL")
    except ParseHexColorError as exc:
        print("Rejected:", exc)


def demonstrate_arithmetic() -> None:
    red = HexColor.parse("#F00")
    blue = HexColor.parse("#00f")

    purple = red + blue
    print("red + blue:", purple)
    print("purple / 2:", purple / 2)
    print("purple - 255:", purple - 255)

    # Alpha is combined only when the left operand has it.
    veil = HexColor.rgba(0, 0, 0, 100)
    print("veil + blue:", veil + blue)
    print("blue + veil:", blue + veil)


def demonstrate_sampling() -> None:
    rng = np.random.default_rng(2024)
    palette = [random_color(rng) for _ in range(4)]
    print("Random palette:", [str(c) for c in palette])
    print("As array:\n", colors_to_array(palette))


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_arithmetic()
    demonstrate_sampling()
