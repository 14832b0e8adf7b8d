"""Service that detects the direction of a conversion and performs it."""

from __future__ import annotations

from . import morse

_MORSE_CHARS = frozenset(".- ")


def is_morse(text: str) -> bool:
    """Tell whether the text consists only of Morse dots, dashes and spaces."""
    text = text.strip()
    if "." not in text and "-" not in text:
        return False
    return all(char in _MORSE_CHARS for char in text)


class Service:
    """Converts Morse to text and text to Morse, detecting which is given."""

    def convert(self, text: str) -> str:
        """Convert Morse input to text, or any other input to Morse."""
        if is_morse(text):
            return morse.to_text(text)
        return morse.to_morse(text)