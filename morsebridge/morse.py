"""Conversion between text and Morse code using the Russian Morse alphabet."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping

SPACE = " "

DEFAULT_MORSE: dict[str, str] = {
    "А": ".-",
    "Б": "-...",
    "В": ".--",
    "Г": "--.",
    "Д": "-..",
    "Е": ".",
    "Ж": "...-",
    "З": "--..",
    "И": "..",
    "Й": ".---",
    "К": "-.-",
    "Л": ".-..",
    "М": "--",
    "Н": "-.",
    "О": "---",
    "П": ".--.",
    "Р": ".-.",
    "С": "...",
    "Т": "-",
    "У": "..-",
    "Ф": "..-.",
    "Х": "....",
    "Ц": "-.-.",
    "Ч": "---.",
    "Ш": "----",
    "Щ": "--.-",
    "Ь": "-..-",
    "Ы": "-.--",
    "Ъ": "-..-",
    "Э": "..-..",
    "Ю": "..--",
    "Я": ".-.-",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    "0": "-----",
    ".": "......",
    ",": ".-.-.-",
    ":": "---...",
    "?": "..--..",
    "'": ".----.",
    "-": "-....-",
    "/": "-..-.",
    "(": "-.--.",
    ")": "-.--.-",
    '"': ".-..-.",
}

ErrorHandler = Callable[[Exception], str]


class NoEncodingError(Exception):
    """Raised or reported when a character or code has no representation."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No encoding for: {json.dumps(text, ensure_ascii=False)}")


def ignore_handler(error: Exception) -> str:
    """Discard the reported error and insert nothing in its place."""
    if not isinstance(error, Exception):
        raise TypeError(f"expected an exception, got {type(error).__name__}")
    return ""


def _reverse(encoding: Mapping[str, str]) -> dict[str, str]:
    return {code: char for char, code in encoding.items()}


def _upper(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _split(text: str, separator: str) -> list[str]:
    if not separator:
        return list(text)
    return text.split(separator)


_REVERSE_DEFAULT_MORSE = _reverse(DEFAULT_MORSE)


class Converter:
    """Converts text to Morse and back using a configurable encoding."""

    def __init__(
        self,
        encoding: Mapping[str, str] | None,
        *,
        char_separator: str = " ",
        word_separator: str = "",
        convert_to_upper: bool = False,
        trailing_separator: bool = False,
        handler: ErrorHandler = ignore_handler,
    ) -> None:
        if encoding is None:
            raise ValueError("Using a nil EncodingMap")
        self.encoding: dict[str, str] = dict(encoding)
        self.decoding: dict[str, str] = _reverse(self.encoding)
        self.char_separator = char_separator
        self.convert_to_upper = convert_to_upper
        self.trailing_separator = trailing_separator
        self.handler = handler
        if not word_separator:
            space = self.encoding.get(" ", SPACE)
            word_separator = char_separator + space + char_separator
        self.word_separator = word_separator

    def _finish(self, out: list[str]) -> str:
        result = "".join(out)
        cut = len(self.char_separator)
        if not self.trailing_separator and len(result) >= cut and cut:
            result = result[:-cut]
        return result

    def _handle(self, text: str, out: list[str]) -> None:
        replacement = self.handler(NoEncodingError(text))
        if replacement:
            out.append(replacement)
            out.append(self.char_separator)

    def to_text(self, morse: str) -> str:
        """Convert a Morse string to text."""
        out: list[str] = []
        word_split = self.char_separator + SPACE + self.char_separator
        for word in morse.split(word_split):
            for code in _split(word, self.char_separator):
                char = self.decoding.get(code)
                if char is None:
                    self._handle(code, out)
                    continue
                out.append(char)
            out.append(" ")
        return self._finish(out)

    def to_morse(self, text: str) -> str:
        """Convert text to its Morse representation."""
        out: list[str] = []
        for char in text:
            if self.convert_to_upper:
                char = _upper(char)
            code = self.encoding.get(char)
            if code is None:
                self._handle(char, out)
                continue
            out.append(code)
            out.append(self.char_separator)
        return self._finish(out)


DEFAULT_CONVERTER = Converter(
    DEFAULT_MORSE,
    char_separator=" ",
    word_separator="   ",
    convert_to_upper=True,
    trailing_separator=False,
    handler=ignore_handler,
)


def rune_to_morse(char: str) -> str:
    """Return the default Morse code of a character, or an empty string."""
    return DEFAULT_MORSE.get(_upper(char), "")


def morse_to_rune(code: str) -> str:
    """Return the character for a default Morse code, or an empty string."""
    return _REVERSE_DEFAULT_MORSE.get(code, "")


def to_text(morse: str) -> str:
    """Convert Morse to text with the default converter."""
    return DEFAULT_CONVERTER.to_text(morse)


def to_morse(text: str) -> str:
    """Convert text to Morse with the default converter."""
    return DEFAULT_CONVERTER.to_morse(text)