import pytest

from morsebridge.morse import (
    DEFAULT_MORSE,
    Converter,
    NoEncodingError,
    ignore_handler,
    morse_to_rune,
    rune_to_morse,
    to_morse,
    to_text,
)

PRIVET = "ПРИВЕТ"
PRIVET_MORSE = ".--. .-. .. .-- . -"


def test_to_morse_default():
    assert to_morse(PRIVET) == PRIVET_MORSE


def test_to_morse_lowercase_is_uppercased():
    assert to_morse("привет") == PRIVET_MORSE


def test_to_text_default():
    assert to_text(PRIVET_MORSE) == PRIVET


def test_digits_round_trip():
    assert to_text(to_morse("1234567890")) == "1234567890"


def test_punctuation_round_trip():
    text = ".,:?'-/()\""
    assert to_text(to_morse(text)) == text


def test_unknown_characters_are_ignored():
    assert to_morse("Z") == ""
    assert to_morse("Z1") == ".----"


def test_to_text_words_are_separated_by_space():
    assert to_text(".-   -...") == "А Б"


def test_to_text_unknown_code_ignored():
    assert to_text("........ .-") == "А"


def test_rune_to_morse():
    assert rune_to_morse("а") == ".-"
    assert rune_to_morse("Z") == ""


def test_morse_to_rune():
    assert morse_to_rune("-----") == "0"
    assert morse_to_rune("xyz") == ""


def test_hard_and_soft_sign_share_code():
    assert rune_to_morse("Ъ") == rune_to_morse("Ь") == "-..-"
    assert morse_to_rune("-..-") in {"Ъ", "Ь"}


def test_ignore_handler_returns_empty():
    assert ignore_handler(NoEncodingError("x")) == ""


def test_no_encoding_error_message():
    error = NoEncodingError("A")
    assert error.text == "A"
    assert str(error) == 'No encoding for: "A"'


def test_custom_handler_receives_errors():
    seen = []

    def handler(error):
        seen.append(error)
        return "?"

    converter = Converter(DEFAULT_MORSE, handler=handler)
    result = converter.to_morse("ZБ")
    assert [e.text for e in seen] == ["Z"]
    assert result == "? " + DEFAULT_MORSE["Б"]


def test_converter_without_uppercase_ignores_lowercase():
    converter = Converter(DEFAULT_MORSE)
    assert converter.to_morse("е") == ""
    assert converter.to_morse(PRIVET) == PRIVET_MORSE


def test_trailing_separator_kept():
    converter = Converter(DEFAULT_MORSE, trailing_separator=True)
    assert converter.to_morse(PRIVET) == PRIVET_MORSE + " "


def test_custom_char_separator():
    converter = Converter(DEFAULT_MORSE, char_separator="/")
    encoded = converter.to_morse(PRIVET)
    assert encoded == PRIVET_MORSE.replace(" ", "/")
    assert converter.to_text(encoded) == PRIVET


def test_default_word_separator():
    assert Converter(DEFAULT_MORSE).word_separator == "   "


def test_word_separator_uses_custom_space():
    encoding = dict(DEFAULT_MORSE)
    encoding[" "] = "/"
    assert Converter(encoding).word_separator == " / "


def test_explicit_word_separator_kept():
    converter = Converter(DEFAULT_MORSE, word_separator="|")
    assert converter.word_separator == "|"


def test_none_encoding_rejected():
    with pytest.raises(ValueError):
        Converter(None)


def test_empty_input():
    assert to_morse("") == ""
    assert to_text("") == ""