"""Caesar shift over ASCII letters."""

from __future__ import annotations

import string

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase


def _shift_char(char: str, shift: int) -> str:
    for alphabet in (_UPPER, _LOWER):
        index = alphabet.find(char)
        if index >= 0 and len(char) == 1:
            return alphabet[(index + shift) % 26]
    return char


def shift_letters(text: str, shift: int) -> str:
    """Rotate ASCII letters by shift places, keeping case; other characters stay."""
    return "".join(_shift_char(char, shift) for char in text)


def encrypt(text: str, shift: int) -> str:
    """Drop spaces and rotate the letters forward by shift."""
    return shift_letters(text.replace(" ", ""), shift)


def decrypt(text: str, shift: int) -> str:
    """Undo a forward rotation by shift; spaces are kept."""
    return shift_letters(text, 26 - shift % 26)