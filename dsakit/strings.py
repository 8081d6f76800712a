"""String problems: Roman numerals, big-number arithmetic, sorting and rotation."""

from __future__ import annotations

from collections import Counter
from enum import Flag, auto
from math import factorial
from string import ascii_lowercase

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
_ROMAN_DIGITS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_VOWELS = frozenset("aeiouAEIOU")
_MATCH_PLACES = 2


class Rotation(Flag):
    """Which rotations of a string produced another one."""

    NONE = 0
    CLOCKWISE = auto()
    ANTICLOCKWISE = auto()


def defang_ip(address: str) -> str:
    """Replace every ``.`` with ``[.]``."""
    return address.replace(".", "[.]")


def factorial_digits(n: int) -> list[int]:
    """Return the decimal digits of ``n!``, most significant first."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return [int(digit) for digit in str(factorial(n))]


def int_to_roman(n: int) -> str:
    """Write ``n`` in Roman numerals; numbers below one give ``""``."""
    parts = []
    for value, symbol in _ROMAN:
        count, n = divmod(n, value) if n > 0 else (0, n)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(text: str) -> int:
    """Read a Roman numeral, a smaller digit before a larger one subtracting."""
    if not text:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_DIGITS[char] for char in text]
    except KeyError as error:
        raise ValueError(f"not a Roman digit: {error.args[0]!r}") from None
    total = values[-1]
    for value, following in zip(values, values[1:]):
        total += -value if value < following else value
    return total


def _digit(char: str) -> int:
    if char not in "0123456789":
        raise ValueError(f"not a decimal digit: {char!r}")
    return int(char)


def add_strings(num1: str, num2: str) -> str:
    """Add two decimal numbers given as digit strings.

    The result keeps the width of the longer input, so leading zeros stay.
    """
    longer, shorter = (num1, num2) if len(num1) >= len(num2) else (num2, num1)
    shorter = shorter.rjust(len(longer), "0")
    digits = []
    carry = 0
    for a, b in zip(reversed(longer), reversed(shorter)):
        carry, digit = divmod(_digit(a) + _digit(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def longest_palindrome_length(text: str) -> int:
    """Return the length of the longest palindrome the characters can form.

    Letter case matters.
    """
    counts = Counter(text).values()
    paired = sum(count - count % 2 for count in counts)
    return paired + int(any(count % 2 for count in counts))


def min_chars_for_palindrome(text: str) -> int:
    """Return how few characters must be added at the front to make a palindrome."""
    # None separates the string from its reverse and matches no character.
    sequence: list[str | None] = [*text, None, *reversed(text)]
    lps = [0] * len(sequence)
    pre, suf = 0, 1
    while suf < len(sequence):
        if sequence[pre] == sequence[suf]:
            lps[suf] = pre + 1
            pre += 1
            suf += 1
        elif pre == 0:
            suf += 1
        else:
            pre = lps[pre - 1]
    return len(text) - lps[-1]


def is_pangram(text: str) -> bool:
    """Tell whether every letter of the alphabet occurs, ignoring case."""
    return set(ascii_lowercase) <= set(text.lower())


def sort_letters(text: str) -> str:
    """Sort a string of lower-case letters."""
    counts = Counter(text)
    stray = set(counts) - set(ascii_lowercase)
    if stray:
        raise ValueError(f"not lower-case letters: {''.join(sorted(stray))!r}")
    return "".join(letter * counts[letter] for letter in ascii_lowercase)


def _word_position(word: str) -> int:
    if not word or not word[-1].isdigit():
        raise ValueError(f"word has no trailing position digit: {word!r}")
    return int(word[-1])


def sort_sentence(text: str) -> str:
    """Rebuild a sentence whose words carry their position as a trailing digit."""
    words = text.split(" ")
    positions = [_word_position(word) for word in words]
    if len(set(positions)) != len(positions):
        raise ValueError("two words share a position")
    ordered = sorted(zip(positions, words))
    return " ".join(word[:-1] for _, word in ordered)


def sort_vowels(text: str) -> str:
    """Sort the vowels among themselves, capitals first, leaving the rest in place."""
    vowels = iter(sorted(char for char in text if char in _VOWELS))
    return "".join(next(vowels) if char in _VOWELS else char for char in text)


def rotate_clockwise(text: str, places: int) -> str:
    """Move the last ``places`` characters to the front."""
    if not text:
        return text
    k = places % len(text)
    return text[len(text) - k:] + text[:len(text) - k]


def rotate_anticlockwise(text: str, places: int) -> str:
    """Move the first ``places`` characters to the end."""
    if not text:
        return text
    k = places % len(text)
    return text[k:] + text[:k]


def rotation_match(original: str, candidate: str) -> Rotation:
    """Tell which two-place rotations of ``original`` give ``candidate``."""
    if len(original) != len(candidate):
        raise ValueError("strings differ in length and cannot be compared")
    result = Rotation.NONE
    if rotate_clockwise(original, _MATCH_PLACES) == candidate:
        result |= Rotation.CLOCKWISE
    if rotate_anticlockwise(original, _MATCH_PLACES) == candidate:
        result |= Rotation.ANTICLOCKWISE
    return result