"""Text helpers for briefings: wrapping, list joining, article choice."""

import textwrap
from typing import Sequence

# Column width and per-line indent of every wrapped paragraph
WRAP_WIDTH = 80
INDENT = "    "

VOWELS = frozenset("aeiou")


def wrap(text: str, width: int = WRAP_WIDTH, indent: str = INDENT) -> str:
    """Wrap text at whitespace only, indenting every line.

    Words are never split, even when longer than the line.
    """
    return textwrap.fill(
        text,
        width=width,
        initial_indent=indent,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )


def indefinite_article(word: str) -> str:
    """Return "an" when the word starts with a vowel letter, else "a"."""
    return "an" if word[:1].lower() in VOWELS else "a"


def age_article(age: int) -> str:
    """Article for "<age>-year-old" as it is spoken.

    >>> age_article(18)
    'an'
    >>> age_article(21)
    'a'
    """
    spoken_vowel = str(age).startswith("8") or age in (11, 18)
    return "an" if spoken_vowel else "a"


def join_list(items: Sequence[str]) -> str:
    """Join items as English prose.

    >>> join_list(["cooking", "welding", "fishing"])
    'cooking, welding, and fishing'
    >>> join_list(["cooking", "welding"])
    'cooking and welding'
    """
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"
