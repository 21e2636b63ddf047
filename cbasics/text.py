"""Find a word in a text and replace its first occurrence."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

_SAMPLE_TEXT = (
    "14.2. Formatted input. Similar to the printf family of functions for "
    "formatted output, the C library has a series of functions for formatted "
    "input: fscanf for input from an arbitrary stream, scanf for stdin, and "
    "sscanf from a string. For example, the following would read a line of "
    "three double values from stdin:"
)
_SAMPLE_WORD = "sscanf"
_SAMPLE_REPLACEMENT = ""


def find_word(text: str, word: str) -> int | None:
    """Return the index of the first occurrence of ``word`` in ``text``, or None."""
    index = text.find(word)
    return index if index >= 0 else None


def replace_word(text: str, word: str, replacement: str) -> str:
    """Replace the first occurrence of ``word`` in ``text`` with ``replacement``.

    An empty ``word`` replaces the whole text. Raises ValueError when the
    word does not occur.
    """
    index = find_word(text, word)
    if index is None:
        raise ValueError(f"{word!r} not found in {text!r}")
    if not word:
        return replacement
    return text[:index] + replacement + text[index + len(word):]


def main(argv: Sequence[str] | None = None) -> int:
    """Replace a word in a text and report the lengths before and after."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("text", nargs="?", default=_SAMPLE_TEXT)
    parser.add_argument("word", nargs="?", default=_SAMPLE_WORD)
    parser.add_argument("replacement", nargs="?", default=_SAMPLE_REPLACEMENT)
    args = parser.parse_args(argv)

    try:
        result = replace_word(args.text, args.word, args.replacement)
    except ValueError:
        print(f"Could not replace the word '{args.word}' in '{args.text}'.")
        return 0

    print(f"\nOriginal: '{args.text}'\nNew: '{result}'")
    if args.word:
        print(f"\nReplacement word: '{args.word}'")
    else:
        print(f"\nReplacing the whole string with '{args.replacement}'")
    print(f"Original string length: {len(args.text)}\n")
    print(f"New string length: {len(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())