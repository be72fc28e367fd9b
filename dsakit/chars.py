"""Classification of single characters."""

from __future__ import annotations

from enum import Enum


class CharKind(Enum):
    """Kind of a character, valued by its human-readable description."""

    LOWERCASE = "A lowercase"
    UPPERCASE = "An Uppercase"
    NUMERIC = "A numberic"


def classify_char(ch: str) -> CharKind | None:
    """Return the kind of an ASCII letter or digit, or None for anything else."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if "a" <= ch <= "z":
        return CharKind.LOWERCASE
    if "A" <= ch <= "Z":
        return CharKind.UPPERCASE
    if "0" <= ch <= "9":
        return CharKind.NUMERIC
    return None