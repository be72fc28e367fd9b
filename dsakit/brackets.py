"""Bracket checks built on a stack of characters."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


def is_valid_parenthesis(text: str) -> bool:
    """Report whether every bracket is closed by its matching kind, in order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def has_redundant_brackets(text: str) -> bool:
    """Report whether some pair of parentheses encloses no operator.

    Raises ValueError on a ')' that has no matching '('.
    """
    stack: list[str] = []
    for ch in text:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while True:
                if not stack:
                    raise ValueError("unmatched ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                redundant = False
            if redundant:
                return True
    return False


def min_bracket_reversals(text: str) -> int:
    """Return the fewest brace flips that balance a string of '{' and '}'.

    Characters other than '{' count as '}'. Raises ValueError when the
    length is odd, since no number of flips can balance it then.
    """
    if len(text) % 2:
        raise ValueError("a string of odd length cannot be balanced")
    stack: list[str] = []
    for ch in text:
        if ch != "{" and stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(ch)
    opens = sum(1 for ch in stack if ch == "{")
    closes = len(stack) - opens
    return (closes + 1) // 2 + (opens + 1) // 2