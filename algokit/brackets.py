"""Bracket balance checking."""

from __future__ import annotations

_OPENING = "([{"
_CLOSING = {")": "(", "]": "[", "}": "{"}


def brackets_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Each character that is not an opening bracket closes the innermost open
    one; ``)``, ``]`` and ``}`` must close a bracket of their own kind.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        expected = _CLOSING.get(char)
        if expected is not None and stack[-1] != expected:
            return False
        stack.pop()
    return not stack