"""Sequential display labels: A..Z, A1..Z1, ... for points, a..z, a1.. for lines."""
from __future__ import annotations

import string


def _sequential_label(alphabet: str, n: int) -> str:
    letter = alphabet[n % len(alphabet)]
    if n >= len(alphabet):
        return f"{letter}{n // len(alphabet)}"
    return letter


def point_label(n: int) -> str:
    """Label for a new point when the scene already holds n points."""
    return _sequential_label(string.ascii_uppercase, n)


def line_label(n: int) -> str:
    """Label for a new line when the scene already holds n lines."""
    return _sequential_label(string.ascii_lowercase, n)
