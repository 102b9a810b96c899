"""Letter sequences for alphabetic paragraph labels.

Labels use bijective base-26 (spreadsheet-column style): there is no zero
digit, so ``z`` is followed by ``aa`` rather than ``ba``.
"""

from __future__ import annotations

import string

_ALPHABET = string.ascii_lowercase


def to_letters(n: int) -> str:
    """Convert a positive integer to its letter sequence.

    Args:
        n: 1-based ordinal.

    Returns:
        Lowercase letters, e.g. ``1 -> "a"``, ``27 -> "aa"``, ``53 -> "ba"``.

    Raises:
        ValueError: If ``n`` is not positive.
    """

    if n <= 0:
        raise ValueError(f"letter ordinal must be positive, got {n}")

    out = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        out = _ALPHABET[rem] + out
    return out

