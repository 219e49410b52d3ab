# alphabet_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Sequence
from debug import Debug

debug = Debug()

LETTERS = string.ascii_uppercase
SIZE = len(LETTERS)


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """Stateless A-Z <-> 0-25 conversions shared by every component."""

    letters = LETTERS
    size = SIZE

    # letter → index, uppercase ASCII assumed
    @staticmethod
    def to_index(letter: str) -> int:
        return ord(letter) - ord("A")

    # index → letter, wraps anything produced by modular arithmetic
    @staticmethod
    def to_letter(index: int) -> str:
        return LETTERS[index % SIZE]

    @staticmethod
    def is_letter(ch: str) -> bool:
        return len(ch) == 1 and ch.isascii() and ch.isalpha()


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        # no validation here, see `validate_tokens` / `from_tokens`
        swaps: dict[str, str] = {}
        for a, b in pairs:
            swaps[a] = b
            swaps[b] = a
        self.swaps = swaps

    @classmethod
    def from_tokens(cls, text: str) -> "Plugboard":
        """Build a plugboard from operator text such as ``"AB cd EF"``.

        Raises ValueError with an operator-facing message on the first bad
        token; nothing is built in that case.
        """
        return cls(validate_tokens(text.split()))

    def swap(self, letter: str) -> str:
        mapped = self.swaps.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    @property
    def pairs(self) -> list[str]:
        return sorted(a + b for a, b in self.swaps.items() if a < b)

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"


# ── validation ────────────────────────────────────────────────────
def validate_tokens(tokens: Sequence[str]) -> list[tuple[str, str]]:
    """Turn 2-letter tokens into pairs, rejecting the whole set on any error."""
    pairs: list[tuple[str, str]] = []
    used: set[str] = set()

    for raw in tokens:
        token = raw.upper()
        if len(token) != 2 or not all(Alphabet.is_letter(ch) for ch in token):
            raise ValueError(
                "Invalid input: Plugboard pairs must be exactly 2 letters. "
                f"'{raw}' is invalid."
            )
        a, b = token
        if a == b or a in used or b in used:
            raise ValueError(
                "Invalid plugboard configuration: duplicate letters or "
                f"invalid pair '{a}{b}'."
            )
        pairs.append((a, b))
        used.update((a, b))

    return pairs
