# rotor_and_reflector.py
from __future__ import annotations

from alphabet_and_plugboard import Alphabet
from debug import Debug

debug = Debug()


def _check_wiring(wiring: str, what: str) -> None:
    if sorted(wiring) != list(Alphabet.letters):
        raise ValueError(f"{what} wiring must be a permutation of A-Z, got {wiring!r}")


class Rotor:
    def __init__(self, wiring: str, notch: str) -> None:
        _check_wiring(wiring, "Rotor")
        if len(notch) != 1 or notch not in Alphabet.letters:
            raise ValueError(f"Notch must be a single letter A-Z, got {notch!r}")

        self.wiring = wiring
        # letter → slot in `wiring`, keeps encode_backward O(1)
        self.reverse_lookup: dict[str, int] = {c: i for i, c in enumerate(wiring)}
        self.notch = notch
        self.position = 0

    # ── positioning ───────────────────────────────────────────────
    def set_position(self, letter: str) -> None:
        self.position = Alphabet.to_index(letter)

    @property
    def window(self) -> str:
        """Letter currently showing in the rotor window."""
        return Alphabet.to_letter(self.position)

    @property
    def at_notch(self) -> bool:
        return self.window == self.notch

    # ── stepping ──────────────────────────────────────────────────
    def rotate(self) -> bool:
        """Advance one and return True when the new position is the notch."""
        self.position = (self.position + 1) % Alphabet.size
        hit = self.at_notch
        debug.log("rotor", f"pos {self.window}, notch_hit={hit}")
        return hit

    # ── signal paths ──────────────────────────────────────────────
    def encode_forward(self, letter: str) -> str:
        shifted = (Alphabet.to_index(letter) + self.position) % Alphabet.size
        return self.wiring[shifted]

    def encode_backward(self, letter: str) -> str:
        # a miss here means unfiltered input reached the rotor stack
        index = self.reverse_lookup[letter]
        return Alphabet.to_letter(index - self.position + Alphabet.size)

    def __repr__(self) -> str:
        return f"<Rotor pos={self.window} notch={self.notch}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        _check_wiring(wiring, "Reflector")
        self.wiring = wiring

        # a non-involutive reflector still works, it just stops being reciprocal
        if not self.is_involution:
            debug.warn("reflector", f"wiring {wiring} is not an involution")

    @property
    def is_involution(self) -> bool:
        """True if wiring[wiring[i]] == alphabet[i] for all i."""
        return all(
            self.wiring[Alphabet.to_index(c)] == Alphabet.to_letter(i)
            for i, c in enumerate(self.wiring)
        )

    def reflect(self, letter: str) -> str:
        mapped = self.wiring[Alphabet.to_index(letter)]
        debug.log("reflector", f"{letter}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
