# utilities.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from alphabet_and_plugboard import Alphabet, validate_tokens
from enigma_machine import EnigmaMachine

# ────────────────────────────────────────────────────────────────────────
#  0. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Historical rotors (wiring, notch) ------------------------------------
base_rotors: Dict[str, Tuple[str, str]] = {
    "I":   ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    "II":  ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    "IV":  ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    "V":   ("VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
}

# Historical reflectors -------------------------------------------------
base_reflectors: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

# Build the lookup dicts -------------------------------------------------

rotor_dict: Dict[str, Tuple[str, str]] = {}
for name, wheel in base_rotors.items():
    rotor_dict[name] = rotor_dict[name.lower()] = wheel  # uppercase + alias

reflector_dict: Dict[str, str] = {}
for name, wiring in base_reflectors.items():
    reflector_dict[name] = reflector_dict[name.lower()] = wiring


def rotor_names() -> List[str]:
    return list(base_rotors)          # historical order I..V


def reflector_names() -> List[str]:
    return sorted(base_reflectors)


# ────────────────────────────────────────────────────────────────────────
#  1. Machine settings
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class MachineSettings:
    """Named wheels plus start state; everything needed to rebuild a machine."""

    rotors: List[str]               # fast rotor first
    reflector: str
    plugs: List[str] = field(default_factory=list)
    positions: str | None = None    # None → every rotor at 'A'

    def build(self) -> EnigmaMachine:
        unknown = [r for r in self.rotors if r not in rotor_dict]
        if unknown:
            raise ValueError(
                f"Unknown rotor(s) {', '.join(unknown)}. "
                f"Expected any of {' '.join(rotor_names())}"
            )
        if self.reflector not in reflector_dict:
            raise ValueError(
                f"Unknown reflector {self.reflector!r}. "
                f"Expected one of {' '.join(reflector_names())}"
            )

        machine = EnigmaMachine(
            [rotor_dict[r] for r in self.rotors],
            reflector_dict[self.reflector],
            validate_tokens(self.plugs),
        )
        if self.positions is not None:
            machine.set_positions(parse_positions(self.positions, len(machine.rotors)))
        return machine


DEFAULT_SETTINGS = MachineSettings(
    rotors=["I", "II", "III"],
    reflector="B",
    plugs=["AB", "CD"],
)


def parse_positions(raw: str, count: int) -> str:
    """Upper-case and check a rotor-position string, fast rotor first.

    Raises ValueError carrying the operator-facing message.
    """
    # one letter per character, even where upper() would expand it
    letters = "".join(ch.upper()[0] for ch in raw)
    if len(letters) != count:
        raise ValueError(f"Invalid input: Expected {count} positions, got {len(letters)}.")
    for ch in letters:
        if not Alphabet.is_letter(ch):
            raise ValueError(f"Invalid input: {ch} is not an alphabetic character.")
    return letters


# ────────────────────────────────────────────────────────────────────────
#  2. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def is_plain_message(msg: str) -> bool:
    """Only letters and spaces are accepted from the operator."""
    return all(Alphabet.is_letter(ch) or ch == " " for ch in msg)


def group(text: str, block: int) -> str:
    """Split *text* into display blocks, e.g. ``EAYHM AXSNN``."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


__all__ = [
    "DEFAULT_SETTINGS",
    "MachineSettings",
    "group",
    "is_plain_message",
    "parse_positions",
    "reflector_dict",
    "reflector_names",
    "rotor_dict",
    "rotor_names",
]
