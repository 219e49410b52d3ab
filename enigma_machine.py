# enigma_machine.py  ───────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from alphabet_and_plugboard import Alphabet, Plugboard
from debug import Debug
from rotor_and_reflector import Reflector, Rotor

debug = Debug()

# only a three-rotor stack has the middle-rotor double step
DOUBLE_STEP_TOPOLOGY = {3: 1}


class EnigmaMachine:
    def __init__(
        self,
        rotor_configurations: Sequence[tuple[str, str]],
        reflector_wiring: str,
        plugboard_pairs: Sequence[str | tuple[str, str]] = (),
    ) -> None:
        if not rotor_configurations:
            raise ValueError("EnigmaMachine needs at least one rotor")

        # index 0 is the fast (rightmost) rotor
        self.rotors = [Rotor(wiring, notch) for wiring, notch in rotor_configurations]
        self.reflector = Reflector(reflector_wiring)
        self.plugboard = Plugboard(plugboard_pairs)

        # (trigger, target): target steps when trigger hits its notch
        self.carry_rules: list[tuple[int, int]] = [
            (i, i + 1) for i in range(len(self.rotors) - 1)
        ]
        self.double_step_rotor: int | None = DOUBLE_STEP_TOPOLOGY.get(len(self.rotors))

    # ── positions ───────────────────────────────────────────────

    @property
    def positions(self) -> str:
        """Window letters, fast rotor first."""
        return "".join(rotor.window for rotor in self.rotors)

    def set_positions(self, letters: str) -> None:
        """Move every rotor to its window letter, fast rotor first."""
        for rotor, letter in zip(self.rotors, letters):
            rotor.set_position(letter)

    # ── stepping logic  ─────────────────────────────────────────

    def rotate_rotors(self) -> None:
        """Advance the stack by one key-press."""
        stepping = {0}

        # --- middle-rotor double step -------------------------
        # sitting on its own notch, the middle rotor moves again and
        # drags the slow rotor with it
        d = self.double_step_rotor
        if d is not None and self.rotors[d].at_notch:
            stepping.update((d, d + 1))

        # --- carry cascade, fast to slow ----------------------
        for i, rotor in enumerate(self.rotors):
            if i not in stepping:
                continue
            if rotor.rotate():
                stepping.update(t for s, t in self.carry_rules if s == i)

        debug.log("stepping", f"stepped {sorted(stepping)} -> {self.positions}")

    # ── encipher ────────────────────────────────────────────────

    def encode_letter(self, letter: str) -> str:
        """Run one uppercase letter through the machine, then step."""
        signal = self.plugboard.swap(letter)

        for rotor in self.rotors:
            signal = rotor.encode_forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.encode_backward(signal)

        # positions used above are the pre-step ones
        self.rotate_rotors()

        out = self.plugboard.swap(signal)
        debug.log("encipher", f"{letter}->{out}")
        return out

    def encode_decode(self, text: str) -> str:
        """Encipher (or decipher) *text*, dropping anything but letters."""
        return "".join(
            self.encode_letter(ch)
            for ch in text.upper()
            if Alphabet.is_letter(ch)
        )

    def __repr__(self) -> str:
        return f"<EnigmaMachine pos={self.positions} {self.plugboard!r}>"
