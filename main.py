# main.py
from __future__ import annotations

import argparse, json
from dataclasses import dataclass
from pathlib import Path

from alphabet_and_plugboard import Plugboard
from debug import COMPONENTS, Debug
from enigma_machine import EnigmaMachine
from utilities import (
    DEFAULT_SETTINGS,
    MachineSettings,
    group,
    is_plain_message,
    parse_positions,
    reflector_names,
    rotor_names,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()

ABOUT = """\
The Enigma machine was a cryptographic device used by the German military
in World War II for secure communication. It uses a combination of rotors,
a plugboard and a reflector to encrypt and decrypt messages.

- Rotors: disks with wiring that scrambles the letters. Each rotor can be
  set to a starting position, which changes the encryption. The historical
  machine had three rotors.
- Plugboard: a panel used to swap pairs of letters before and after they
  pass through the rotors.
- Reflector: sends the signal back through the rotors on a different path,
  so the same settings both encrypt and decrypt.

Historically the rotor order and plugboard were changed daily; operators
received codebooks with the daily settings."""


@dataclass(slots=True)
class Config:
    """Display switches for the console front end."""

    block: int = 5                  # ciphertext group size, 0 = no grouping


# ────────────────────────────────────────────────────────────────────────
#  1. Settings loading
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
    required = {"rotors", "reflector"}
    missing = required - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    if not isinstance(data["rotors"], list) or not data["rotors"]:
        raise ValueError("'rotors' must be a non-empty list of rotor names")

    plugs = data.get("plugs", [])
    if isinstance(plugs, str):
        plugs = plugs.split()
    if not isinstance(plugs, list):
        raise ValueError("'plugs' must be a list of pairs or a string such as \"AB CD\"")
    positions = data.get("positions")
    if positions is not None and not isinstance(positions, str):
        raise ValueError("'positions' must be a string of rotor letters")

    return MachineSettings(
        rotors=[str(r) for r in data["rotors"]],
        reflector=str(data["reflector"]),
        plugs=[str(p) for p in plugs],
        positions=positions,
    )


# ────────────────────────────────────────────────────────────────────────
#  2. EnigmaConsole – the operator-facing operations
# ────────────────────────────────────────────────────────────────────────


class EnigmaConsole:
    """Wraps one machine; every operation answers with a display string.

    Bad operator input never raises and never leaves a half-applied
    setting behind.
    """

    def __init__(self, machine: EnigmaMachine) -> None:
        self.machine = machine
        self.start_positions = machine.positions

    # ––– read-only views ––––––––––––––––––––––––––––––––––––––––––

    @property
    def rotor_positions(self) -> str:
        return self.machine.positions

    def status(self) -> str:
        pairs = " ".join(self.machine.plugboard.pairs) or "(none)"
        return f"Current Rotor Positions: {self.rotor_positions}  Plugboard: {pairs}"

    def about(self) -> str:
        return ABOUT

    # ––– cipher –––––––––––––––––––––––––––––––––––––––––––––––––––

    def encode(self, message: str) -> str:
        if not is_plain_message(message):
            debug.log("console", f"rejected message {message!r}")
            return "Invalid input: Please enter only alphabetic characters."
        return self.machine.encode_decode(message)

    # the machine is reciprocal, decoding is the same operation
    decode = encode

    # ––– settings –––––––––––––––––––––––––––––––––––––––––––––––––

    def set_rotor_positions(self, positions: str) -> str:
        try:
            letters = parse_positions(positions, len(self.machine.rotors))
        except ValueError as exc:
            debug.log("console", str(exc))
            return str(exc)

        self.machine.set_positions(letters)
        self.start_positions = letters
        return "Rotor positions set."

    def update_plugboard(self, tokens: str) -> str:
        text = tokens.strip()
        if not text:
            return "Plugboard unchanged."
        if text == "-":
            self.machine.plugboard = Plugboard()
            return "Plugboard cleared."

        try:
            board = Plugboard.from_tokens(text)
        except ValueError as exc:
            debug.log("console", str(exc))
            return str(exc)

        # swap in the complete board in one step
        self.machine.plugboard = board
        return "Plugboard set."

    def reset(self) -> str:
        """Return the rotors to the last positions the operator set."""
        self.machine.set_positions(self.start_positions)
        return f"Rotor positions reset to {self.start_positions}."


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


HELP = """\
Commands:
  :pos XYZ      set rotor positions (fast rotor first)
  :plug AB CD   replace the plugboard ('-' clears it)
  :show         show rotor positions and plugboard
  :reset        return rotors to the last positions set
  :about        about the machine
Anything else is encoded. Blank line quits."""


def encipher_for_display(console: EnigmaConsole, text: str, block: int) -> str:
    result = console.encode(text)
    return group(result, block) if is_plain_message(text) else result


def handle_line(console: EnigmaConsole, line: str, cfg: Config) -> str:
    """Dispatch one REPL line and return what should be printed."""
    cmd, _, arg = line.strip().partition(" ")
    if cmd == ":pos":
        return console.set_rotor_positions(arg.strip())
    if cmd == ":plug":
        return console.update_plugboard(arg)
    if cmd == ":show":
        return console.status()
    if cmd == ":reset":
        return console.reset()
    if cmd == ":about":
        return console.about()
    if cmd in {":help", ":?"}:
        return HELP
    if cmd.startswith(":"):
        return f"Unknown command {cmd!r}.\n{HELP}"
    return encipher_for_display(console, line.strip(), cfg.block)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encode. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags below.")
    p.add_argument("--rotors", nargs="+", metavar="NAME", help=f"Rotor names, fast rotor first ({' '.join(rotor_names())}). Default: I II III")
    p.add_argument("--reflector", metavar="NAME", help=f"Reflector name ({' '.join(reflector_names())}). Default: B")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", help="Plugboard pairs, e.g. AB CD. Default: AB CD")
    p.add_argument("--positions", metavar="LETTERS", help="Starting rotor positions, fast rotor first. Default: all A")
    p.add_argument("--block", type=int, default=Config().block, help="Group ciphertext in blocks of N letters (0 = off). Default: 5")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Log these components ({', '.join(COMPONENTS)}).")
    p.add_argument("--log-file", metavar="FILE", help="Mirror log output to FILE.")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_config(args.config)

    return MachineSettings(
        rotors=args.rotors or list(DEFAULT_SETTINGS.rotors),
        reflector=args.reflector or DEFAULT_SETTINGS.reflector,
        plugs=list(DEFAULT_SETTINGS.plugs) if args.plugs is None else args.plugs,
        positions=args.positions,
    )


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.log_file:
        Debug.configure(log_to=args.log_file)
    if args.debug:
        debug.enable(*args.debug)

    try:
        machine = settings_from_args(args).build()
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Failed to load machine settings: {exc}")

    console = EnigmaConsole(machine)
    cfg = Config(block=args.block)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(encipher_for_display(console, args.message, cfg.block))
        return

    # interactive REPL ---------------------------------------------------
    print(console.status())
    print("Type :help for commands, blank line to quit.")
    while True:
        try:
            line = input("\n> ")
        except EOFError:
            break
        if not line.strip():
            break
        print(handle_line(console, line, cfg))


if __name__ == "__main__":
    main()
