import logging

import pytest

from alphabet_and_plugboard import LETTERS
from rotor_and_reflector import Reflector, Rotor
from utilities import base_reflectors, base_rotors


def make_rotor(name="I"):
    return Rotor(*base_rotors[name])


def test_reverse_lookup_inverts_wiring():
    rotor = make_rotor("II")
    for i, c in enumerate(rotor.wiring):
        assert rotor.reverse_lookup[c] == i


def test_forward_at_position_zero_is_wiring():
    rotor = make_rotor("I")
    assert "".join(rotor.encode_forward(c) for c in LETTERS) == rotor.wiring


def test_forward_applies_position_offset():
    rotor = make_rotor("I")
    rotor.set_position("B")
    # 'A' enters slot 1
    assert rotor.encode_forward("A") == "K"
    assert rotor.encode_forward("Z") == "E"


@pytest.mark.parametrize("name", list(base_rotors))
def test_backward_inverts_forward_at_every_position(name):
    rotor = make_rotor(name)
    for p in LETTERS:
        rotor.set_position(p)
        for c in LETTERS:
            assert rotor.encode_backward(rotor.encode_forward(c)) == c
            assert rotor.encode_forward(rotor.encode_backward(c)) == c


def test_backward_lookup_miss_is_an_error():
    with pytest.raises(KeyError):
        make_rotor().encode_backward("a")


def test_notch_hit_only_when_reaching_notch():
    rotor = make_rotor("I")          # notch Q
    rotor.position = 15              # 'P'
    assert rotor.rotate() is True
    assert rotor.window == "Q"

    for start in range(26):
        if start == 15:
            continue
        rotor.position = start
        assert rotor.rotate() is False


def test_rotate_wraps_around():
    rotor = make_rotor("III")
    rotor.set_position("Z")
    rotor.rotate()
    assert rotor.position == 0
    assert rotor.window == "A"


def test_at_notch():
    rotor = make_rotor("II")         # notch E
    rotor.set_position("E")
    assert rotor.at_notch
    rotor.set_position("F")
    assert not rotor.at_notch


@pytest.mark.parametrize(
    "wiring, notch",
    [
        ("ABC", "A"),
        ("A" * 26, "A"),
        (LETTERS, "AB"),
        (LETTERS, "1"),
    ],
)
def test_rotor_rejects_bad_construction(wiring, notch):
    with pytest.raises(ValueError):
        Rotor(wiring, notch)


def test_reflector_b_is_involution_without_fixed_points():
    refl = Reflector(base_reflectors["B"])
    assert refl.is_involution
    for c in LETTERS:
        assert refl.reflect(c) != c
        assert refl.reflect(refl.reflect(c)) == c


def test_reflector_accepts_non_involution(caplog):
    shifted = LETTERS[1:] + LETTERS[0]
    with caplog.at_level(logging.WARNING, logger="ENIGMA"):
        refl = Reflector(shifted)
    assert any(
        r.levelno == logging.WARNING and "is not an involution" in r.getMessage()
        for r in caplog.records
    )
    assert not refl.is_involution
    assert refl.reflect("A") == "B"


def test_reflector_rejects_non_permutation():
    with pytest.raises(ValueError):
        Reflector("A" * 26)
