import pytest

from alphabet_and_plugboard import LETTERS, Alphabet, Plugboard, validate_tokens


def test_alphabet_round_trip():
    assert Alphabet.to_index("A") == 0
    assert Alphabet.to_index("Z") == 25
    assert [Alphabet.to_letter(Alphabet.to_index(c)) for c in LETTERS] == list(LETTERS)


def test_alphabet_wraps_out_of_range_indices():
    assert Alphabet.to_letter(26) == "A"
    assert Alphabet.to_letter(27) == "B"
    assert Alphabet.to_letter(-1) == "Z"


def test_is_letter_is_ascii_only():
    assert Alphabet.is_letter("q")
    assert not Alphabet.is_letter("é")
    assert not Alphabet.is_letter(" ")
    assert not Alphabet.is_letter("AB")


def test_plugboard_involution():
    pb = Plugboard([("A", "B"), ("C", "D"), ("X", "Q")])
    for c in LETTERS:
        assert pb.swap(pb.swap(c)) == c
    assert pb.swap("A") == "B"
    assert pb.swap("Q") == "X"
    # unconfigured letters pass straight through
    assert pb.swap("E") == "E"
    assert pb.swap("Z") == "Z"


def test_plugboard_is_symmetric():
    pb = Plugboard(["MN", "RT"])
    for a, b in pb.swaps.items():
        assert pb.swaps[b] == a


def test_empty_plugboard_is_identity():
    pb = Plugboard()
    assert all(pb.swap(c) == c for c in LETTERS)
    assert pb.pairs == []


def test_pairs_are_sorted_tokens():
    pb = Plugboard([("Z", "A"), ("D", "C")])
    assert pb.pairs == ["AZ", "CD"]
    assert repr(pb) == "<Plugboard AZ CD>"


def test_from_tokens_uppercases():
    pb = Plugboard.from_tokens("ab  Cd\tef")
    assert pb.pairs == ["AB", "CD", "EF"]


def test_validate_tokens_rejects_self_pair():
    with pytest.raises(ValueError, match="invalid pair 'AA'"):
        validate_tokens(["AA"])


def test_validate_tokens_rejects_reused_letter():
    with pytest.raises(ValueError, match="duplicate letters or invalid pair 'AC'"):
        validate_tokens(["AB", "AC"])


@pytest.mark.parametrize("token", ["A", "ABC", "A1", "?!"])
def test_validate_tokens_rejects_malformed(token):
    with pytest.raises(ValueError, match="must be exactly 2 letters"):
        validate_tokens([token])


def test_from_tokens_builds_nothing_on_error():
    with pytest.raises(ValueError):
        Plugboard.from_tokens("AB CD DE")
