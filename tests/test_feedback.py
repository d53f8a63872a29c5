import pytest

from vaajoor_solver.errors import MalformedFeedback
from vaajoor_solver.feedback import Classification, Guess, Letter


def test_build_aligns_letters_with_codes():
    guess = Guess.build("crate", ["g", "g", "g", "r", "g"])

    assert [c.position for c in guess.letters] == [0, 1, 2, 3, 4]
    assert "".join(c.letter for c in guess.letters) == "crate"
    assert guess.letters[3] == Letter(3, Classification.ABSENT, "t")
    assert guess.codes == "gggrg"


def test_build_accepts_code_string_and_enum_members():
    from_string = Guess.build("crane", "gyrgg")
    from_enum = Guess.build("crane", [
        Classification.CORRECT, Classification.PRESENT, Classification.ABSENT,
        Classification.CORRECT, Classification.CORRECT,
    ])
    assert from_string == from_enum


def test_unknown_code_is_malformed():
    with pytest.raises(MalformedFeedback):
        Guess.build("crane", ["g", "g", "x", "r", "y"])


@pytest.mark.parametrize("word,codes", [
    ("crane", ["g", "g", "g", "g"]),
    ("crane", ["g"] * 6),
    ("cran", ["g"] * 5),
    ("cranes", ["g"] * 5),
])
def test_wrong_shape_is_malformed(word, codes):
    with pytest.raises(MalformedFeedback):
        Guess.build(word, codes)


def test_malformed_feedback_is_a_value_error():
    with pytest.raises(ValueError):
        Guess.build("crane", "ggg")


def test_is_fully_solved():
    assert Guess.build("crane", "ggggg").is_fully_solved()
    assert not Guess.build("crane", "ggggy").is_fully_solved()


def test_has_correct_at():
    guess = Guess.build("crate", "gyrrg")
    assert guess.has_correct_at(0)
    assert guess.has_correct_at(4)
    assert not guess.has_correct_at(1)
    assert not guess.has_correct_at(3)


def test_was_correct_for_checks_any_position():
    guess = Guess.build("sassy", "grrgr")
    assert guess.was_correct_for("s")
    assert not guess.was_correct_for("a")
    assert not guess.was_correct_for("y")
    assert not guess.was_correct_for("z")


def test_guess_is_immutable():
    guess = Guess.build("crane", "ggggg")
    with pytest.raises(AttributeError):
        guess.word = "other"
