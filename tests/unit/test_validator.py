"""Tests for the retry-until-valid input validator."""
import pytest

from activity_system.validation.results import Ok, ParseError


def test_read_choice_retries_after_malformed_token(make_validator, read_output):
    """Alphabetic input re-prompts until a number arrives."""
    validator = make_validator("abc\nxyz\n3\n")

    assert validator.read_choice("Pick: ", 1, 5) == 3
    output = read_output()
    assert output.count("[ERROR] Invalid input! Try again.") == 2
    assert output.count("Pick: ") == 3


def test_malformed_token_discards_rest_of_line(make_validator):
    """The 9 after a bad token is thrown away with its line."""
    validator = make_validator("abc 9\n2\n")
    assert validator.read_choice("Pick: ", 1, 9) == 2


def test_read_choice_rejects_out_of_range(make_validator, read_output):
    validator = make_validator("0\n6\n1\n")

    assert validator.read_choice("Pick: ", 1, 5) == 1
    assert read_output().count("[ERROR] Choice must be 1-5. Try again.") == 2


def test_out_of_range_keeps_rest_of_line(make_validator, read_output):
    validator = make_validator("7 4\n")
    assert validator.read_choice("Pick: ", 1, 5) == 4
    assert "Pick: 4" in read_output()


@pytest.mark.parametrize("text,expected", [("1\n", 1), ("5\n", 5)])
def test_read_choice_accepts_bounds_immediately(make_validator, read_output, text, expected):
    validator = make_validator(text)
    assert validator.read_choice("Pick: ", 1, 5) == expected
    assert "[ERROR]" not in read_output()


def test_read_range(make_validator, read_output):
    validator = make_validator("99.99\nabc\n100\n")

    assert validator.read_range("Amount: ", 100, 100000) == 100.0
    output = read_output()
    assert "[ERROR] Value must be between 100 and 100000. Try again." in output
    assert "[ERROR] Invalid input! Try again." in output


def test_read_range_upper_bound(make_validator):
    validator = make_validator("100000\n")
    assert validator.read_range("Amount: ", 100.0, 100000.0) == 100000.0


@pytest.mark.parametrize("answer,expected", [
    ("y", True), ("Y", True), ("yes", True), ("YES", True),
    ("n", False), ("no", False), ("NO", False),
])
def test_read_yes_no_accepts(make_validator, answer, expected):
    validator = make_validator(f"{answer}\n")
    assert validator.read_yes_no("Proceed?") is expected


def test_read_yes_no_retries(make_validator, read_output):
    """Unknown words and empty lines are rejected."""
    validator = make_validator("maybe\n\nyes\n")

    assert validator.read_yes_no("Proceed?") is True
    output = read_output()
    assert output.count("[ERROR] Please type 'y' or 'n'.") == 2
    assert output.count("Proceed? (y/n): ") == 3


def test_read_typed_with_types(make_validator):
    validator = make_validator("hello 4.5 x 12\n")
    assert validator.read_typed("Word: ", str) == "hello"
    assert validator.read_typed("Real: ", float) == 4.5
    # "x" fails and takes the rest of the line with it
    validator = make_validator("x 12\n8\n")
    assert validator.read_typed("Int: ", int) == 8


def test_read_typed_with_custom_parser(make_validator, read_output):
    def even(token):
        if token.isdigit() and int(token) % 2 == 0:
            return Ok(int(token))
        return ParseError(token, "Need an even number.")

    validator = make_validator("3\n4\n")
    assert validator.read_typed("Even: ", even) == 4
    assert "[ERROR] Need an even number." in read_output()


def test_end_of_input_propagates(make_validator):
    validator = make_validator("abc\n")
    with pytest.raises(EOFError):
        validator.read_choice("Pick: ", 1, 5)


def test_inverted_bounds_fail_before_reading(make_validator, read_output):
    validator = make_validator("")
    with pytest.raises(ValueError):
        validator.read_choice("Pick: ", 5, 1)
    assert read_output() == ""


def test_pause_waits_for_enter(make_validator, read_output):
    validator = make_validator("2 leftover\n\n3\n")
    assert validator.read_choice("Pick: ", 1, 5) == 2
    validator.pause()
    assert validator.read_choice("Pick: ", 1, 5) == 3
    assert "Press Enter to continue..." in read_output()
