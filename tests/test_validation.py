import pytest

from validation import ErrorKind, ValidationError, check, validate


def test_validate_parses_comma_separated_reference_string():
    pages, frame_count = validate("1, 9, 3, 5, 6, 3, 2, 6", 3)
    assert pages == [1, 9, 3, 5, 6, 3, 2, 6]
    assert frame_count == 3


def test_validate_accepts_split_tokens():
    pages, frame_count = validate(["0", 4, " 7 "], "5")
    assert pages == [0, 4, 7]
    assert frame_count == 5


@pytest.mark.parametrize(
    "raw_pages",
    ["1, a, 3", "1,,3", "1, 2,", "3abc", "1.5", "1_000", "+2"],
)
def test_invalid_tokens_fail_with_invalid_format(raw_pages):
    with pytest.raises(ValidationError) as excinfo:
        validate(raw_pages, 3)
    assert excinfo.value.kind is ErrorKind.INVALID_FORMAT
    assert "non-numeric" in str(excinfo.value)


def test_negative_reference_fails():
    with pytest.raises(ValidationError) as excinfo:
        validate("1, -2, 3", 3)
    assert excinfo.value.kind is ErrorKind.NEGATIVE_REFERENCE


@pytest.mark.parametrize("raw_pages", ["", "   ", ",".join(["1"] * 11)])
def test_length_out_of_range(raw_pages):
    with pytest.raises(ValidationError) as excinfo:
        validate(raw_pages, 3)
    assert excinfo.value.kind is ErrorKind.LENGTH_OUT_OF_RANGE


@pytest.mark.parametrize("frame_count", [2, 6, 0, -1])
def test_frame_count_out_of_range(frame_count):
    with pytest.raises(ValidationError) as excinfo:
        validate("1, 2, 3", frame_count)
    assert excinfo.value.kind is ErrorKind.FRAME_COUNT_OUT_OF_RANGE
    assert str(excinfo.value) == "Error: Frame count must be between 3 and 5."


@pytest.mark.parametrize("frame_count", [3.5, "4.5", "four", True])
def test_non_integer_frame_count_is_rejected_not_truncated(frame_count):
    with pytest.raises(ValidationError) as excinfo:
        validate("1, 2, 3", frame_count)
    assert excinfo.value.kind is ErrorKind.INVALID_FORMAT


def test_integer_valued_float_frame_count_is_accepted():
    assert validate("1", 4.0) == ([1], 4)


def test_boundaries_validate():
    assert validate(",".join(str(i) for i in range(10)), 3) == (list(range(10)), 3)
    assert validate("7", 5) == ([7], 5)


def test_first_failing_rule_wins():
    # Bad format beats negative, length and frame count
    assert check("a, -1", 9).kind is ErrorKind.INVALID_FORMAT
    # Negative beats length and frame count
    assert check(",".join(["-1"] * 11), 9).kind is ErrorKind.NEGATIVE_REFERENCE
    # Length beats frame count
    assert check(",".join(["1"] * 11), 9).kind is ErrorKind.LENGTH_OUT_OF_RANGE


def test_check_returns_none_for_valid_input():
    assert check("1, 2", 3) is None


def test_validation_error_is_a_value_error():
    error = check("1", 2)
    assert isinstance(error, ValueError)
    assert error.message == str(error)


def test_validate_is_idempotent():
    assert validate("4, 4, 2", "3") == validate("4, 4, 2", "3")
