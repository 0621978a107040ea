import pytest

from delivery.errors import (
    DomainError,
    ObjectNotFoundError,
    ValueIsInvalidError,
    ValueIsOutOfRangeError,
    ValueIsRequiredError,
    VersionIsInvalidError,
)


def test_object_not_found_without_cause():
    err = ObjectNotFoundError("order", 42)
    assert str(err) == "object not found: 42"
    assert err.cause is None


def test_object_not_found_with_cause():
    cause = RuntimeError("missing row")
    err = ObjectNotFoundError("order", "abc", cause)
    text = str(err)
    assert text.startswith("object not found")
    assert "order" in text
    assert "abc" in text
    assert text.endswith("(cause: missing row)")
    assert err.__cause__ is cause


def test_value_is_invalid_messages():
    plain = ValueIsInvalidError("speed")
    assert str(plain).startswith("value is invalid")
    assert str(plain).endswith("speed")
    caused = ValueIsInvalidError("speed", ValueError("negative"))
    assert str(caused).startswith(str(plain))
    assert "negative" in str(caused)


def test_value_is_out_of_range_message():
    err = ValueIsOutOfRangeError("Location.x", 11, 1, 10)
    assert str(err) == "value is invalid: 11 is Location.x, min value is 1, max value is 10"
    assert (err.value, err.min, err.max) == (11, 1, 10)


def test_value_is_out_of_range_sanitizes_newlines():
    err = ValueIsOutOfRangeError("name", "a\nb", 1, 5)
    assert "\n" not in str(err)
    assert "a b" in str(err)


def test_value_is_out_of_range_with_cause():
    err = ValueIsOutOfRangeError("weight", 0, 1, 10, ValueError("too light"))
    assert "too light" in str(err)
    assert err.cause.args == ("too light",)


def test_value_is_required_with_cause():
    err = ValueIsRequiredError("name", RuntimeError("boom"))
    assert str(err) == "value is required: name (cause: boom)"


def test_version_is_invalid_messages():
    plain = VersionIsInvalidError("courier")
    assert str(plain).startswith("version is invalid")
    assert "courier" in str(plain)
    caused = VersionIsInvalidError("courier", RuntimeError("stale"))
    assert "stale" in str(caused)


@pytest.mark.parametrize(
    "err",
    [
        ObjectNotFoundError("order", 1),
        ValueIsInvalidError("x"),
        ValueIsOutOfRangeError("x", 0, 1, 10),
        ValueIsRequiredError("x"),
        VersionIsInvalidError("x"),
    ],
)
def test_errors_can_be_raised_and_caught_as_domain_error(err):
    with pytest.raises(DomainError) as info:
        raise err
    assert info.value is err


def test_out_of_range_is_distinct_from_invalid():
    err = ValueIsOutOfRangeError("x", 0, 1, 10)
    assert err.param_name == "x"
    assert err.value == 0
    assert isinstance(err, DomainError)
    assert not isinstance(err, ValueIsInvalidError)
    assert str(err) == "value is invalid: 0 is x, min value is 1, max value is 10"