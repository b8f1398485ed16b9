import pytest

from fallible import success, failure, unwrap, UnwrapError


def test_unwrap_success():
    assert unwrap(success(1)) == 1
    assert success(1).unwrap() == 1


def test_unwrap_exception_failure():
    error = KeyError("missing")

    with pytest.raises(KeyError) as exc_info:
        unwrap(failure(error))

    assert exc_info.value is error


def test_unwrap_non_exception_failure():
    with pytest.raises(UnwrapError) as exc_info:
        unwrap(failure(404))

    assert exc_info.value.error == 404
    assert isinstance(exc_info.value, ValueError)
    assert "Attempted to unwrap Failure(404)" in exc_info.value.__notes__


def test_unwrap_is_explicit():
    result = failure("error").map(lambda x: x + 1)

    assert result.with_default(0) == 0
    with pytest.raises(UnwrapError):
        result.unwrap()
