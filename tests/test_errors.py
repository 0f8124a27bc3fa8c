import pytest

from lfx_auth.errors import (
    ConflictError,
    NotFoundError,
    ServiceError,
    ServiceUnavailableError,
    UnexpectedError,
    ValidationError,
)


def test_message_only():
    errors = [
        ValidationError("URL is required"),
        NotFoundError("URL is required"),
        ConflictError("URL is required"),
        UnexpectedError("URL is required"),
        ServiceUnavailableError("URL is required"),
    ]
    for err in errors:
        assert str(err) == "URL is required"
        assert err.message == "URL is required"
        assert err.errors == ()


def test_caught_as_service_error():
    inner = ValueError("why")
    built = [
        (ValidationError, ValidationError("nope", inner)),
        (NotFoundError, NotFoundError("nope", inner)),
        (ConflictError, ConflictError("nope", inner)),
        (UnexpectedError, UnexpectedError("nope", inner)),
        (ServiceUnavailableError, ServiceUnavailableError("nope", inner)),
    ]
    for error_class, err in built:
        with pytest.raises(ServiceError) as info:
            raise err
        assert type(info.value) is error_class
        assert info.value.message == "nope"
        assert info.value.errors == (inner,)
        assert str(info.value) == "nope: why"


def test_single_wrapped_error():
    inner = ValueError("bad json")
    err = UnexpectedError("failed to parse API response", inner)
    assert str(err) == "failed to parse API response: bad json"
    assert err.errors == (inner,)
    assert err.__cause__ is inner


def test_multiple_wrapped_errors_joined_by_newline():
    first = ValueError("a")
    second = KeyError("b")
    err = ConflictError("conflict", first, second)
    assert str(err) == "conflict: a\n'b'"
    assert err.errors == (first, second)
    assert err.__cause__ is first


def test_none_causes_are_ignored():
    err = ValidationError("invalid", None, None)
    assert str(err) == "invalid"
    assert err.errors == ()
    assert err.__cause__ is None


def test_args_hold_rendered_message():
    inner = RuntimeError("down")
    err = ServiceUnavailableError("service unavailable", inner)
    assert err.args == (str(err),)
    assert str(err).startswith("service unavailable")
    assert str(inner) in str(err)