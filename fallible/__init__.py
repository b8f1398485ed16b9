"""Defines the result type and its variants: success and failure.

The Result type is a union type of Success and Failure, where Success contains a
successful value and Failure contains an error.

It is mostly meant to be used as a return type for functions that can fail, but
where we want to be sure to handle all cases in the calling code and not raise
unhandled exceptions.

With a type checker, we can ensure that all possible success and failure cases are
dealt with.

Example:
    .. code-block:: python

        from typing import assert_never

        from fallible import Result, Success, Failure, failure, success

        def parse_port(text: str) -> Result[int, str]:
            if not text.isdigit():
                return failure(f"{text!r} is not a number")
            return success(int(text))

        port = (
            parse_port("8080")
            .and_then(lambda p: success(p) if p < 65536 else failure("out of range"))
            .with_default(80)
        )

        match parse_port("http"):
            case Success(value):
                print(value)
            case Failure(error):
                print(error)
            case other:
                assert_never(other)
"""

from ._exceptions import UnwrapError
from ._result import (
    Failure,
    Result,
    Success,
    failure,
    is_failure,
    is_failure_type,
    is_success,
    success,
    unwrap,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "UnwrapError",
    "failure",
    "is_failure",
    "is_failure_type",
    "is_success",
    "success",
    "unwrap",
]
