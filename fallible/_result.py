from __future__ import annotations

from collections.abc import Callable
from typing import Never, Literal, overload, Any, final

import attrs
from typing_extensions import TypeIs

from ._exceptions import UnwrapError, with_note


@final
@attrs.frozen(repr=False, str=False)
class Success[T]:
    """A successful outcome holding a value."""

    value: T

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_error() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        return Success(func(self.value))

    def map_error(self, func: Callable[[Any], object]) -> Success[T]:
        return Success(self.value)

    def and_then[R, F](self, func: Callable[[T], Result[R, F]]) -> Result[R, F]:
        return func(self.value)

    def or_else(self, func: Callable[[Any], Result[Any, Any]]) -> Success[T]:
        return Success(self.value)

    def with_default(self, fallback: Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@attrs.frozen(repr=False, str=False)
class Failure[E]:
    """A failed outcome holding an error."""

    error: E

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_error() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def map(self, func: Callable[[Any], object]) -> Failure[E]:
        return Failure(self.error)

    def map_error[F](self, func: Callable[[E], F]) -> Failure[F]:
        return Failure(func(self.error))

    def and_then(self, func: Callable[[Any], Result[Any, Any]]) -> Failure[E]:
        return Failure(self.error)

    def or_else[R, F](self, func: Callable[[E], Result[R, F]]) -> Result[R, F]:
        return func(self.error)

    def with_default[D](self, fallback: D) -> D:
        return fallback

    def unwrap(self) -> Never:
        if isinstance(self.error, BaseException):
            raise self.error
        raise with_note(UnwrapError(self.error), f"Attempted to unwrap {self!r}")

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Result[T, E] = Success[T] | Failure[E]


def success[T, E](value: T) -> Result[T, E]:
    """Wrap a value into a successful result."""

    return Success(value)


def failure[T, E](error: E) -> Result[T, E]:
    """Wrap an error into a failed result."""

    return Failure(error)


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    return result.is_success()


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    return result.is_failure()


def is_failure_type[E](result: Result, error_type: type[E]) -> TypeIs[Failure[E]]:
    """Check if a result is a failure holding an error of the given type."""

    return is_failure(result) and isinstance(result.error, error_type)


@overload
def unwrap[T](value: Success[T]) -> T: ...


@overload
def unwrap(value: Failure[Any]) -> Never: ...


@overload
def unwrap[T](value: Result[T, Any]) -> T: ...


def unwrap(value):
    """Return the value of a success or raise the error of a failure.

    If the failure holds an exception, that exception is raised as is.
    Otherwise, an :class:`UnwrapError` wrapping the error is raised.
    """

    return value.unwrap()
