"""A value-or-error container with chaining helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Holds either a value or the exception that prevented it."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def map(self, fn: Callable[[T], T]) -> "Result[T]":
        """Apply ``fn`` to the value; a failed result passes through unchanged."""
        if self.error is not None:
            return self
        return ok(fn(self.value))

    def unwrap(self) -> T:
        """Return the value, raising the stored exception for a failed result."""
        if self.error is not None:
            raise self.error
        return self.value


def ok(value: T) -> Result[T]:
    """A successful result holding ``value``."""
    return Result(value=value)


def fail(error: BaseException) -> Result:
    """A failed result holding ``error``."""
    return Result(error=error)


def attempt(value: T, error: Optional[BaseException] = None) -> Result[T]:
    """A failed result when ``error`` is set, a successful one otherwise."""
    if error is not None:
        return fail(error)
    return ok(value)


def flat_map(result: Result[T], fn: Callable[[T], U]) -> Result[U]:
    """Apply a function that may raise to the value of ``result``."""
    if result.error is not None:
        return fail(result.error)
    try:
        return ok(fn(result.value))
    except Exception as exc:
        return fail(exc)


def lift(fn: Callable[[], T]) -> Callable[[], Result[T]]:
    """Wrap a callable so that each call returns a Result instead of raising."""

    def lifted() -> Result[T]:
        try:
            return ok(fn())
        except Exception as exc:
            return fail(exc)

    return lifted