from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")


class Either(Generic[E, A]):
    """A computation that either failed with an error (Left) or succeeded with a value (Right).

    Only the two dataclasses below are Eithers. Instances are frozen: every
    transformation hands back a new instance, or the untouched Left.

    Example:
        ```python
        five = Right(4).map(lambda n: n + 1)
        assert five.with_default(0) == 5
        ```
    """
    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def map(self, f: Callable[[A], B]) -> "Either[E | BaseException, B]":
        """Apply ``f`` to a Right value. Anything ``f`` raises becomes the payload of a Left."""
        if self.is_left():
            return self  # type: ignore[return-value]
        try:
            return Right(f(self.value))  # type: ignore[attr-defined]
        except BaseException as ex:
            return Left(ex)

    def and_then(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        """Chain a step that itself returns an Either. Raises from ``f`` are not caught."""
        if self.is_right():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    flat_map = and_then

    def map_left(self, f: Callable[[E], F]) -> "Either[F, A]":
        if self.is_left():
            return Left(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def with_default(self, default: A) -> A:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]

    def case_of(self, on_right: Callable[[A], B], on_left: Callable[[E], B]) -> B:
        if self.is_right():
            return on_right(self.value)  # type: ignore[attr-defined]
        return on_left(self.error)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[E, A]):
    error: E
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A
    def is_left(self) -> bool: return False


# Either whose error side is left at the platform's exception type
Fallible = Either[Exception, A]
