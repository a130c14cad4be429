"""Module-level combinators over Either.

All of them, except the constructors, validate their Either argument first and
raise ``NotAnEither`` for anything that is not a Right or a Left. There is no
lenient mode: ``None``, lists, dicts and other objects are never treated as a
Left.
"""
from __future__ import annotations
from typing import Any, Callable, Mapping, TypeVar

from .either import Either, Left, Right
from .errors import NotAnEither

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")

Handlers = Mapping[str, Callable[[Any], Any]]


def assert_is_either(value: Any) -> None:
    if not isinstance(value, (Right, Left)):
        raise NotAnEither(value)


def right(value: A) -> Either[Any, A]:
    return Right(value)


def left(error: E) -> Either[E, Any]:
    return Left(error)


def try_catch(f: Callable[[], A], on_error: Callable[[BaseException], E]) -> Either[E, A]:
    """Run ``f`` and capture what it raises as ``Left(on_error(ex))``.

    Example:
        ```python
        parsed = try_catch(lambda: json.loads(text), lambda ex: f"bad json: {ex}")
        ```
    """
    try:
        v = f()
    except BaseException as ex:
        return Left(on_error(ex))
    return Right(v)


def is_right(value: Either[E, A]) -> bool:
    assert_is_either(value)
    return isinstance(value, Right)


def is_left(value: Either[E, A]) -> bool:
    assert_is_either(value)
    return isinstance(value, Left)


def with_default(value: Either[E, A], default: A) -> A:
    assert_is_either(value)
    return value.with_default(default)


def map(f: Callable[[A], B], value: Either[E, A]) -> Either[Any, B]:
    assert_is_either(value)
    return value.map(f)


def and_then(f: Callable[[A], Either[E, B]], value: Either[E, A]) -> Either[E, B]:
    assert_is_either(value)
    return value.and_then(f)


def _handler(handlers: Handlers, name: str) -> Callable[[Any], Any]:
    if isinstance(handlers, Mapping):
        return handlers[name]
    try:
        return getattr(handlers, name)
    except AttributeError:
        raise KeyError(name) from None


def case_of(handlers: Handlers, value: Either[E, A]) -> Any:
    """Run exactly one handler, ``handlers["Right"]`` or ``handlers["Left"]``, and return its result.

    Args:
        handlers: Mapping (or object with attributes) named ``Right`` and ``Left``
        value: The Either to take apart

    Raises:
        NotAnEither: If ``value`` is neither Right nor Left
        KeyError: If the handler for the active variant is missing

    Example:
        ```python
        case_of({"Left": str, "Right": lambda n: f"Launch {n} missiles"}, right("5"))
        # 'Launch 5 missiles'
        ```
    """
    assert_is_either(value)
    if isinstance(value, Right):
        return _handler(handlers, "Right")(value.value)
    return _handler(handlers, "Left")(value.error)
