from __future__ import annotations
import asyncio
from typing import Any, Generator, Generic, TypeVar

from .combinators import Handlers, case_of, is_right
from .either import Either
from .errors import Rejected

T = TypeVar("T")
E = TypeVar("E")
A = TypeVar("A")


class Deferred(Generic[T]):
    """One-shot result backed by an asyncio future. Completes at most once."""
    def __init__(self) -> None:
        self._f: asyncio.Future[T] = asyncio.get_running_loop().create_future()

    def done(self) -> bool:
        return self._f.done()

    async def await_(self) -> T:
        return await self._f

    def __await__(self) -> Generator[Any, None, T]:
        return self._f.__await__()

    def try_succeed(self, value: T) -> bool:
        if self._f.done():
            return False
        self._f.set_result(value)
        return True

    def succeed(self, value: T) -> None:
        if not self.try_succeed(value):
            raise RuntimeError("Deferred already completed")

    def try_fail(self, ex: BaseException) -> bool:
        if self._f.done():
            return False
        self._f.set_exception(ex)
        return True

    def fail(self, ex: BaseException) -> None:
        if not self.try_fail(ex):
            raise RuntimeError("Deferred already completed")


def case_of_deferred(handlers: Handlers, value: Either[E, A]) -> Deferred[Any]:
    """Run ``case_of`` now and hand its result back as an already completed Deferred.

    The Deferred succeeds with the Right handler's output and fails with the Left
    handler's output. A Left output that is not an exception, or is a
    ``StopIteration`` (which futures refuse), is wrapped in ``Rejected``. Must be
    called while an asyncio loop is running. A rejected Deferred that is never
    awaited makes asyncio log "Future exception was never retrieved" when it is
    garbage collected.

    Example:
        ```python
        d = case_of_deferred({"Left": lambda e: e, "Right": str.upper}, right("ok"))
        assert await d == "OK"
        ```
    """
    out = case_of(handlers, value)
    d: Deferred[Any] = Deferred()
    if is_right(value):
        d.succeed(out)
    else:
        d.fail(out if isinstance(out, BaseException) and not isinstance(out, StopIteration) else Rejected(out))
    return d
