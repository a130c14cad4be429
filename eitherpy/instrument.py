from __future__ import annotations
from typing import Any, Callable, TypeVar

from .combinators import assert_is_either, try_catch
from .either import Either, Left
from .logger import ConsoleLogger

A = TypeVar('A'); B = TypeVar('B')


def instrument(
    name: str,
    step: Callable[[A], Any],
    logger: ConsoleLogger | None = None,
    tags: dict[str, str] | None = None,
    lift: bool = False,
) -> Callable[[A], Either[Any, B]]:
    """Wrap an Either-returning step so each call logs how it ended.

    The wrapped step logs ``start <name>`` at DEBUG, then ``right <name>`` at
    INFO or ``left <name>: <error>`` at ERROR. If the step raises, ``die
    <name>: <ex>`` is logged at ERROR and the exception propagates.

    Args:
        name: Step name used in every log line
        step: Function ``a -> Either``; with ``lift=True`` a plain function
            whose raises are captured into a Left by ``try_catch``
        logger: Logger to write to; a default ``ConsoleLogger`` when omitted
        tags: Extra fields attached to every record
        lift: Treat ``step`` as a plain function instead of an Either step

    Returns:
        A step with the same signature, suitable for ``and_then``

    Example:
        ```python
        parse = instrument("bands.parse", json.loads, lift=True)
        names = and_then(parse, read_file("bands.json"))
        ```
    """
    log = (logger or ConsoleLogger()).bind(**(tags or {}))

    def run(a: A) -> Either[Any, B]:
        log.debug(f"start {name}")
        try:
            if lift:
                res = try_catch(lambda: step(a), lambda ex: ex)
            else:
                res = step(a)
                assert_is_either(res)
        except BaseException as ex:
            log.error(f"die {name}: {ex}")
            raise
        if isinstance(res, Left):
            log.error(f"left {name}: {res.error}")
        else:
            log.info(f"right {name}")
        return res

    return run
