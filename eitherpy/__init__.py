from .either import Either, Left, Right, Fallible
from .errors import NotAnEither, Rejected
from .combinators import (
    right,
    left,
    try_catch,
    is_right,
    is_left,
    with_default,
    map,
    and_then,
    case_of,
    assert_is_either,
)
from .deferred import Deferred, case_of_deferred
from .logger import ConsoleLogger
from .instrument import instrument
