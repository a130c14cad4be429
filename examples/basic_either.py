"""
Basic Either: construction, map/and_then chains, and consuming the result.

Run: python examples/basic_either.py
"""
from eitherpy import (
    right,
    left,
    try_catch,
    map,
    and_then,
    with_default,
    case_of,
    instrument,
    ConsoleLogger,
)


def remove_first(arr):
    if not arr:
        raise ValueError("Array is empty")
    return arr[1:]


def main():
    # map turns raises into a Left
    print("add1 =>", with_default(map(lambda n: n + 1, right(4)), 0))          # 5
    print("empty =>", with_default(map(remove_first, right([])), []))         # []

    # and_then short-circuits on the first Left; instrument logs every step to stderr
    step = instrument("remove_first", remove_first, logger=ConsoleLogger(level="DEBUG"), lift=True)
    res = right([1, 2, 3])
    for _ in range(6):
        res = and_then(step, res)
    print("chain =>", case_of({"Right": lambda arr: ",".join(map_str(arr)), "Left": str}, res))  # Array is empty

    # try_catch bridges raise-based code
    port = try_catch(lambda: int("80a"), lambda ex: f"bad port: {ex}")
    print("port =>", case_of({"Right": lambda p: p, "Left": lambda msg: msg}, port))

    print("missiles =>", case_of({"Left": lambda e: e, "Right": lambda n: f"Launch {n} missiles"}, right("5")))
    print("left =>", with_default(left("nope"), "fallback"))


def map_str(arr):
    return [str(x) for x in arr]


if __name__ == "__main__":
    main()
