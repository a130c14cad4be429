"""
Deferred case analysis: hand an Either to async callers as an awaitable.

Run: python examples/deferred_case_of.py
"""
import asyncio
import json

from eitherpy import Rejected, case_of_deferred, map, try_catch


async def main():
    for text in ['{"artist": "Clark"}', ""]:
        parsed = try_catch(lambda: json.loads(text), lambda ex: f"invalid json: {ex}")
        artist = map(lambda d: d["artist"], parsed)
        try:
            name = await case_of_deferred({"Right": str.upper, "Left": lambda msg: msg}, artist)
            print("artist =>", name)
        except Rejected as r:
            print("rejected =>", r.value)


if __name__ == "__main__":
    asyncio.run(main())
