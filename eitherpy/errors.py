from __future__ import annotations
from typing import Any


class NotAnEither(TypeError):
    """Raised when a combinator receives something that is neither Right nor Left."""
    def __init__(self, value: Any):
        super().__init__(f'Value "{value}" is not an Either type'); self.value = value


class Rejected(Exception):
    """Failure carrier for a deferred case analysis whose Left handler returned a plain value."""
    def __init__(self, value: Any):
        super().__init__(value); self.value = value

    def __str__(self) -> str: return str(self.value)
