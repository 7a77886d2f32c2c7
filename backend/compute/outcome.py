"""
Tagged outcome of a delayed computation.
A request yields either a ComputationResult (value) or a ComputationFailure (kind + message).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

INVALID_INPUT = "InvalidInput"
NEGATIVE_NUMBER_MESSAGE = "Negative number not allowed"


class InvalidInputError(ValueError):
    """Raised by ComputationFailure.unwrap() for callers that want an exception."""

    def __init__(self, message: str = NEGATIVE_NUMBER_MESSAGE):
        super().__init__(message)
        self.message = message
        self.kind = INVALID_INPUT


@dataclass(frozen=True)
class ComputationResult:
    value: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> int:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", "value": self.value}


@dataclass(frozen=True)
class ComputationFailure:
    message: str
    kind: str = INVALID_INPUT

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> int:
        raise InvalidInputError(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"status": "failure", "kind": self.kind, "message": self.message}


Outcome = Union[ComputationResult, ComputationFailure]
