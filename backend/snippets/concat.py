"""
Concatenate any number of lists into one.
"""
from __future__ import annotations
from itertools import chain
from typing import TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: list[T]) -> list[T]:
    return list(chain.from_iterable(arrays))
