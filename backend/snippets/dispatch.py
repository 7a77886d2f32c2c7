"""
Dispatch on str vs number.
"""
from __future__ import annotations
from typing import Union


def process_value(value: Union[str, int, float]) -> Union[int, float]:
    """Strings give their length; numbers are doubled."""
    if isinstance(value, str):
        return len(value)
    return value * 2
