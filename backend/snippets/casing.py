"""
String casing.
"""
from __future__ import annotations


def format_string(text: str, to_upper: bool = True) -> str:
    return text.upper() if to_upper else text.lower()
