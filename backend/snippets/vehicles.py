"""
Two-level class hierarchy: Vehicle and its Car subclass.
"""
from __future__ import annotations


class Vehicle:
    def __init__(self, make: str, year: int):
        self._make = make
        self._year = year

    def get_info(self) -> str:
        return f"Make: {self._make}, Year: {self._year}"


class Car(Vehicle):
    def __init__(self, make: str, year: int, model: str):
        super().__init__(make, year)
        self._model = model

    def get_model(self) -> str:
        return f"Model: {self._model}"
