"""
Find the most expensive product with a reduce.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Optional, Union


@dataclass
class Product:
    name: str
    price: Union[int, float]


def get_most_expensive_product(products: list[Product]) -> Optional[Product]:
    """
    Return the product with the highest price, or None for an empty list.
    On a tie the earliest product wins.
    """
    if not products:
        return None
    return reduce(lambda prev, curr: curr if curr.price > prev.price else prev, products)
