"""
Run every example once and print the results, then square 4 and -3 with a delay.
Successes go to stdout, failure messages to stderr.
"""
from __future__ import annotations
import asyncio
import logging
import sys
from typing import Any, Optional, TextIO

from compute import DelayedSquare, Outcome, get_settings
from snippets import (
    Car,
    Day,
    Product,
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
)

log = logging.getLogger(__name__)

BOOKS = [
    {"title": "Book A", "rating": 4.5},
    {"title": "Book B", "rating": 3.2},
    {"title": "Book C", "rating": 5.0},
]

PRODUCTS = [
    Product("Pen", 10),
    Product("Notebook", 25),
    Product("Bag", 50),
]

SQUARE_INPUTS = (4, -3)


def collect_examples() -> dict[str, Any]:
    """Results of the synchronous examples by name, in the order they are printed."""
    my_car = Car("Toyota", 2020, "Corolla")
    return {
        "format_upper_default": format_string("Hello"),
        "format_upper": format_string("Hello", True),
        "format_lower": format_string("Hello", False),
        "high_rated_books": filter_by_rating(BOOKS),
        "concat_strings": concatenate_arrays(["a", "b"], ["c"]),
        "concat_numbers": concatenate_arrays([1, 2], [3, 4], [5]),
        "car_info": my_car.get_info(),
        "car_model": my_car.get_model(),
        "process_string": process_value("hello"),
        "process_number": process_value(10),
        "most_expensive_product": get_most_expensive_product(PRODUCTS),
        "day_type_friday": get_day_type(Day.Friday),
        "day_type_sunday": get_day_type(Day.Sunday),
    }


async def run_squares(
    square: DelayedSquare,
    values: tuple[int, ...] = SQUARE_INPUTS,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> list[Outcome]:
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    def on_success(value: int) -> None:
        print(value, file=out)

    def on_failure(message: str) -> None:
        print(message, file=err)

    tasks = [square.submit(n, on_success, on_failure) for n in values]
    outcomes = await asyncio.gather(*tasks)
    for n, outcome in zip(values, outcomes):
        log.debug("square(%d) -> %s", n, outcome)
    return list(outcomes)


def main(delay_ms: Optional[int] = None) -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    for result in collect_examples().values():
        print(result)
    square = DelayedSquare(settings.delay_ms if delay_ms is None else delay_ms)
    log.info("Scheduling %d squares with %d ms delay", len(SQUARE_INPUTS), square.delay_ms)
    asyncio.run(run_squares(square))


if __name__ == "__main__":
    main()
