# Example snippets package
from .casing import format_string
from .concat import concatenate_arrays
from .days import Day, get_day_type
from .dispatch import process_value
from .products import Product, get_most_expensive_product
from .ratings import filter_by_rating
from .vehicles import Car, Vehicle

__all__ = [
    'format_string',
    'concatenate_arrays',
    'Day',
    'get_day_type',
    'process_value',
    'Product',
    'get_most_expensive_product',
    'filter_by_rating',
    'Car',
    'Vehicle',
]
