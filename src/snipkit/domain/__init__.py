"""Domain layer - pure functions and value objects with no I/O or framework dependencies.

Each module is a self-contained utility; none of them depends on another
apart from the shared error types.

Contents:
    * :mod:`.text` - Upper/lower case conversion
    * :mod:`.ratings` - Rated items and the minimum-rating filter
    * :mod:`.sequences` - Variadic list concatenation
    * :mod:`.vehicles` - Vehicle and car descriptions
    * :mod:`.values` - Text-or-number sizing over a closed sum type
    * :mod:`.products` - Priced products and the most-expensive fold
    * :mod:`.days` - Weekday enumeration and weekend classifier
    * :mod:`.deferred` - Delayed asynchronous square
    * :mod:`.enums` - Output format enumeration
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .days import Day, DayType, day_type, parse_day
from .deferred import SQUARE_DELAY_SECONDS, square_async
from .enums import OutputFormat
from .errors import NEGATIVE_NUMBER_MESSAGE, InvalidValueError, NegativeValueError
from .products import SAMPLE_PRODUCTS, Product, most_expensive
from .ratings import MIN_RATING, Item, filter_by_rating
from .sequences import concatenate
from .text import format_case
from .values import NumberValue, TextValue, Value, process_value, size_of, tag_value
from .vehicles import Car, Vehicle

__all__ = [
    # Text
    "format_case",
    # Ratings
    "MIN_RATING",
    "Item",
    "filter_by_rating",
    # Sequences
    "concatenate",
    # Vehicles
    "Car",
    "Vehicle",
    # Values
    "NumberValue",
    "TextValue",
    "Value",
    "process_value",
    "size_of",
    "tag_value",
    # Products
    "SAMPLE_PRODUCTS",
    "Product",
    "most_expensive",
    # Days
    "Day",
    "DayType",
    "day_type",
    "parse_day",
    # Deferred
    "SQUARE_DELAY_SECONDS",
    "square_async",
    # Enums
    "OutputFormat",
    # Errors
    "NEGATIVE_NUMBER_MESSAGE",
    "InvalidValueError",
    "NegativeValueError",
]
