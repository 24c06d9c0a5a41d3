"""Public package surface exposing the domain utilities, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the utilities themselves
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    SAMPLE_PRODUCTS,
    Car,
    Day,
    DayType,
    InvalidValueError,
    Item,
    NegativeValueError,
    NumberValue,
    Product,
    TextValue,
    Value,
    Vehicle,
    concatenate,
    day_type,
    filter_by_rating,
    format_case,
    most_expensive,
    process_value,
    size_of,
    square_async,
)

__all__ = [
    "SAMPLE_PRODUCTS",
    "Car",
    "Day",
    "DayType",
    "InvalidValueError",
    "Item",
    "NegativeValueError",
    "NumberValue",
    "Product",
    "TextValue",
    "Value",
    "Vehicle",
    "concatenate",
    "day_type",
    "filter_by_rating",
    "format_case",
    "get_config",
    "most_expensive",
    "print_info",
    "process_value",
    "size_of",
    "square_async",
]
