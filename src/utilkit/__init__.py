# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Small utilities: a LIFO stack, pricing and validation helpers, and store services."""

from .config import Config, ConfigurationError
from .core import (
    Coupon,
    FetchError,
    calculate_discount,
    can_drive,
    fetch_data,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from .intro import calculate_average, factorial, fizz_buzz, max_of
from .stack import EmptyContainerError, Stack

__version__ = "0.1.0"

__all__ = [
    "Stack",
    "EmptyContainerError",
    "Config",
    "ConfigurationError",
    "Coupon",
    "FetchError",
    "calculate_discount",
    "can_drive",
    "fetch_data",
    "get_coupons",
    "is_price_in_range",
    "is_valid_username",
    "validate_user_input",
    "calculate_average",
    "factorial",
    "fizz_buzz",
    "max_of",
]
