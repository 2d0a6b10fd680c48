# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Pricing and input validation helpers.

Several validators report problems through their return value rather than by
raising: calculate_discount, validate_user_input and can_drive return a
human-readable message when their input is rejected.
"""

import asyncio
import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, List, Optional, Union

from utilkit.config import Config, get_default_config

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 100


@dataclass(frozen=True)
class Coupon:
    """A coupon code and the fraction of the price it takes off."""

    code: str
    discount: float


class FetchError(Exception):
    """Raised by fetch_data when the simulated fetch fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def get_coupons(config: Optional[Config] = None) -> List[Coupon]:
    """Return the configured coupons."""
    config = config or get_default_config()
    return [Coupon(code=code, discount=discount) for code, discount in config.coupons.items()]


def calculate_discount(
    price: Any, discount_code: Any, config: Optional[Config] = None
) -> Union[float, str]:
    """Apply a configured coupon code to a price.

    The codes honoured here are the ones get_coupons() lists. Unknown codes
    leave the price unchanged.

    Returns:
        The discounted price, or "Invalid price" / "Invalid discount code"
        when an argument is rejected.
    """
    if not _is_number(price) or price <= 0:
        return "Invalid price"

    if not isinstance(discount_code, str):
        return "Invalid discount code"

    config = config or get_default_config()
    discount = config.coupons.get(discount_code)
    if discount is None:
        logger.debug(f"Unknown discount code {discount_code!r}, price unchanged")
        return price
    return price - price * discount


def validate_user_input(username: Any, age: Any) -> str:
    """Validate a sign-up form.

    Returns:
        "Validation successful", or every problem found joined with ", ".
    """
    errors = []

    if (
        not isinstance(username, str)
        or len(username) < USERNAME_MIN_LENGTH
        or len(username) > USERNAME_MAX_LENGTH
    ):
        errors.append("Invalid username")

    if not isinstance(age, int) or isinstance(age, bool) or age < MIN_AGE or age > MAX_AGE:
        errors.append("Invalid age")

    return ", ".join(errors) if errors else "Validation successful"


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    return min_price <= price <= max_price


def is_valid_username(username: Any, config: Optional[Config] = None) -> bool:
    """Check a username against the configured length bounds (inclusive)."""
    if not isinstance(username, str):
        return False

    config = config or get_default_config()
    return config.username_min_length <= len(username) <= config.username_max_length


def can_drive(age: int, country_code: str, config: Optional[Config] = None) -> Union[bool, str]:
    """Check whether someone of the given age may drive in a country.

    Returns:
        True/False, or "Invalid country code" for countries without a rule.
    """
    config = config or get_default_config()
    legal_age = config.legal_driving_ages.get(country_code)
    if legal_age is None:
        return "Invalid country code"
    return age >= legal_age


async def fetch_data(fail: bool = False, config: Optional[Config] = None) -> List[int]:
    """Simulate an asynchronous fetch.

    Raises:
        FetchError: If fail is True.
    """
    config = config or get_default_config()
    await asyncio.sleep(config.fetch_delay_seconds)

    if fail:
        logger.warning("fetch_data failed")
        raise FetchError("Operation failed")

    return [1, 2, 3]
