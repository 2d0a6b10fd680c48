# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Shipping quotes."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShippingQuote:
    cost: float
    estimated_days: int


def get_shipping_quote(destination: str) -> Optional[ShippingQuote]:
    """Return a quote for shipping to destination, or None if none is available."""
    logger.debug(f"Getting a shipping quote for {destination}")
    return ShippingQuote(cost=random.randint(1, 100), estimated_days=random.randint(1, 14))
