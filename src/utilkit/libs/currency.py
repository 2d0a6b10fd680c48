# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Exchange-rate lookup."""

import logging
import random

logger = logging.getLogger(__name__)


def get_exchange_rate(from_currency: str, to_currency: str) -> float:
    """Return the rate for converting from_currency into to_currency."""
    logger.debug(f"Getting exchange rate {from_currency} -> {to_currency}")
    return round(random.random(), 2)
