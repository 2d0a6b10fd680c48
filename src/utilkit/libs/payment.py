# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Card payments."""

import asyncio
import logging
import random
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class PaymentStatus:
    """Outcome of a charge.

    Design: class constants (not Enum) so results compare equal to plain strings.
    """

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class CreditCard:
    credit_card_number: str


@dataclass(frozen=True)
class ChargeResult:
    status: str


async def charge(credit_card: CreditCard, amount: float) -> ChargeResult:
    """Charge amount to the card."""
    logger.debug(f"Charging card ending in {credit_card.credit_card_number[-4:]}: {amount}")
    await asyncio.sleep(0)
    status = PaymentStatus.SUCCESS if random.random() < 0.5 else PaymentStatus.FAILED
    return ChargeResult(status=status)
