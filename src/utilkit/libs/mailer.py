# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Outgoing email."""

import asyncio
import logging
import re

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


async def send_email(to: str, message: str) -> None:
    # Message bodies may carry one-time login codes; only the recipient is logged
    logger.debug(f"Sending email to {to}")
    await asyncio.sleep(0)
