# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""One-time login codes."""

import logging
import secrets

logger = logging.getLogger(__name__)


def generate_code() -> int:
    """Return a random six-digit code."""
    code = 100000 + secrets.randbelow(900000)
    logger.debug("Generated one-time login code")
    return code
