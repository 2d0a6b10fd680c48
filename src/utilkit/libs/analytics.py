# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Page view tracking."""

import asyncio
import logging

logger = logging.getLogger(__name__)


async def track_page_view(page_path: str) -> None:
    logger.debug(f"Tracking page view: {page_path}")
    await asyncio.sleep(0)
