# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Store operations built on the external services in utilkit.libs.

Each function delegates to a collaborator module looked up at call time
(``currency.get_exchange_rate`` rather than an imported name), so patching
the attribute on the collaborator module replaces it for these callers too.

Clock-dependent rules read the time through current_time() unless a
datetime is passed in explicitly.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from utilkit.config import Config, get_default_config
from utilkit.libs import analytics, currency, mailer, payment, security, shipping
from utilkit.libs.payment import CreditCard, PaymentStatus

logger = logging.getLogger(__name__)

BASE_CURRENCY = "USD"
HOME_PAGE = "/home"
CHRISTMAS_DISCOUNT = 0.2


@dataclass(frozen=True)
class Order:
    total_amount: float


def current_time() -> datetime:
    """Return the local wall-clock time."""
    return datetime.now()


def get_price_in_currency(price: float, target_currency: str) -> float:
    rate = currency.get_exchange_rate(BASE_CURRENCY, target_currency)
    return price * rate


def get_shipping_info(destination: str) -> str:
    """Describe the shipping cost and delivery time for a destination."""
    quote = shipping.get_shipping_quote(destination)
    if quote is None:
        logger.info(f"No shipping quote available for {destination}")
        return "Shipping Unavailable"
    return f"Shipping Cost: ${quote.cost} ({quote.estimated_days} Days)"


async def render_page() -> str:
    await analytics.track_page_view(HOME_PAGE)
    return "<div>content</div>"


async def submit_order(order: Order, credit_card: CreditCard) -> Dict[str, Any]:
    """Charge the order total to the card.

    Returns:
        {"success": True} or {"success": False, "error": "payment_error"}
    """
    result = await payment.charge(credit_card, order.total_amount)

    if result.status == PaymentStatus.FAILED:
        logger.warning(f"Payment failed for order total {order.total_amount}")
        return {"success": False, "error": "payment_error"}

    return {"success": True}


async def sign_up(email: str) -> bool:
    """Register an email address and send the welcome message.

    Returns:
        False if the address is malformed, True once the welcome email is sent.
    """
    if not mailer.is_valid_email(email):
        logger.info("Rejected sign-up with malformed email address")
        return False

    await mailer.send_email(email, "Welcome aboard!")
    return True


async def login(email: str) -> None:
    """Email a one-time login code to the user."""
    code = security.generate_code()
    await mailer.send_email(email, str(code))


def is_online(now: Optional[datetime] = None, config: Optional[Config] = None) -> bool:
    """Whether the store is open: opening_hour <= hour < closing_hour."""
    config = config or get_default_config()
    now = now or current_time()
    return config.opening_hour <= now.hour < config.closing_hour


def get_discount(now: Optional[datetime] = None) -> float:
    """Return the discount fraction for the given day (Christmas only)."""
    now = now or current_time()
    is_christmas_day = now.month == 12 and now.day == 25
    return CHRISTMAS_DISCOUNT if is_christmas_day else 0.0
