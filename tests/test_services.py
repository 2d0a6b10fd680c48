# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Tests for store services.

The external collaborators in utilkit.libs are replaced with mocks:
- patch() with return_value for synchronous lookups
- AsyncMock for awaited services
- patch.object(..., wraps=...) to spy on a real function
- a patched current_time() to control the clock
"""

from datetime import datetime
from unittest.mock import AsyncMock, Mock, call, patch

import pytest

from utilkit.config import Config
from utilkit.libs import security
from utilkit.libs.payment import ChargeResult, CreditCard, PaymentStatus
from utilkit.libs.shipping import ShippingQuote
from utilkit.services import (
    Order,
    get_discount,
    get_price_in_currency,
    get_shipping_info,
    is_online,
    login,
    render_page,
    sign_up,
    submit_order,
)


class TestMockBasics:
    """Mock objects record their calls."""

    def test_mock_records_calls(self) -> None:
        greet = Mock(side_effect=lambda name: "Hello " + name)

        assert greet("Mosh") == "Hello Mosh"
        greet.assert_called_once_with("Mosh")

        greet("again")
        assert greet.call_count == 2

    def test_mock_return_value(self) -> None:
        send_text = Mock(return_value="ok")

        result = send_text("message")

        send_text.assert_called_with("message")
        assert result == "ok"


class TestGetPriceInCurrency:
    def test_converts_with_exchange_rate(self) -> None:
        with patch("utilkit.libs.currency.get_exchange_rate", return_value=1.5) as mock_rate:
            price = get_price_in_currency(10, "AUD")

        assert price == 15
        mock_rate.assert_called_once_with("USD", "AUD")


class TestGetShippingInfo:
    def test_unavailable_when_no_quote(self) -> None:
        with patch("utilkit.libs.shipping.get_shipping_quote", return_value=None) as mock_quote:
            result = get_shipping_info("FR")

        assert "unavailable" in result.lower()
        mock_quote.assert_called_once_with("FR")

    def test_formats_quote(self) -> None:
        quote = ShippingQuote(cost=10, estimated_days=2)
        with patch("utilkit.libs.shipping.get_shipping_quote", return_value=quote) as mock_quote:
            result = get_shipping_info("FR")

        assert result == "Shipping Cost: $10 (2 Days)"
        mock_quote.assert_called_once_with("FR")


class TestRenderPage:
    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        with patch("utilkit.libs.analytics.track_page_view", new_callable=AsyncMock):
            result = await render_page()

        assert "content" in result.lower()

    @pytest.mark.asyncio
    async def test_tracks_home_page_view(self) -> None:
        with patch(
            "utilkit.libs.analytics.track_page_view", new_callable=AsyncMock
        ) as mock_track:
            await render_page()

        mock_track.assert_awaited_once_with("/home")


class TestSubmitOrder:
    ORDER = Order(total_amount=100)
    CARD = CreditCard(credit_card_number="1234 1234 1234 1234")

    @pytest.mark.asyncio
    async def test_charges_customer(self) -> None:
        with patch("utilkit.libs.payment.charge", new_callable=AsyncMock) as mock_charge:
            mock_charge.return_value = ChargeResult(status=PaymentStatus.FAILED)

            await submit_order(self.ORDER, self.CARD)

        mock_charge.assert_awaited_once_with(self.CARD, 100)

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        with patch("utilkit.libs.payment.charge", new_callable=AsyncMock) as mock_charge:
            mock_charge.return_value = ChargeResult(status=PaymentStatus.SUCCESS)

            result = await submit_order(self.ORDER, self.CARD)

        assert result == {"success": True}

    @pytest.mark.asyncio
    async def test_failed_payment(self) -> None:
        with patch("utilkit.libs.payment.charge", new_callable=AsyncMock) as mock_charge:
            mock_charge.return_value = ChargeResult(status=PaymentStatus.FAILED)

            result = await submit_order(self.ORDER, self.CARD)

        assert result == {"success": False, "error": "payment_error"}


class TestSignUp:
    EMAIL = "name@domain.com"

    @pytest.fixture
    def mock_send_email(self):
        with patch("utilkit.libs.mailer.send_email", new_callable=AsyncMock) as mock_send:
            yield mock_send

    @pytest.mark.asyncio
    async def test_invalid_email(self, mock_send_email: AsyncMock) -> None:
        assert await sign_up("a") is False
        mock_send_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_email(self, mock_send_email: AsyncMock) -> None:
        assert await sign_up(self.EMAIL) is True

    @pytest.mark.asyncio
    async def test_sends_welcome_email(self, mock_send_email: AsyncMock) -> None:
        await sign_up(self.EMAIL)

        mock_send_email.assert_awaited_once()
        to, message = mock_send_email.call_args.args
        assert to == self.EMAIL
        assert "welcome" in message.lower()


class TestLogin:
    @pytest.mark.asyncio
    async def test_emails_generated_code(self) -> None:
        """Spy on generate_code and check the same code is emailed."""
        email = "name@domain.com"
        spy = Mock(wraps=security.generate_code)

        with patch.object(security, "generate_code", spy), patch(
            "utilkit.libs.mailer.send_email", new_callable=AsyncMock
        ) as mock_send:
            await login(email)

        spy.assert_called_once_with()
        code = mock_send.call_args.args[1]
        assert mock_send.call_args == call(email, code)
        assert len(code) == 6 and code.isdigit()

    @pytest.mark.asyncio
    async def test_emails_fixed_code(self) -> None:
        with patch.object(security, "generate_code", return_value=123456), patch(
            "utilkit.libs.mailer.send_email", new_callable=AsyncMock
        ) as mock_send:
            await login("name@domain.com")

        mock_send.assert_awaited_once_with("name@domain.com", "123456")


class TestIsOnline:
    """Opening hours default to 08:00 (inclusive) through 20:00 (exclusive)."""

    @pytest.mark.parametrize(
        "now",
        [datetime(2024, 1, 2, 7, 59), datetime(2024, 1, 2, 20, 1)],
        ids=["before_opening", "after_closing"],
    )
    def test_offline_outside_hours(self, now: datetime) -> None:
        with patch("utilkit.services.current_time", return_value=now):
            assert is_online() is False

    @pytest.mark.parametrize(
        "now",
        [datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 19, 59)],
        ids=["at_opening", "before_closing"],
    )
    def test_online_within_hours(self, now: datetime) -> None:
        with patch("utilkit.services.current_time", return_value=now):
            assert is_online() is True

    def test_explicit_time_and_config(self, write_config) -> None:
        config = Config(config_path=write_config("opening_hour: 6\nclosing_hour: 9\n"))

        assert is_online(datetime(2024, 1, 1, 6, 30), config) is True
        assert is_online(datetime(2024, 1, 1, 9, 0), config) is False


class TestGetDiscount:
    @pytest.mark.parametrize(
        "now",
        [datetime(2023, 12, 25, 0, 1), datetime(2023, 12, 25, 23, 59)],
    )
    def test_christmas_day(self, now: datetime) -> None:
        with patch("utilkit.services.current_time", return_value=now):
            assert get_discount() == 0.2

    @pytest.mark.parametrize(
        "now",
        [datetime(2023, 12, 24, 23, 59), datetime(2023, 12, 26, 0, 1)],
    )
    def test_other_days(self, now: datetime) -> None:
        with patch("utilkit.services.current_time", return_value=now):
            assert get_discount() == 0
