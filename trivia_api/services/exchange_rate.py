import logging
from typing import Optional

import httpx

from trivia_api.core import config
from trivia_api.core.exceptions import ExchangeRateNotConfigured, ExchangeRateUnavailable

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Pass-through to the external exchange-rate history API"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = 10.0):
        self.transport = transport
        self.timeout = timeout

    async def get_history(self, currency: str, date: str) -> dict:
        base_url = config.EXCHANGE_RATE_API_URL
        api_key = config.EXCHANGE_RATE_API_KEY
        if not base_url or not api_key:
            raise ExchangeRateNotConfigured()

        url = f"{base_url.rstrip('/')}/{api_key}/history/{currency}/{date}"
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Exchange rate request for {currency} on {date} failed: {e!r}")
            raise ExchangeRateUnavailable() from e


def get_exchange_rate_service() -> ExchangeRateService:
    return ExchangeRateService()
