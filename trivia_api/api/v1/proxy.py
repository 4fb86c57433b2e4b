from fastapi import APIRouter, Depends

from trivia_api.services.exchange_rate import ExchangeRateService, get_exchange_rate_service

proxy_router = APIRouter()


@proxy_router.get("/exchange-rate/history/{currency}/{date}")
async def exchange_rate_history(
    currency: str,
    date: str,
    service: ExchangeRateService = Depends(get_exchange_rate_service),
):
    return await service.get_history(currency, date)
