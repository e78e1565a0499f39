from typing import AsyncGenerator

import httpx

from pharmasearch.config import settings


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(timeout=settings.PROVIDER_TIMEOUT) as client:
        yield client
