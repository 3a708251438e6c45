from collections.abc import AsyncGenerator, Generator

import httpx
import pytest

from infra.adapter.json_localizer_catalog import get_localizer_catalog
from infra.config.config import get_config


@pytest.fixture(autouse=True)
def _clear_localization_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOCALIZATION_CONFIG__DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("LOCALIZATION_CONFIG__STRINGS_DIR", raising=False)


@pytest.fixture(autouse=True)
def _reset_cached_singletons() -> Generator[None, None, None]:
    cacheables = [
        get_config,
        get_localizer_catalog,
    ]

    for cacheable in cacheables:
        cacheable.cache_clear()

    yield

    for cacheable in cacheables:
        cacheable.cache_clear()


@pytest.fixture
async def async_client_factory() -> AsyncGenerator:
    clients: list[httpx.AsyncClient] = []

    async def _factory(app, *, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = httpx.AsyncClient(transport=transport, base_url="http://testserver")
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()
