"""Shared test fixtures for backend tests."""

from __future__ import annotations

import random
from collections.abc import AsyncGenerator, Callable
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.domains.competitors import CompetitorFacade
from app.domains.competitors.services import CompetitorDiscoveryService, PricingAggregator
from app.services.gpt_service import GPTService
from app.services.search_service import SerperSearchClient
from main import app as fastapi_app
from tests.utils.fakes import make_completion, serper_transport


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI client replying with two competitor domains"""
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(
        return_value=make_completion("Rival.com, other-shop.io")
    )
    mock_client.close = AsyncMock()
    return mock_client


@pytest.fixture
def gpt_service(mock_openai_client) -> GPTService:
    return GPTService(client=mock_openai_client, model="test-model")


@pytest.fixture
def serper_requests() -> list:
    return []


@pytest.fixture
def search_client_factory(serper_requests) -> Callable[..., SerperSearchClient]:
    def factory(links: Optional[List[str]] = None, status_code: int = 200) -> SerperSearchClient:
        transport = serper_transport(links, status_code=status_code, requests=serper_requests)
        return SerperSearchClient(
            api_key="test-key",
            api_url="https://serper.test/search",
            http_client=httpx.AsyncClient(transport=transport),
        )

    return factory


@pytest_asyncio.fixture
async def search_client(search_client_factory) -> AsyncGenerator[SerperSearchClient, None]:
    client = search_client_factory(
        [
            "https://www.rival.com/about",
            "https://marketplace.example/listing?id=1",
        ]
    )
    yield client
    await client.close()


@pytest.fixture
def discovery_service(search_client, gpt_service) -> CompetitorDiscoveryService:
    return CompetitorDiscoveryService(search_client=search_client, gpt_service=gpt_service)


@pytest.fixture
def pricing_aggregator() -> PricingAggregator:
    return PricingAggregator(rng=random.Random(1234))


@pytest.fixture
def competitor_facade(discovery_service, pricing_aggregator) -> CompetitorFacade:
    return CompetitorFacade(
        discovery_service=discovery_service,
        pricing_aggregator=pricing_aggregator,
    )


@pytest_asyncio.fixture
async def test_app(competitor_facade: CompetitorFacade) -> AsyncGenerator[FastAPI, None]:
    """Provide FastAPI app wired to the fake-backed competitor facade."""
    fastapi_app.state.competitor_facade = competitor_facade
    yield fastapi_app
    fastapi_app.state.competitor_facade = None


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://testserver") as client:
        yield client

