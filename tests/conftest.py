import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from publick import config
from . import ADMIN_TOKEN

config.DB_CONNECTION_STRING = "sqlite://:memory:"
config.ADMIN_TOKEN = ADMIN_TOKEN

from publick.main import app


@pytest_asyncio.fixture
async def app_with_lifespan() -> FastAPI:
    async with LifespanManager(app) as manager:
        yield manager.app


@pytest_asyncio.fixture
async def client(app_with_lifespan) -> AsyncClient:
    async with AsyncClient(transport=ASGITransport(app=app_with_lifespan), base_url="https://publick.test") as client:
        yield client
