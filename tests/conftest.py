from __future__ import annotations

from typing import Callable

import httpx
import pytest

from functions_sdk import AsyncFunctionsClient, FunctionsClient

BASE_URL = "https://project.functions.example.com/functions/v1"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[..., FunctionsClient]:
    def factory(handler: Handler, **kwargs: object) -> FunctionsClient:
        transport = httpx.MockTransport(handler)
        return FunctionsClient(BASE_URL, httpx_client=httpx.Client(transport=transport), **kwargs)

    return factory


@pytest.fixture
def make_async_client() -> Callable[..., AsyncFunctionsClient]:
    def factory(handler: Handler, **kwargs: object) -> AsyncFunctionsClient:
        transport = httpx.MockTransport(handler)
        return AsyncFunctionsClient(BASE_URL, httpx_client=httpx.AsyncClient(transport=transport), **kwargs)

    return factory


@pytest.fixture
def captured() -> dict[str, httpx.Request]:
    return {}


@pytest.fixture
def echo_handler(captured: dict[str, httpx.Request]) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json={"key": "value"})

    return handler
