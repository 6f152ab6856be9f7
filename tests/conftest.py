import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from http_header_validator.client import HeaderClient
from http_header_validator.settings import ValidatorConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo the console handler installed by the CLI so caplog sees package records."""
    yield
    package_logger = logging.getLogger("http_header_validator")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[..., Path]:
    """Write a spec container dict to a JSON file and return its path."""

    def _write_spec(data: dict[str, Any], name: str = "urls.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write_spec


@pytest.fixture
def make_client() -> Callable[..., HeaderClient]:
    """Build a HeaderClient whose requests are answered by a handler function."""
    clients: list[HeaderClient] = []

    def _make_client(handler: Callable[[httpx.Request], httpx.Response], config: ValidatorConfig | None = None) -> HeaderClient:
        client = HeaderClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make_client

    for client in clients:
        client.close()


@pytest.fixture
def headers_server():
    """Handler serving fixed response headers per URL and recording requests."""

    class HeadersServer:
        def __init__(self):
            self.routes: dict[str, list[tuple[str, str]]] = {}
            self.requests: list[httpx.Request] = []

        def route(self, url: str, headers: list[tuple[str, str]]) -> None:
            self.routes[url] = headers

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            headers = self.routes.get(str(request.url))
            if headers is None:
                return httpx.Response(404)
            return httpx.Response(200, headers=headers, content=b"ok")

    return HeadersServer()
