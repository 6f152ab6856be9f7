import logging
from types import TracebackType
from typing import Self

import httpx

from .exceptions import RequestBuildError, TransportError
from .models import HeaderMap
from .settings import ValidatorConfig

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


class HeaderClient:
    """HTTP client that sends a request and returns only the response headers.

    Responses are read in streaming mode and closed as soon as their headers
    are captured, so bodies are never downloaded.
    """

    def __init__(self, config: ValidatorConfig | None = None, transport: httpx.BaseTransport | None = None):
        config = config or ValidatorConfig()
        client_kwargs: dict = {
            "timeout": config.timeout,
            "follow_redirects": False,
        }
        if config.disable_connection_reuse:
            client_kwargs["limits"] = httpx.Limits(max_keepalive_connections=0)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.Client(**client_kwargs)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def build_request(self, method: str, url: str, headers: HeaderMap) -> httpx.Request:
        try:
            parsed_url = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Invalid URL '{url}': {str(e)}") from None

        if parsed_url.scheme not in SUPPORTED_SCHEMES:
            raise RequestBuildError(f"Unsupported URL scheme in '{url}', expected one of: {', '.join(SUPPORTED_SCHEMES)}")
        if not parsed_url.host:
            raise RequestBuildError(f"Missing host in URL '{url}'")

        # repeated header lines keep multi-valued headers in order
        header_items = [(name, value) for name, values in headers.items() if values is not None for value in values]

        try:
            return self._client.build_request(method, parsed_url, headers=header_items)
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise RequestBuildError(f"Cannot build {method} request for '{url}': {str(e)}") from None

    def send(self, method: str, url: str, headers: HeaderMap) -> httpx.Headers:
        """Send a request and return the response headers.

        Raises:
            RequestBuildError: If the request cannot be constructed
            TransportError: If sending the request or receiving the response fails
        """
        request = self.build_request(method, url, headers)
        for name, value in request.headers.multi_items():
            logger.debug(f"> {name}: {value}")

        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise TransportError(f"HTTP request timed out: {str(e)}") from None
        except httpx.ConnectError as e:
            raise TransportError(f"HTTP connection error: {str(e)}") from None
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP request failed: {str(e)}") from None

        try:
            logger.debug(f"< {response.http_version} {response.status_code} {response.reason_phrase}")
            for name, value in response.headers.multi_items():
                logger.debug(f"< {name}: {value}")
            return response.headers.copy()
        finally:
            response.close()
