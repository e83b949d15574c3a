"""
HTTP transport for Superpowered API communication.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class APIError(Exception):
    """API communication error."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


def error_message_from_body(body: Any, default: str) -> str:
    """Pull the human readable message out of an error payload."""
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return default


def response_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class APIClient:
    """Authenticated request executor for the Superpowered API."""

    def __init__(
        self,
        api_key_id: str,
        api_key_secret: str,
        base_url: str,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key_id or not api_key_secret:
            raise ValueError("api_key_id and api_key_secret are required")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(api_key_id, api_key_secret)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            auth=self._auth,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle HTTP response and raise appropriate errors."""
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = response_body(e.response)
            error_detail = error_message_from_body(body, e.response.text or str(e))
            logger.error(
                f"{e.request.method} {e.request.url.path} failed: "
                f"HTTP {e.response.status_code} {error_detail}"
            )
            raise APIError(error_detail, e.response.status_code, body) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                "Invalid JSON in response", response.status_code, response.text
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Execute an authenticated request against the API.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            params: Query parameters; entries set to None are dropped
            json: JSON request body

        Returns:
            Parsed JSON body, or None for an empty response

        Raises:
            APIError: On connection failure or a non-2xx response
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug(f"{method} {path}")
        try:
            async with self._client() as client:
                response = await client.request(
                    method, path, params=params or None, json=json
                )
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise APIError(f"Connection error: {str(e)}") from e
        return self._handle_response(response)
