"""
Lightweight REST client for the DemoQA Account API
Responses come back as plain dicts tagged with _status_code and _success
"""

import logging
from typing import Any, Dict, Optional

import httpx

from account_api.config import SuiteConfig, get_config
from account_api.utils.redaction import redact

logger = logging.getLogger(__name__)

USER_ENDPOINT = "/Account/v1/User"
TOKEN_ENDPOINT = "/Account/v1/GenerateToken"

SUPPORTED_METHODS = ("GET", "POST", "DELETE")


class AccountClient:
    """REST client for user account operations

    Use as ``async with AccountClient() as client`` to share one connection
    pool, or call it directly to open a short-lived client per request.
    """

    def __init__(self, config: Optional[SuiteConfig] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
            transport=self._transport,
        )

    async def open(self):
        if self._client is None:
            self._client = self._new_client()

    async def __aenter__(self) -> "AccountClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(self, method: str, endpoint: str, data: Optional[Dict] = None,
                      token: Optional[str] = None) -> Dict[str, Any]:
        """Make REST request, authenticated when a bearer token is given"""
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {method}")

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s payload=%s", method, endpoint, redact(data))

        if self._client is not None:
            response = await self._send(self._client, method, endpoint, headers, data)
        else:
            async with self._new_client() as client:
                response = await self._send(client, method, endpoint, headers, data)

        result = self._parse_response(response)
        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        return result

    @staticmethod
    async def _send(client: httpx.AsyncClient, method: str, endpoint: str,
                    headers: Dict[str, str], data: Optional[Dict]) -> httpx.Response:
        if method == "GET":
            return await client.get(endpoint, headers=headers)
        elif method == "POST":
            return await client.post(endpoint, headers=headers, json=data)
        else:
            return await client.delete(endpoint, headers=headers)

    @staticmethod
    def _parse_response(response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            parsed: Any = {}
        else:
            try:
                parsed = response.json()
            except ValueError:
                parsed = {"raw_response": response.text}

        # Lists and scalars are wrapped so every result is a dict
        if isinstance(parsed, dict):
            result = parsed
        else:
            result = {"data": parsed}

        result["_status_code"] = response.status_code
        result["_success"] = response.status_code < 400
        return result

    async def create_user(self, credentials: Dict[str, str]) -> Dict[str, Any]:
        return await self.request("POST", USER_ENDPOINT, credentials)

    async def generate_token(self, credentials: Dict[str, str]) -> Dict[str, Any]:
        return await self.request("POST", TOKEN_ENDPOINT, credentials)

    async def get_user(self, user_id: str, token: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("GET", f"{USER_ENDPOINT}/{user_id}", token=token)

    async def delete_user(self, user_id: str, token: Optional[str] = None) -> Dict[str, Any]:
        return await self.request("DELETE", f"{USER_ENDPOINT}/{user_id}", token=token)
