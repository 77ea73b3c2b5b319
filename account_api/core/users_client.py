"""
Thin wrapper around the users lookup endpoint
"""

import logging
from typing import Any, Dict, Optional

import httpx

from account_api.config import get_config

logger = logging.getLogger(__name__)


async def get_user_by_id(user_id, client: Optional[httpx.AsyncClient] = None,
                         base_url: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Fetch a user profile by id.

    Returns the decoded body, or None when the service answers 204 / an
    empty body. HTTP error statuses surface as ``httpx.HTTPStatusError``;
    transport failures and non-JSON success bodies (``ValueError``) are
    logged and re-raised unchanged.
    """
    timeout = None
    if base_url is None or client is None:
        config = get_config()
        base_url = base_url or config.users_api_base_url
        timeout = config.request_timeout

    url = f"{base_url.rstrip('/')}/users/{user_id}"

    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=timeout) as owned_client:
                response = await owned_client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("GET %s failed with HTTP %s", url, e.response.status_code)
        raise
    except httpx.RequestError as e:
        logger.warning("GET %s failed: %s", url, e)
        raise

    if response.status_code == 204 or not response.content:
        return None

    try:
        return response.json()
    except ValueError:
        logger.warning("GET %s returned a non-JSON body (HTTP %s)", url, response.status_code)
        raise
