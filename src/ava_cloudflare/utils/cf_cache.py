"""Cloudflare cache management."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from ava_cloudflare.models.purge import Credentials, PurgeError, PurgeResult

__all__ = ["API_ROOT", "PURGE_TIMEOUT", "CachePurgeClient"]

logger = logging.getLogger(__name__)

API_ROOT = "https://api.cloudflare.com/client/v4"
PURGE_TIMEOUT = 30.0


class CachePurgeClient:
    def __init__(
        self,
        api_root: str = API_ROOT,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Client for the zone purge_cache endpoint.
        A custom transport can be supplied for testing or proxying.
        """
        self.api_root = api_root.rstrip("/")
        self.transport = transport

    def purge_url(self, zone_id: str) -> str:
        return f"{self.api_root}/zones/{zone_id}/purge_cache"

    def purge(self, credentials: Credentials) -> PurgeResult:
        """Purge everything cached for the zone."""
        if not credentials.is_complete:
            return PurgeResult(
                success=False,
                message="zone_id and api_token are required",
                error=PurgeError.CONFIGURATION,
            )

        url = self.purge_url(credentials.zone_id)
        headers = {
            "Authorization": f"Bearer {credentials.api_token}",
            "Content-Type": "application/json",
        }
        logger.debug("POST %s", url)

        try:
            with httpx.Client(transport=self.transport, timeout=PURGE_TIMEOUT) as client:
                res = client.post(url, headers=headers, json={"purge_everything": True})
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.info("Cache purge transport failure: %s", e)
            return PurgeResult(
                success=False,
                message=f"transport error: {e}",
                error=PurgeError.TRANSPORT,
            )

        data = decode_body(res)

        if res.status_code == 200 and data.get("success"):
            return PurgeResult(
                success=True,
                message="Cloudflare cache purged successfully",
                details=data,
            )

        logger.debug("Cache purge rejected (%s): %s", res.status_code, res.text)
        return PurgeResult(
            success=False,
            message=f"Cloudflare API error: {error_message(data, res.status_code)}",
            details=data,
            error=PurgeError.API,
        )


def decode_body(res: httpx.Response) -> dict[str, Any]:
    """Decoded JSON object of a response, or an empty dict."""
    try:
        data = res.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def error_message(data: dict[str, Any], status_code: int) -> str:
    """Join the messages of a Cloudflare error payload."""
    errors = data.get("errors")
    if not errors or not isinstance(errors, list):
        return f"Unknown error (HTTP {status_code})"

    messages = []
    for error in errors:
        message = error.get("message") if isinstance(error, dict) else None
        messages.append("Unknown error" if message is None else str(message))
    return ", ".join(messages)
