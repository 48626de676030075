"""Admin page for status and manual purging."""
from __future__ import annotations

from typing import Callable, Literal, Mapping

from pydantic import BaseModel

from ava_cloudflare.hooks import purge_and_log
from ava_cloudflare.models.settings import EnvSettings
from ava_cloudflare.utils.cf_cache import CachePurgeClient

PAGE_TITLE = "Ava for Cloudflare®"

INVALID_TOKEN_MESSAGE = "Invalid security token. Please try again."
NOT_CONFIGURED_MESSAGE = (
    "Cloudflare is not configured. "
    "Please add zone_id and api_token to your configuration."
)


class AdminView(BaseModel):
    title: str = PAGE_TITLE
    configured: bool
    zone_id: str | None = None
    api_token: str | None = None
    message: str | None = None
    message_type: Literal["success", "error"] | None = None


class AdminPage:
    def __init__(
        self,
        settings: EnvSettings,
        verify_csrf: Callable[[str], bool],
        client: CachePurgeClient | None = None,
    ):
        """Handler for the admin page; CSRF checking is left to the host."""
        self.settings = settings
        self.verify_csrf = verify_csrf
        self.client = client or CachePurgeClient()

    def handle(self, method: str, form: Mapping[str, str] | None = None) -> AdminView:
        form = form or {}
        message = None
        message_type = None

        if method.upper() == "POST" and form.get("action") == "purge":
            if not self.verify_csrf(form.get("_token", "")):
                message, message_type = INVALID_TOKEN_MESSAGE, "error"
            elif not self.settings.is_configured:
                message, message_type = NOT_CONFIGURED_MESSAGE, "error"
            else:
                result = purge_and_log(self.settings, self.client)
                message, message_type = result.message, result.message_type

        return AdminView(
            configured=self.settings.is_configured,
            zone_id=self.settings.zone_id_display,
            api_token=self.settings.api_token_display(mask="••••••••"),
            message=message,
            message_type=message_type,
        )
