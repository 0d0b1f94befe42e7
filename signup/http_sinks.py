"""HTTP sinks posting to the FlexSync backend API."""

import logging
from typing import Any

import httpx

from flexsync.settings import get_setting
from signup.errors import InvitationFailed, SignupError, SubmissionFailed

logger = logging.getLogger(__name__)


async def _post_json(
    url: str,
    payload: dict[str, Any],
    timeout: float,
    error_cls: type[SignupError],
) -> dict[str, Any]:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(url, json=payload)
    except httpx.TimeoutException as e:
        raise error_cls("Connection timeout") from e
    except httpx.HTTPError as e:
        logger.debug("POST %s failed: %s", url, e)
        raise error_cls(str(e)) from e
    if resp.status_code >= 400:
        raise error_cls(f"HTTP {resp.status_code}")
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class HttpSubmissionSink:
    """POSTs the coach profile as JSON."""

    def __init__(self, base_url: str, path: str = "/api/coaches", timeout: float = 10.0) -> None:
        self.url = base_url.rstrip("/") + path
        self.timeout = timeout

    async def __call__(self, profile: dict[str, str]) -> dict[str, Any]:
        return await _post_json(self.url, profile, self.timeout, SubmissionFailed)


class HttpInvitationSink:
    """POSTs {"email": ...} for one client invitation."""

    def __init__(
        self, base_url: str, path: str = "/api/invitations", timeout: float = 10.0
    ) -> None:
        self.url = base_url.rstrip("/") + path
        self.timeout = timeout

    async def __call__(self, email: str) -> dict[str, Any]:
        return await _post_json(self.url, {"email": email}, self.timeout, InvitationFailed)


def sinks_from_settings(
    settings: dict[str, Any],
) -> tuple[HttpSubmissionSink, HttpInvitationSink]:
    """Build both sinks from the `api` settings section."""
    base_url = get_setting(settings, "api.base_url", "http://localhost:3000")
    timeout = float(get_setting(settings, "api.timeout", 10.0))
    return (
        HttpSubmissionSink(
            base_url, get_setting(settings, "api.profile_path", "/api/coaches"), timeout
        ),
        HttpInvitationSink(
            base_url, get_setting(settings, "api.invitation_path", "/api/invitations"), timeout
        ),
    )
