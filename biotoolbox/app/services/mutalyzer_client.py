# File: biotoolbox/app/services/mutalyzer_client.py
# Version: v0.1.1
"""
Thin async client for the Mutalyzer HGVS normalization API.

Only plain GET passthrough is supported: the caller supplies the endpoint path
(e.g. `/normalize/NM_003002.2:c.274G>T`) and receives the decoded JSON body.
Redirects are followed. No retries and no caching are done here; the proxy
route sets a cache header for intermediaries.

Errors:
- MutalyzerUpstreamError: upstream answered with a non-2xx status.
- MutalyzerError: bad endpoint, transport failure, or a body that is not JSON.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from biotoolbox.app.core.config import settings

logger = logging.getLogger(__name__)


class MutalyzerError(Exception):
    """Failure talking to Mutalyzer (no usable upstream response)."""


class MutalyzerUpstreamError(MutalyzerError):
    """Mutalyzer answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"Mutalyzer API error: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class MutalyzerClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.MUTALYZER_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.MUTALYZER_TIMEOUT
        self._transport = transport

    def build_url(self, endpoint: str) -> str:
        if not endpoint.startswith("/"):
            raise MutalyzerError(f"Endpoint must start with '/': {endpoint!r}")
        return f"{self.base_url}{endpoint}"

    async def fetch(self, endpoint: str) -> Any:
        """GET `endpoint` from Mutalyzer and return the decoded JSON payload."""
        url = self.build_url(endpoint)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        ) as client:
            try:
                response = await client.get(url, headers={"Accept": "application/json"})
            except httpx.HTTPError as exc:
                logger.error("Mutalyzer request failed: %s (%s)", url, exc)
                raise MutalyzerError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.warning("Mutalyzer returned %d for %s", response.status_code, url)
            raise MutalyzerUpstreamError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise MutalyzerError(f"Invalid JSON from Mutalyzer: {exc}") from exc


def get_mutalyzer_client() -> MutalyzerClient:
    """FastAPI dependency; tests override it with a MockTransport-backed client."""
    return MutalyzerClient()
