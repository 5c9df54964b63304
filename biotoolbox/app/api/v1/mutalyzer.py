# File: biotoolbox/app/api/v1/mutalyzer.py
# Version: v0.1.0
"""
Mutalyzer passthrough proxy (avoids CORS issues for the browser client).

GET /api/mutalyzer?endpoint=/normalize/NM_003002.2:c.274G>T
  - Forwards a GET to MUTALYZER_API_BASE + endpoint.
  - 400 when `endpoint` is missing, blank or whitespace-only, or not a path.
  - Upstream redirects are followed before the status is checked.
  - Upstream non-2xx status is returned as-is with an {"error": ...} body.
  - Transport failures and undecodable bodies -> 500.
  - Success responses carry a public Cache-Control header for intermediaries.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from biotoolbox.app.core.config import settings
from biotoolbox.app.services.mutalyzer_client import (
    MutalyzerClient,
    MutalyzerError,
    MutalyzerUpstreamError,
    get_mutalyzer_client,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["mutalyzer"])


@router.get("/mutalyzer")
async def mutalyzer_proxy(
    endpoint: Optional[str] = Query(None, description="Mutalyzer API path, e.g. /normalize/<description>"),
    client: MutalyzerClient = Depends(get_mutalyzer_client),
) -> JSONResponse:
    if not endpoint or not endpoint.strip():
        return JSONResponse({"error": "Missing endpoint parameter"}, status_code=400)
    if not endpoint.startswith("/"):
        return JSONResponse({"error": "Endpoint must start with '/'"}, status_code=400)

    try:
        data = await client.fetch(endpoint)
    except MutalyzerUpstreamError as exc:
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)
    except MutalyzerError as exc:
        logger.error("Mutalyzer proxy error: %s", exc)
        return JSONResponse({"error": str(exc) or "Unknown error"}, status_code=500)

    return JSONResponse(
        data,
        status_code=200,
        headers={"Cache-Control": settings.MUTALYZER_CACHE_CONTROL},
    )
