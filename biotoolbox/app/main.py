# File: biotoolbox/app/main.py
# Version: v0.4.0
"""
FastAPI app entry.

- Keeps all route assembly in biotoolbox/app/api/v1/api.py.
- Mounts /api/* via `api_router` (prefix from settings.API_PREFIX).
- CORS origins come from settings.CORS_ORIGINS.

Run locally:
    uvicorn biotoolbox.app.main:app --reload
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biotoolbox.app.api.v1.api import api_router
from biotoolbox.app.core.config import settings

logging.getLogger("biotoolbox").setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)
