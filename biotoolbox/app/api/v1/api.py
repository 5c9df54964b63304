# File: biotoolbox/app/api/v1/api.py
# Version: v0.8.0
"""
v1 API aggregator.

Routers included under /api:
- health
- aa_converter (protein variant three-letter <-> one-letter notation)
- mutalyzer (passthrough proxy to the Mutalyzer HGVS API)
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router
from . import aa_converter as aa_converter_router
from . import mutalyzer as mutalyzer_router

# All v1 JSON APIs live under /api via api_router
api_router = APIRouter()
api_router.include_router(health_router.router)
api_router.include_router(aa_converter_router.router)
api_router.include_router(mutalyzer_router.router)
