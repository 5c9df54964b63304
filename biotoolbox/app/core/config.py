# File: biotoolbox/app/core/config.py
# Version: v0.4.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Log level
- Variant converter limits and default stop-codon rendering
- Mutalyzer passthrough proxy (upstream base URL, timeout, cache header)

Values can be overridden via environment variables or a `.env` file.
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from biotoolbox.app.core.aminoacid.tables import StopCodonSymbol


class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "BioToolbox"
    APP_VERSION: str = "0.4.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- Logging ---
    LOG_LEVEL: str = "info"

    # --- Variant converter ---
    AA_MAX_LINES: int = 1000
    AA_MAX_LINES_CAP: int = 10000  # upper bound a client may request via maxLines
    AA_DEFAULT_STOP_SYMBOL: StopCodonSymbol = StopCodonSymbol.TER

    # --- Mutalyzer proxy ---
    MUTALYZER_API_BASE: str = "https://mutalyzer.nl/api"
    MUTALYZER_TIMEOUT: float = 30.0
    MUTALYZER_CACHE_CONTROL: str = "public, s-maxage=3600, stale-while-revalidate=86400"

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


settings = Settings()
