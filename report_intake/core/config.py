"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from report_intake import __version__


@dataclass(frozen=True)
class Settings:
    app_name: str = "Report Intake Mock Server"
    version: str = __version__
    host: str = "0.0.0.0"
    port: int = 3000
    max_body_bytes: int = 10 * 1024 * 1024
    cors_allow_origins: str = "*"


settings = Settings()
