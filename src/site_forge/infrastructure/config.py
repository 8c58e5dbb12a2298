"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from ``SITE_FORGE_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="SITE_FORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    output_dir: str = "."
    audit_extensions: tuple[str, ...] = (".tsx", ".ts", ".html", ".jsx", ".js")
    audit_skip_dirs: frozenset[str] = frozenset({"node_modules", ".git", "dist", "build"})
    audit_report_name: str = "audit-report.txt"
    max_file_size_kb: int = 500


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
