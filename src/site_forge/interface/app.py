"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from site_forge.interface.error_handlers import register_error_handlers
from site_forge.interface.routes import router


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Site Forge",
        version="1.0.0",
        description=(
            "Compiles a natural-language prompt into a themed booking-site "
            "configuration and file set, and audits site files for template "
            "leftovers, placeholders and missing SEO tags."
        ),
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (liveness) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
