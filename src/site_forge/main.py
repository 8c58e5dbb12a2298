from __future__ import annotations
import logging
import uvicorn
from site_forge.infrastructure.config import get_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


def main() -> None:
    """Start the uvicorn ASGI server."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "site_forge.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
