"""FastAPI application entrypoint for the YouTube embed parameter service."""
from __future__ import annotations

from typing import Final

from fastapi import FastAPI

from yt_embed.core.config import get_settings, Settings
from yt_embed.core.logging_cfg import setup_logging
from yt_embed.api.http import router as api_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Notes
    -----
    - Logging is configured up front based on settings; settings are loaded once.
    - All parameter building is synchronous and side-effect free.

    Returns
    -------
    FastAPI
        The configured FastAPI application.
    """

    settings: Settings = get_settings()
    setup_logging(settings.debug)

    app: FastAPI = FastAPI(title=settings.app_name)
    app.include_router(api_router)

    @app.get("/health", tags=["system"])
    def health() -> dict[str, str]:
        """Health check endpoint.

        Returns
        -------
        dict[str, str]
            A simple status payload with the configured embed base URL.
        """

        return {"status": "ok", "embedBaseUrl": settings.embed_base_url}

    return app


app: Final[FastAPI] = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("yt_embed.main:app", host="127.0.0.1", port=8000, reload=True)
