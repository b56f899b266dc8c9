"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from repo_similarity.interface.error_handlers import register_error_handlers
from repo_similarity.interface.routes import router


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Repository Similarity",
        version="1.0.0",
        description=(
            "Fetches source files from two public GitHub repositories and "
            "reports how similar they are: an overall score, the number of "
            "matched files and the most similar file pairs."
        ),
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (liveness) ─────────────────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
