from __future__ import annotations

import logging

from fastapi import FastAPI

from profile_api.application.dtos.profile_dto import RootResponse
from profile_api.infrastructure.api.middlewares import add_default_middlewares
from profile_api.infrastructure.api.routes.profile_routes import router as profile_router
from profile_api.infrastructure.config import Settings, configure_logging
from profile_api.infrastructure.facts.cat_fact_client import CatFactClient

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, fact_client: CatFactClient | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    app = FastAPI(
        title="Dynamic Profile API",
        version="0.1.0",
        description="""
        ## Dynamic Profile API

        Returns a static profile enriched with a random cat fact fetched from
        [catfact.ninja](https://catfact.ninja) and the current UTC timestamp.

        ### Endpoints
        - **GET /**: service information
        - **GET /me**: profile, timestamp and cat fact

        ### Upstream failures
        The cat fact API is called with a bounded wait. Timeouts, error statuses and
        malformed responses never change the HTTP status: `/me` still answers
        **200 OK** and the `fact` field describes what went wrong.
        """,
    )
    app.state.settings = settings
    app.state.fact_client = fact_client or CatFactClient(
        url=settings.cat_fact_api_url,
        timeout=settings.external_api_timeout,
    )
    add_default_middlewares(app, settings.env)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the Dynamic Profile API",
        response_description="Welcome message and the profile endpoint path",
    )
    def root():
        """Get API root information."""
        return {
            "message": "Welcome to the Dynamic Profile API (Python/FastAPI).",
            "instructions": "Access the required endpoint for the profile and cat fact data.",
            "endpoint": "/me",
        }

    app.include_router(profile_router)
    return app


def run() -> None:
    import uvicorn

    settings = Settings.from_env()
    app = create_app(settings)
    base_url = f"http://localhost:{settings.port}"
    logger.info("-" * 69)
    logger.info(f"API is running on {base_url}")
    logger.info(f"Access the required endpoint at: {base_url}/me")
    logger.info("-" * 69)
    uvicorn.run(app, host=settings.host, port=settings.port)


app = create_app()


if __name__ == "__main__":
    run()
