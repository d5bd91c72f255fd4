"""FastAPI application factory."""

from fastapi import FastAPI

from nutrition_analytics.api.analytics import router as analytics_router
from nutrition_analytics.app_logging import configure_logging
from nutrition_analytics.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level.upper())

    app = FastAPI(title="Nutrition Analytics")
    app.state.container = container

    app.include_router(analytics_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
