from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onboarding_proxy.api import health, onboarding
from onboarding_proxy.core.config import Settings, get_settings
from onboarding_proxy.core.errors import register_error_handlers
from onboarding_proxy.core.logging import setup_logging, CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = httpx.AsyncClient(timeout=app.state.settings.UPSTREAM_TIMEOUT_SECONDS)
    try:
        yield
    finally:
        await app.state.http_client.aclose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Onboarding Proxy",
        description="Server-side proxy between the landing page form and the onboarding backend",
        version=health.VERSION,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=False,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_middleware(CorrelationIdMiddleware)

    # Include routers
    app.include_router(onboarding.router, prefix="/api/onboarding", tags=["onboarding"])
    app.include_router(health.router, tags=["health"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
