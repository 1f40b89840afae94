"""
Shared FastAPI App Factory

Common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventpass.platform.config.core_setting import settings
from eventpass.platform.constant import route_constant
from eventpass.platform.exception.exception_handlers import register_exception_handlers
from eventpass.service.ticketing.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from eventpass.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from eventpass.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)
from eventpass.service.ticketing.driving_adapter.http_controller.user_controller import (
    router as auth_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event discovery and ticketing API',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(auth_router, prefix=route_constant.AUTH_BASE, tags=['auth'])
    app.include_router(event_router, prefix=route_constant.EVENT_BASE, tags=['event'])
    app.include_router(ticket_router, prefix=route_constant.TICKET_BASE, tags=['ticket'])
    app.include_router(admin_router, prefix=route_constant.ADMIN_BASE, tags=['admin'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
