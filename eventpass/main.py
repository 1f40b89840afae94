"""
Production FastAPI Application

Serve with granian:
    granian --interface asgi eventpass.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from eventpass.platform.app_factory import create_app
from eventpass.platform.config.di import container
from eventpass.platform.config.wire_modules import WIRE_MODULES
from eventpass.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from eventpass.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [EventPass] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [EventPass] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [EventPass] Database tables ready')

    # Background task group for fire-and-forget work (ticket emails)
    async with anyio.create_task_group() as tg:
        container.task_group.override(tg)
        Logger.base.info('✅ [EventPass] Ready to serve requests')

        yield

        Logger.base.info('🛑 [EventPass] Shutting down...')
        container.task_group.reset_override()
        tg.cancel_scope.cancel()

    await dispose_engine()
    Logger.base.info('🗄️  [EventPass] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [EventPass] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
