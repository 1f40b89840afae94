from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio

from eventpass.platform.config.core_setting import settings
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.domain.reservation_error import TransientReservationError


@asynccontextmanager
async def ledger_deadline(operation: str) -> AsyncIterator[None]:
    """Bound one ledger call; a store that doesn't answer in time becomes a retryable error."""
    try:
        with anyio.fail_after(settings.LEDGER_TIMEOUT_SECONDS):
            yield
    except TimeoutError as e:
        Logger.base.warning(
            f'⏱️ [LEDGER] {operation} exceeded {settings.LEDGER_TIMEOUT_SECONDS}s, reporting transient failure'
        )
        raise TransientReservationError('Ticket store timed out, please retry') from e
