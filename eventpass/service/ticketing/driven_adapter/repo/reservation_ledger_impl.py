"""
Reservation Ledger - transactional ticket issuance

Capacity is an issued-ticket counter on the event row, moved only by a guarded
``UPDATE ... SET tickets_issued = tickets_issued + 1 WHERE tickets_issued < quantity``.
The increment and the ticket insert share one transaction, and the
``uq_ticket_event_user`` constraint rejects a second live ticket for the same pair.
Two requests racing for the last unit therefore serialize on the event row: one
commits, the other matches zero rows and is classified as sold out.

When the guarded update matches nothing, the rejection is classified inside the
same transaction in the documented precedence:
event missing -> not published -> already booked -> sold out.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, Iterator

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, ProgrammingError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession
import uuid_utils

from eventpass.platform.exception.exceptions import CustomBaseError
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.interface.i_reservation_ledger import IReservationLedger
from eventpass.service.ticketing.domain.access_policy import can_modify
from eventpass.service.ticketing.domain.entity.ticket_entity import TicketEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.enum.event_status import EventStatus
from eventpass.service.ticketing.domain.reservation_error import (
    AlreadyBookedError,
    AlreadyCheckedInError,
    EventNotFoundError,
    EventNotPublishedError,
    SoldOutError,
    TicketForbiddenError,
    TicketNotFoundError,
    TransientReservationError,
)
from eventpass.service.ticketing.driven_adapter.model.event_model import EventModel
from eventpass.service.ticketing.driven_adapter.model.ticket_model import TicketModel


@contextmanager
def _store_guard(operation: str) -> Iterator[None]:
    """Translate store outages, lock waits and pool exhaustion into TransientReservationError."""
    try:
        yield
    except CustomBaseError:
        raise
    except (IntegrityError, ProgrammingError, DataError):
        # Schema or data bugs: retrying cannot help
        raise
    except (DBAPIError, PoolTimeoutError, ConnectionError) as e:
        Logger.base.warning(f'⚠️ [LEDGER] {operation} failed on the store: {type(e).__name__}: {e}')
        raise TransientReservationError() from e


class ReservationLedgerImpl(IReservationLedger):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def reserve(self, *, event_id: int, user_id: int) -> TicketEntity:
        with _store_guard('reserve'):
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        # The guarded increment is the transaction's first statement so the
                        # event row (or SQLite's write lock) is taken before anything is read
                        result = await session.execute(
                            update(EventModel)
                            .where(
                                EventModel.id == event_id,
                                EventModel.status == EventStatus.PUBLISHED.value,
                                EventModel.tickets_issued < EventModel.quantity,
                            )
                            .values(tickets_issued=EventModel.tickets_issued + 1)
                            .execution_options(synchronize_session=False)
                        )
                        if result.rowcount != 1:
                            raise await self._classify_rejection(
                                session, event_id=event_id, user_id=user_id
                            )

                        ticket_model = TicketModel(
                            id=str(uuid_utils.uuid7()),
                            event_id=event_id,
                            user_id=user_id,
                            check_in=False,
                            check_in_at=None,
                            created_at=datetime.now(timezone.utc),
                        )
                        session.add(ticket_model)
                        await session.flush()
                        ticket = self._model_to_entity(ticket_model)
            except IntegrityError:
                # Increment rolled back with the failed insert; the pair constraint fired
                if await self._has_live_ticket(event_id=event_id, user_id=user_id):
                    raise AlreadyBookedError() from None
                raise

        Logger.base.info(f'🎫 [LEDGER] Issued ticket {ticket.id} for event {event_id} to user {user_id}')
        return ticket

    @Logger.io
    async def cancel(self, *, ticket_id: str, actor: UserEntity) -> TicketEntity:
        with _store_guard('cancel'):
            async with self.session_factory() as session:
                async with session.begin():
                    ticket_model = (
                        await session.execute(
                            select(TicketModel).where(TicketModel.id == ticket_id).with_for_update()
                        )
                    ).scalar_one_or_none()

                    if ticket_model is None:
                        raise TicketNotFoundError()
                    # Holder only, no admin override
                    if ticket_model.user_id != actor.id:
                        raise TicketForbiddenError('You do not have permission to cancel this ticket')
                    if ticket_model.check_in:
                        raise AlreadyCheckedInError('Checked-in tickets cannot be cancelled')

                    ticket = self._model_to_entity(ticket_model)

                    deleted = await session.execute(
                        delete(TicketModel)
                        .where(TicketModel.id == ticket_id, TicketModel.check_in.is_(False))
                        .execution_options(synchronize_session=False)
                    )
                    if deleted.rowcount != 1:
                        # Lost a race with check-in or another cancel (stores without row locks)
                        still_there = await session.scalar(
                            select(exists().where(TicketModel.id == ticket_id))
                        )
                        raise AlreadyCheckedInError() if still_there else TicketNotFoundError()

                    await session.execute(
                        update(EventModel)
                        .where(EventModel.id == ticket.event_id, EventModel.tickets_issued > 0)
                        .values(tickets_issued=EventModel.tickets_issued - 1)
                        .execution_options(synchronize_session=False)
                    )

        Logger.base.info(f'🗑️ [LEDGER] Cancelled ticket {ticket_id}, freed one unit of event {ticket.event_id}')
        return ticket

    @Logger.io
    async def check_in(self, *, ticket_id: str, actor: UserEntity) -> TicketEntity:
        with _store_guard('check_in'):
            async with self.session_factory() as session:
                async with session.begin():
                    row = (
                        await session.execute(
                            select(TicketModel, EventModel.user_id)
                            .join(EventModel, EventModel.id == TicketModel.event_id)
                            .where(TicketModel.id == ticket_id)
                            .with_for_update(of=TicketModel)
                        )
                    ).one_or_none()

                    if row is None:
                        raise TicketNotFoundError()
                    ticket_model, event_owner_id = row
                    if not can_modify(actor, event_owner_id):
                        raise TicketForbiddenError(
                            'Only the event owner or an admin can check in tickets'
                        )
                    if ticket_model.check_in:
                        raise AlreadyCheckedInError()

                    checked_in_at = datetime.now(timezone.utc)
                    updated = await session.execute(
                        update(TicketModel)
                        .where(TicketModel.id == ticket_id, TicketModel.check_in.is_(False))
                        .values(check_in=True, check_in_at=checked_in_at)
                        .execution_options(synchronize_session=False)
                    )
                    if updated.rowcount != 1:
                        raise AlreadyCheckedInError()

                    ticket = self._model_to_entity(ticket_model)
                    ticket.check_in = True
                    ticket.check_in_at = checked_in_at

        Logger.base.info(f'✅ [LEDGER] Checked in ticket {ticket_id}')
        return ticket

    async def _classify_rejection(
        self, session: AsyncSession, *, event_id: int, user_id: int
    ) -> CustomBaseError:
        status = await session.scalar(select(EventModel.status).where(EventModel.id == event_id))
        if status is None:
            return EventNotFoundError()
        if status != EventStatus.PUBLISHED.value:
            return EventNotPublishedError()
        already_booked = await session.scalar(
            select(
                exists().where(TicketModel.event_id == event_id, TicketModel.user_id == user_id)
            )
        )
        if already_booked:
            return AlreadyBookedError()
        return SoldOutError()

    async def _has_live_ticket(self, *, event_id: int, user_id: int) -> bool:
        async with self.session_factory() as session:
            return bool(
                await session.scalar(
                    select(
                        exists().where(
                            TicketModel.event_id == event_id, TicketModel.user_id == user_id
                        )
                    )
                )
            )

    @staticmethod
    def _model_to_entity(ticket_model: TicketModel) -> TicketEntity:
        return TicketEntity(
            id=ticket_model.id,
            event_id=ticket_model.event_id,
            user_id=ticket_model.user_id,
            check_in=ticket_model.check_in,
            check_in_at=ticket_model.check_in_at,
            created_at=ticket_model.created_at,
        )
