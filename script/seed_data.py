#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Users - 1 admin + 4 regular users, all sharing DEFAULT_PASSWORD
2. Create Events - published and drafted events across every category
3. Book Tickets - a few reservations through the reservation ledger, one checked in

Notes:
- Existing tickets, events and users are wiped first
- Tickets go through ReservationLedgerImpl, so the issued counters stay consistent
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, func, select

from eventpass.platform.database.orm_db_setting import (
    Database,
    create_db_and_tables,
    dispose_engine,
)
from eventpass.service.ticketing.domain.entity.event_entity import EventEntity
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.enum.event_category import EventCategory
from eventpass.service.ticketing.domain.enum.event_status import EventStatus
from eventpass.service.ticketing.domain.enum.user_role import UserRole
from eventpass.service.ticketing.driven_adapter.model import EventModel, TicketModel, UserModel
from eventpass.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.reservation_ledger_impl import (
    ReservationLedgerImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


DEFAULT_PASSWORD = 'password123'


@dataclass
class UserConfig:
    """User seed configuration"""

    email: str
    name: str
    phone: str
    role: UserRole = UserRole.USER


@dataclass
class EventConfig:
    """Event seed configuration; ``owner`` indexes into TEST_USERS"""

    owner: int
    title: str
    description: str
    days_from_now: int
    location: str
    category: EventCategory
    quantity: int
    status: EventStatus = EventStatus.PUBLISHED
    image: str | None = None


TEST_USERS = [
    UserConfig('admin@example.com', 'Admin User', '+1 (555) 000-0001', UserRole.ADMIN),
    UserConfig('john.doe@example.com', 'John Doe', '+1 (555) 000-0002'),
    UserConfig('jane.smith@example.com', 'Jane Smith', '+1 (555) 000-0003'),
    UserConfig('alice.johnson@example.com', 'Alice Johnson', '+1 (555) 000-0004'),
    UserConfig('bob.williams@example.com', 'Bob Williams', '+1 (555) 000-0005'),
]

TEST_EVENTS = [
    EventConfig(
        owner=1,
        title='Summer Music Festival',
        description='Top artists from around the world. Food, drinks, and great music await!',
        days_from_now=30,
        location='Central Park, New York',
        category=EventCategory.FESTIVAL,
        quantity=5000,
        image='https://images.unsplash.com/photo-1470229722913-7c0e2dbbafd3?w=800',
    ),
    EventConfig(
        owner=2,
        title='Tech Conference',
        description='Talks on AI, Web3, and the future of software development.',
        days_from_now=45,
        location='Convention Center, San Francisco',
        category=EventCategory.CONFERENCE,
        quantity=1000,
    ),
    EventConfig(
        owner=1,
        title='Mountain Hiking Adventure',
        description='Explore mountain trails with experienced guides.',
        days_from_now=20,
        location='Rocky Mountains, Colorado',
        category=EventCategory.HIKING,
        quantity=50,
    ),
    EventConfig(
        owner=3,
        title='Board Game Night',
        description='Classic and modern board games, snacks included.',
        days_from_now=7,
        location='The Game Hub, Seattle',
        category=EventCategory.GAMES,
        quantity=2,
    ),
    EventConfig(
        owner=2,
        title='Rooftop Party',
        description='Still being planned.',
        days_from_now=60,
        location='Skyline Terrace, Chicago',
        category=EventCategory.PARTY,
        quantity=150,
        status=EventStatus.DRAFTED,
    ),
]

# (user index, event index)
TEST_BOOKINGS = [(3, 0), (4, 0), (3, 2), (4, 3), (2, 3)]


async def clear_data(database: Database) -> None:
    print('🧹 Clearing existing data...')
    async with database.session() as session:
        async with session.begin():
            await session.execute(delete(TicketModel))
            await session.execute(delete(EventModel))
            await session.execute(delete(UserModel))


async def create_users(database: Database) -> list[UserEntity]:
    print(f'👥 Creating {len(TEST_USERS)} users...')
    user_repo = UserCommandRepoImpl(session_factory=database.session)
    password_hasher = BcryptPasswordHasher()

    users = []
    for config in TEST_USERS:
        user = UserEntity(email=config.email, name=config.name, phone=config.phone, role=config.role)
        user.set_password(DEFAULT_PASSWORD, password_hasher)
        created_user = await user_repo.create(user)
        print(f'   ✅ Created {config.role.value}: ID={created_user.id}, Email={created_user.email}')
        users.append(created_user)

    print(f'   📧 Credentials: {DEFAULT_PASSWORD}')
    return users


async def create_events(database: Database, users: list[UserEntity]) -> list[EventEntity]:
    print(f'🎉 Creating {len(TEST_EVENTS)} events...')
    event_repo = EventCommandRepoImpl(session_factory=database.session)
    now = datetime.now(timezone.utc)

    events = []
    for config in TEST_EVENTS:
        event = await event_repo.create(
            event=EventEntity(
                title=config.title,
                description=config.description,
                date_time=now + timedelta(days=config.days_from_now),
                location=config.location,
                image=config.image,
                category=config.category,
                status=config.status,
                quantity=config.quantity,
                user_id=users[config.owner].id,  # type: ignore[arg-type]
            )
        )
        print(f'   ✅ Created event: ID={event.id}, Title={event.title} ({event.status.value})')
        events.append(event)
    return events


async def book_tickets(
    database: Database, users: list[UserEntity], events: list[EventEntity]
) -> None:
    print(f'🎫 Booking {len(TEST_BOOKINGS)} tickets...')
    ledger = ReservationLedgerImpl(session_factory=database.session)

    tickets = []
    for user_index, event_index in TEST_BOOKINGS:
        ticket = await ledger.reserve(
            event_id=events[event_index].id,  # type: ignore[arg-type]
            user_id=users[user_index].id,  # type: ignore[arg-type]
        )
        print(f'   ✅ {users[user_index].name} -> {events[event_index].title}: {ticket.id}')
        tickets.append(ticket)

    # The admin checks in the first ticket
    checked_in = await ledger.check_in(ticket_id=tickets[0].id, actor=users[0])
    print(f'   ✅ Checked in ticket {checked_in.id}')


async def verify_data(database: Database) -> None:
    print('🔍 Verifying seeded data...')
    async with database.session() as session:
        for model in (UserModel, EventModel, TicketModel):
            count = await session.scalar(select(func.count()).select_from(model))
            print(f'   {model.__tablename__.capitalize()} count: {count}')

        result = await session.execute(
            select(EventModel.id, EventModel.title, EventModel.tickets_issued, EventModel.quantity)
        )
        for event_id, title, issued, quantity in result.all():
            print(f'      Event ID={event_id}, Title={title}, Issued={issued}/{quantity}')

    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = Database()
    try:
        await create_db_and_tables()
        await clear_data(database)
        users = await create_users(database)
        print()

        events = await create_events(database, users)
        print()

        await book_tickets(database, users, events)
        print()

        await verify_data(database)

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Test accounts:')
        for config in TEST_USERS:
            print(f'   {config.role.value:<5} {config.email} / {DEFAULT_PASSWORD}')
    finally:
        await dispose_engine()


def run() -> None:
    asyncio.run(main())


if __name__ == '__main__':
    run()
