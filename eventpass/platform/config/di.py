"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from eventpass.platform.config.core_setting import Settings
from eventpass.platform.database.orm_db_setting import Database
from eventpass.service.ticketing.driven_adapter.document.ticket_document_renderer_impl import (
    TicketDocumentRendererImpl,
)
from eventpass.service.ticketing.driven_adapter.notification.smtp_ticket_notifier_impl import (
    SmtpTicketNotifierImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.event_query_repo_impl import (
    EventQueryRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.reservation_ledger_impl import (
    ReservationLedgerImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from eventpass.service.ticketing.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from eventpass.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from eventpass.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    config_service = providers.Singleton(Settings)

    database = providers.Singleton(Database)

    # Background task group (set by main.py lifespan)
    # Used for fire-and-forget work such as ticket emails
    task_group = providers.Object(None)

    # Repositories (stateless - use session_factory per call)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_ledger = providers.Singleton(
        ReservationLedgerImpl, session_factory=database.provided.session
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth, password_hasher=password_hasher)

    # Tickets: documents and delivery
    ticket_document_renderer = providers.Singleton(TicketDocumentRendererImpl)
    ticket_notifier = providers.Singleton(
        SmtpTicketNotifierImpl, document_renderer=ticket_document_renderer
    )


container = Container()
