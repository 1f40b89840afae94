from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.enum.user_role import UserRole


def can_modify(actor: UserEntity, owner_id: int) -> bool:
    """Owner-or-admin check for event mutation and ticket check-in."""
    if actor.role == UserRole.ADMIN:
        return True
    return actor.id is not None and actor.id == owner_id
