from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from eventpass.platform.exception.exceptions import DomainError, LoginError
from eventpass.service.ticketing.domain.enum.user_role import UserRole


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    phone: Optional[str] = None
    id: Optional[int] = None
    role: UserRole = UserRole.USER
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Invalid email or password')

        return user_entity

    @staticmethod
    def validate_role(role: str) -> None:
        """Validate if the role is valid"""
        valid_roles = [r.value for r in UserRole]
        if role not in valid_roles:
            raise DomainError(f'Invalid role: {role}. Must be one of: {", ".join(valid_roles)}')

    def set_password(self, plain_password: str, password_hasher) -> None:
        """Set password using provided password hasher"""
        from eventpass.service.ticketing.app.interface.i_password_hasher import IPasswordHasher

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(plain_password=SecretStr(plain_password))


@attrs.define
class UserSummaryEntity:
    """Admin listing row: a user with how many events they host and tickets they hold."""

    id: int
    email: str
    name: str
    role: UserRole
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    event_count: int = 0
    ticket_count: int = 0
