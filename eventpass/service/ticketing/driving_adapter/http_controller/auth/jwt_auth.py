"""
JWT issuance and verification (pyjwt) plus credential checks for login
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from pydantic import SecretStr

from eventpass.platform.config.core_setting import settings
from eventpass.platform.exception.exceptions import AuthenticationError
from eventpass.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from eventpass.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.domain.enum.user_role import UserRole


class JwtAuth:
    def __init__(self, password_hasher: IPasswordHasher) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS
        self.password_hasher = password_hasher

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'name': user_entity.name,
            'role': user_entity.role.value,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError('Token expired')
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, email: str, password: str
    ) -> UserEntity:
        user_entity = UserEntity.validate_user_exists(await user_query_repo.get_by_email(email))
        if not self.password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=user_entity.hashed_password
        ):
            # Same message as unknown email so accounts can't be enumerated
            UserEntity.validate_user_exists(None)

        return user_entity

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        email = payload.get('email')
        name = payload.get('name')
        role = payload.get('role')

        if not user_id or not email or not name or role not in [r.value for r in UserRole]:
            raise AuthenticationError('Invalid token')

        # Rebuilt from the token, no DB round trip
        return UserEntity(id=user_id, email=email, name=name, role=UserRole(role))
