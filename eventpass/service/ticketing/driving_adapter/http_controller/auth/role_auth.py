from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventpass.platform.config.di import Container
from eventpass.platform.exception.exceptions import ForbiddenError
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    """Resolve the caller from ``Authorization: Bearer <jwt>`` (stateless, no DB query)."""
    return jwt_auth.get_current_user_info_from_jwt(credentials.credentials if credentials else None)


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not current_user.is_admin:
        raise ForbiddenError('Access denied. Admin privileges required.')
    return current_user
