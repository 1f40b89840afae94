from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from eventpass.platform.config.di import Container
from eventpass.platform.logging.loguru_io import Logger
from eventpass.service.ticketing.app.command.create_user_use_case import CreateUserUseCase
from eventpass.service.ticketing.app.command.update_profile_use_case import UpdateProfileUseCase
from eventpass.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from eventpass.service.ticketing.domain.entity.user_entity import UserEntity
from eventpass.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from eventpass.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
)
from eventpass.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    AuthResponse,
    CreateUserRequest,
    LoginRequest,
    MessageResponse,
    UpdateProfileRequest,
    UserResponse,
)


router = APIRouter()


def _to_user_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        name=user_entity.name,
        role=user_entity.role,
        phone=user_entity.phone,
    )


@router.post('/signup', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def signup(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await use_case.create_user(
        email=request.email,
        password=request.password.get_secret_value(),
        name=request.name,
        phone=request.phone,
    )
    return AuthResponse(user=_to_user_response(user_entity), token=jwt_auth.create_jwt_token(user_entity))


@router.post('/login')
@Logger.io
@inject
async def login(
    request: LoginRequest,
    user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AuthResponse:
    user_entity = await jwt_auth.authenticate_user(
        user_query_repo=user_query_repo,
        email=request.email,
        password=request.password.get_secret_value(),
    )
    return AuthResponse(user=_to_user_response(user_entity), token=jwt_auth.create_jwt_token(user_entity))


@router.post('/logout')
@Logger.io
async def logout(current_user: UserEntity = Depends(get_current_user)) -> MessageResponse:
    # Tokens are stateless; the client drops its copy
    return MessageResponse(message='Logout successful')


@router.get('/me')
@Logger.io
async def get_me(current_user: UserEntity = Depends(get_current_user)) -> UserResponse:
    return _to_user_response(current_user)


@router.put('/profile')
@Logger.io
async def update_profile(
    request: UpdateProfileRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProfileUseCase = Depends(UpdateProfileUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.update(
        user_id=current_user.id,  # type: ignore[arg-type]
        name=request.name,
        phone=request.phone,
    )
    return _to_user_response(user_entity)
