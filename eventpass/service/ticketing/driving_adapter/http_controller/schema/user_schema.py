from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, SecretStr

from eventpass.service.ticketing.domain.enum.user_role import UserRole


class CreateUserRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    password: SecretStr = Field(min_length=6)
    phone: str = Field(min_length=1, max_length=32)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'alice@example.com',
                'name': 'Alice',
                'password': 'P@ssw0rd',
                'phone': '+1 555 0100',
            }
        }


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole
    phone: Optional[str] = None


class AuthResponse(BaseModel):
    user: UserResponse
    token: str
    token_type: str = 'bearer'


class MessageResponse(BaseModel):
    message: str


class AdminUserResponse(UserResponse):
    created_at: Optional[datetime] = None
    event_count: int
    ticket_count: int
