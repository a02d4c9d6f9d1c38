"""
DragNotes Backend — Auth Request/Response Schemas
===================================================

What:  Pydantic models for signup, login and profile.
How:   Email syntax is checked by EmailStr (email-validator); the password
       policy lives in the Authenticator so it follows PASSWORD_MIN_LENGTH.
       No response model has a password or hash field.
"""

import uuid
from typing import Optional

from pydantic import EmailStr, Field

from dragnotes.schemas.note import CamelModel


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(max_length=128)
    username: Optional[str] = Field(default=None, max_length=255)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128, description="Password is required")


class UserResponse(CamelModel):
    """Public profile fields."""
    id: uuid.UUID
    email: str
    username: Optional[str] = None


class SignupResponse(CamelModel):
    message: str = "User created successfully"
    user_id: uuid.UUID


class LoginResponse(CamelModel):
    message: str = "Login successful"
    token: str
    expires_in: int = Field(description="Token lifetime in seconds")
    user_id: uuid.UUID
    user: UserResponse


class ProfileResponse(CamelModel):
    message: str = "Profile fetched successfully"
    user: UserResponse
