"""
DragNotes Backend — Auth Route Handlers
=========================================

What:  POST /api/auth/signup, POST /api/auth/login, GET /api/auth/profile.
How:   Request bodies are validated by the schemas, then delegated to the
       Authenticator. Errors propagate to the global exception handlers.
"""

import logging

from fastapi import APIRouter, Depends

from dragnotes.dependencies import get_authenticator, require_auth
from dragnotes.schemas.auth import (
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    SignupRequest,
    SignupResponse,
    UserResponse,
)
from dragnotes.schemas.note import ErrorResponse
from dragnotes.services.access_guard import AuthContext
from dragnotes.services.auth_service import Authenticator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/signup",
    status_code=201,
    response_model=SignupResponse,
    responses={
        422: {"description": "Invalid input or email already exists", "model": ErrorResponse},
    },
    summary="Create a user account",
)
async def signup(
    body: SignupRequest,
    auth: Authenticator = Depends(get_authenticator),
) -> SignupResponse:
    user = await auth.signup(
        email=body.email,
        password=body.password,
        username=body.username,
    )
    return SignupResponse(user_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "Invalid credentials", "model": ErrorResponse},
        422: {"description": "Malformed input", "model": ErrorResponse},
    },
    summary="Exchange email and password for a bearer token",
)
async def login(
    body: LoginRequest,
    auth: Authenticator = Depends(get_authenticator),
) -> LoginResponse:
    result = await auth.login(email=body.email, password=body.password)
    return LoginResponse(
        token=result.token,
        expires_in=result.expires_in,
        user_id=result.user_id,
        user=UserResponse.model_validate(result.user),
    )


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Fetch the caller's profile",
)
async def profile(ctx: AuthContext = Depends(require_auth)) -> ProfileResponse:
    return ProfileResponse(user=UserResponse.model_validate(ctx.user))
