# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# POST /api/register - create an account
# POST /api/login    - exchange credentials for a session token
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import UserServiceDep, run_in_worker
from core.models.user import LoginRequest, LoginResponse, MessageResponse, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(body: RegisterRequest, service: UserServiceDep) -> MessageResponse:
    """
    Register a new user.

    Requires name, entryNo and password. The password is stored as a
    bcrypt hash.

    Raises:
        400: If a field is missing or the entry number is taken
    """
    await run_in_worker(service.register, body.name, body.entry_no, body.password)
    return MessageResponse(message="User Created")


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, service: UserServiceDep) -> LoginResponse:
    """
    Log in with entry number and password.

    Returns a session token together with the user's name and booked events.

    Raises:
        401: If the credentials are invalid
        500: If the database fails
    """
    return await run_in_worker(service.login, body.entry_no, body.password)
