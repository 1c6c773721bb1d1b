"""Authentication endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from foundershub.api.deps import get_db
from foundershub.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserOut,
)
from foundershub.core.exceptions import status_code_for
from foundershub.core.rate_limit import limiter, RATE_LIMITS
from foundershub.core.security import create_user_token
from foundershub.services.auth import authenticate_user, register_user, InvalidCredentialsError

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
@limiter.limit(RATE_LIMITS["login"])
async def login(
    request: Request,
    credentials: LoginRequest,
    db: Session = Depends(get_db)
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    Example:
        Request:
            POST /api/login
            {
                "email": "ada@example.com",
                "password": "hunter2"
            }

        Response (200):
            {
                "user": {"id": 1, "name": "Ada", "email": "ada@example.com",
                         "startupName": "Engines", "startupUrl": null},
                "token": "eyJhbGc..."
            }

        Response (401):
            {
                "error": "Invalid email or password"
            }

    Note:
        The token is valid for seven days and carries id, email and name.
        Send it back as ``Authorization: Bearer <token>``.
    """
    try:
        user = authenticate_user(db, credentials.email, credentials.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return LoginResponse(user=UserOut.model_validate(user), token=create_user_token(user))


@router.post("/register", response_model=RegisterResponse, status_code=201)
@limiter.limit(RATE_LIMITS["register"])
async def register(
    request: Request,
    payload: RegisterRequest,
    db: Session = Depends(get_db)
) -> RegisterResponse:
    """
    Create an account.

    name, email, password and startupName are required; startupUrl is
    optional. New accounts start "Out of Office".

    Raises:
        HTTPException: 400 if a required field is missing
        HTTPException: 409 if the email is already registered
    """
    try:
        user = register_user(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            startup_name=payload.startup_name,
            startup_url=payload.startup_url,
        )
    except ValueError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))

    return RegisterResponse(user=UserOut.model_validate(user))
