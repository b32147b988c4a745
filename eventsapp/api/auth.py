"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eventsapp.api.policy import authorize
from eventsapp.database import get_db
from eventsapp.schemas.auth import (
    Identity,
    LoginResponse,
    LoginUser,
    RegisteredUser,
    RegisterResponse,
    UserLogin,
    UserRegister,
)
from eventsapp.services.auth import login, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user. Role defaults to attendee."""
    user = register_user(db, user_data.email, user_data.password, user_data.name, user_data.role)

    return RegisterResponse(
        message="User registered successfully",
        user=RegisteredUser.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login_user(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    access_token, user = login(db, credentials.email, credentials.password)

    return LoginResponse(
        message="Login successful",
        access_token=access_token,
        user=LoginUser.model_validate(user),
    )


@router.get("/profile", response_model=Identity)
async def get_profile(
    identity: Annotated[Identity, Depends(authorize)],
):
    """Return the identity carried by the caller's token."""
    return identity
