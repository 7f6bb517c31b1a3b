"""Auth Router - Anmeldung per Session"""
import logging
from typing import Optional

from fastapi import APIRouter, Request, Depends, HTTPException, status
from werkzeug.security import generate_password_hash, check_password_hash

from app.dependencies import get_storage, get_current_user
from app.models import User
from app.rate_limit import limiter
from app.schemas import LoginRequest, UserUpdate, UserResponse
from app.services.storage import Storage
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


def _require_user(user: Optional[User]) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Nicht angemeldet. Bitte melden Sie sich an."
        )
    return user


@router.post("/login", response_model=UserResponse)
@limiter.limit("30/minute")
@handle_route_errors("user", "Logging in")
async def login(request: Request, payload: LoginRequest, storage: Storage = Depends(get_storage)):
    """
    Meldet einen Benutzer an.

    Existiert der Benutzername noch nicht, wird er beim ersten Login mit dem
    angegebenen Passwort angelegt.
    """
    user = storage.get_user_by_username(payload.username)

    if user is None:
        user = storage.create_user({
            "username": payload.username,
            "password": generate_password_hash(payload.password),
        })
        logger.info(f"Registered new user '{user.username}' on first login")
    elif not check_password_hash(user.password, payload.password):
        logger.warning(f"Failed login for user '{payload.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Benutzername oder Passwort falsch"
        )

    request.session["user_id"] = user.id
    logger.info(f"User '{user.username}' logged in")
    return UserResponse.model_validate(user)


@router.get("/logout")
async def logout(request: Request):
    """Beendet die Session"""
    request.session.clear()
    return {"message": "Abgemeldet"}


@router.get("/auth/user", response_model=UserResponse)
async def get_auth_user(user: Optional[User] = Depends(get_current_user)):
    """Aktuell angemeldeter Benutzer"""
    return UserResponse.model_validate(_require_user(user))


@router.patch("/auth/user", response_model=UserResponse)
@handle_route_errors("user", "Updating")
async def update_auth_user(
    payload: UserUpdate,
    user: Optional[User] = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Aktualisiert das Profil des angemeldeten Benutzers"""
    user = _require_user(user)
    updated = storage.update_user(user.id, payload.model_dump(exclude_unset=True))
    return UserResponse.model_validate(updated)
