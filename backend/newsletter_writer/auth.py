"""
Authentication utilities for JWT tokens and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from newsletter_writer.config import get_settings
from newsletter_writer.database import SessionLocal, get_db
from newsletter_writer.errors import ActionError, action_error_response, validation_error_response
from newsletter_writer.models import User

ACTIONS_PREFIX = "/api/actions/"

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# A missing header is reported as UNAUTHORIZED by get_current_user
security = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta is not None:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(
        to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
    )
    return encoded_jwt


def user_from_token(token: str | None, db: Session) -> User:
    """
    Resolve a Bearer token to an active user.

    Raises:
        ActionError: UNAUTHORIZED for a missing, invalid or orphaned token,
            FORBIDDEN for an inactive account
    """
    settings = get_settings()
    credentials_exception = ActionError(
        "UNAUTHORIZED",
        "You must be signed in to perform this action.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise credentials_exception
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        user_id: str | None = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise credentials_exception

    if not user.is_active:
        raise ActionError("FORBIDDEN", "User account is inactive")

    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Get the current authenticated user from a Bearer token.

    Runs before any input is looked at, so an anonymous caller never
    reaches a resolver or the store.
    """
    return user_from_token(credentials.credentials if credentials else None, db)


def action_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render rejected input, checking the caller first on action routes.

    A body that is not valid JSON fails before dependencies run, so the
    token is checked here to keep UNAUTHORIZED ahead of BAD_REQUEST.
    """
    if request.url.path.startswith(ACTIONS_PREFIX):
        scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
        db = SessionLocal()
        try:
            user_from_token(token if scheme.lower() == "bearer" else None, db)
        except ActionError as auth_error:
            return action_error_response(auth_error)
        finally:
            db.close()
    return validation_error_response(request, exc)
