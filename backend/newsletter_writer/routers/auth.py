"""
Authentication routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session
from datetime import timedelta
import logging

from newsletter_writer.database import get_db
from newsletter_writer.errors import ActionError
from newsletter_writer.models import User
from newsletter_writer.schemas import Token, UserLogin, UserResponse
from newsletter_writer.config import get_settings
from newsletter_writer.auth import (
    get_current_user,
    create_access_token,
    verify_password,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Validate email and password and return a JWT token."""
    settings = get_settings()
    email_input = credentials.email.strip().lower()

    user = db.query(User).filter(func.lower(User.email) == email_input).first()

    if not user or not user.hashed_password or not verify_password(
        credentials.password, user.hashed_password
    ):
        logger.warning(f"Failed login attempt for {email_input}")
        raise ActionError("UNAUTHORIZED", "Incorrect email or password")

    if not user.is_active:
        raise ActionError("FORBIDDEN", "User account is inactive")

    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(
        data={"sub": str(user.id)},
        expires_delta=access_token_expires
    )

    logger.info(f"User {user.id} logged in")
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Return the signed-in user."""
    return UserResponse.model_validate(current_user)
