"""
Authentication and user-related schemas.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Token(BaseModel):
    """JWT token response"""
    access_token: str
    token_type: str = "bearer"


class UserLogin(BaseModel):
    """Login request"""
    email: str
    password: str


class UserResponse(BaseModel):
    """User response"""
    id: str
    email: str
    name: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
