from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ba.core.config import settings
from ba.core.security import create_access_token
from ba.db.session import get_db
from ba.services.auth_service import authenticate_user, get_user_by_username

router = APIRouter(prefix="/auth", tags=["auth"])

DB = Annotated[Session, Depends(get_db)]


class LoginRequest(BaseModel):
    username: str
    password: str


class DevTokenRequest(BaseModel):
    username: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, db: DB):
    user = authenticate_user(db, body.username, body.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
        )
    return TokenResponse(access_token=create_access_token(subject=str(user.id)))


@router.post("/dev-token", response_model=TokenResponse)
def dev_token(body: DevTokenRequest, db: DB):
    """Issue a JWT without a password. Only available in local/test environments."""
    if settings.APP_ENV not in ("local", "test"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    user = get_user_by_username(db, body.username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return TokenResponse(access_token=create_access_token(subject=str(user.id)))
