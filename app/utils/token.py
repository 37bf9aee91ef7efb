import logging
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from app.config import settings
from app.database import get_session
from app.errors import AuthError
from app.models.user import User

logger = logging.getLogger(__name__)

# tokens are issued by the auth service; missing tokens are handled below
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.access_token_expire_minutes)
    )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.algorithm
    )
    return encoded_jwt


def decode_access_token(token: str):
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
        return payload
    except JWTError:
        return None


def get_auth_subject(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """Subject of a verified bearer token, or None."""
    if not token:
        return None

    payload = decode_access_token(token)
    if payload is None:
        return None

    subject = payload.get("sub")
    return str(subject) if subject else None


def find_user_id(session: Session, auth_user_id: str) -> Optional[int]:
    return session.exec(
        select(User.id).where(User.auth_user_id == auth_user_id)
    ).first()


def get_current_user_id(
    subject: Optional[str] = Depends(get_auth_subject),
    session: Session = Depends(get_session)
) -> int:
    if subject is None:
        raise AuthError("Unauthorized")

    try:
        user_id = find_user_id(session, subject)
    except SQLAlchemyError:
        logger.exception(f"User lookup failed for subject {subject}")
        user_id = None

    # same status as a missing token so account states are not distinguishable
    if user_id is None:
        raise AuthError("User not found")

    return user_id
