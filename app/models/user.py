from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from app.models.base import TimestampType, utc_now


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # subject issued by the auth provider
    auth_user_id: str = Field(index=True, unique=True)
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
