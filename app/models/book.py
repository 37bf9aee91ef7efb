from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from app.models.base import TimestampType, utc_now


class Book(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str

    # minor currency units
    base_price: int
    is_active: bool = True

    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)
