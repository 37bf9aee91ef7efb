from sqlmodel import SQLModel, Field
from typing import Optional


class OrderStatus(SQLModel, table=True):
    __tablename__ = "order_status"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
