from sqlmodel import SQLModel, Field
from typing import Optional


class PaymentProvider(SQLModel, table=True):
    __tablename__ = "payment_provider"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    is_active: bool = True
