from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List


class CartItem(BaseModel):
    book_id: int
    quantity: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CartChangeRequest(BaseModel):
    book_id: int
    quantity: int = 1

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CartResponse(BaseModel):
    items: List[CartItem]
    count: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
