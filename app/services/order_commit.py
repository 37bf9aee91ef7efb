import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.errors import InfrastructureError
from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.shipment import Shipment
from app.schemas.checkout_schemas import ShipmentInfo
from app.services.pricing import PricedLine

logger = logging.getLogger(__name__)


def shipment_payload(shipment: ShipmentInfo) -> dict:
    # optional fields are always present, as None when not supplied
    return {
        "address": shipment.address,
        "city": shipment.city,
        "recipient_name": shipment.recipient_name,
        "phone_number": shipment.phone_number,
        "postal_code": shipment.postal_code,
        "delivery_type_id": shipment.delivery_type_id,
    }


class SqlOrderStore:
    """
    Creates an order with its items and shipment in a single transaction.

    Either all rows are committed or the transaction is rolled back and
    ``InfrastructureError`` is raised; callers never see a partial order.
    """

    def __init__(self, session: Session):
        self.session = session

    def _add_order(self, **fields) -> Order:
        order = Order(**fields)
        self.session.add(order)
        # flush to get the primary key for the child rows
        self.session.flush()
        return order

    def _add_items(self, order_id: int, items: List[PricedLine]) -> None:
        for line in items:
            self.session.add(
                OrderItem(
                    order_id=order_id,
                    book_id=line.book_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
            )

    def _add_shipment(self, order_id: int, shipment: ShipmentInfo) -> None:
        self.session.add(Shipment(order_id=order_id, **shipment_payload(shipment)))

    def create_order(
        self,
        *,
        user_id: int,
        order_status_id: int,
        payment_provider_id: int,
        subtotal_amount: int,
        delivery_price: int,
        total_amount: int,
        items: List[PricedLine],
        shipment: ShipmentInfo,
    ) -> int:
        order_id: Optional[int] = None

        try:
            order = self._add_order(
                user_id=user_id,
                order_status_id=order_status_id,
                payment_provider_id=payment_provider_id,
                subtotal_amount=subtotal_amount,
                delivery_price=delivery_price,
                total_amount=total_amount,
            )
            order_id = order.id
            if order_id is None:
                raise InfrastructureError("Failed to create order")

            self._add_items(order_id, items)
            self._add_shipment(order_id, shipment)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception(f"Order transaction failed for user {user_id}")
            raise InfrastructureError("Failed to create order")
        except InfrastructureError:
            self.session.rollback()
            logger.error(f"Order transaction returned no id for user {user_id}")
            raise

        logger.info(f"Created order {order_id} for user {user_id} with {len(items)} items")
        return order_id
