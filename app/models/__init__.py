from app.models.user import User
from app.models.book import Book
from app.models.payment_provider import PaymentProvider
from app.models.order_status import OrderStatus
from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.shipment import Shipment

# add ALL models here
