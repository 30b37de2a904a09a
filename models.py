"""
Order records exchanged with the order API
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from errors import ParseError

DELIVERED_STATUS = 'delivered'


def _lookup(data: Dict, key: str, default: Any = None) -> Any:
    """Case-insensitive key lookup (API sends PascalCase, some clients camelCase)"""
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == key.lower():
            return value
    return default


def _parse_count(value: Any) -> int:
    """DeliveryNotification as a non-negative int, integral floats and numeric strings allowed"""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ParseError(f"Invalid DeliveryNotification value: {value!r}")

    number = value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ParseError(f"Invalid DeliveryNotification value: {value!r}") from None

    if isinstance(number, float):
        if not number.is_integer():
            raise ParseError(f"Invalid DeliveryNotification value: {value!r}")
        number = int(number)

    if not isinstance(number, int) or number < 0:
        raise ParseError(f"Invalid DeliveryNotification value: {value!r}")
    return number


@dataclass
class OrderItem:
    """Line item inside an order"""
    description: str
    status: str
    delivery_notification: int = 0

    @property
    def is_delivered(self) -> bool:
        # Exact match apart from case, whitespace is significant
        return isinstance(self.status, str) and self.status.lower() == DELIVERED_STATUS

    @classmethod
    def from_dict(cls, data: Dict) -> 'OrderItem':
        if not isinstance(data, dict):
            raise ParseError(f"Order item must be an object, got {type(data).__name__}")

        return cls(
            description=_lookup(data, 'Description') or '',
            status=_lookup(data, 'Status') or '',
            delivery_notification=_parse_count(_lookup(data, 'DeliveryNotification')),
        )

    def to_dict(self) -> Dict:
        return {
            'Description': self.description,
            'Status': self.status,
            'DeliveryNotification': self.delivery_notification,
        }


@dataclass
class Order:
    """Medical equipment order with its items in API order"""
    order_id: str
    items: List[OrderItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Order':
        if not isinstance(data, dict):
            raise ParseError(f"Order must be an object, got {type(data).__name__}")

        order_id = _lookup(data, 'OrderId')
        if order_id is None:
            raise ParseError("Order is missing OrderId")

        items = _lookup(data, 'Items') or []
        if not isinstance(items, list):
            raise ParseError(f"Items of order {order_id} must be a list")

        return cls(
            order_id=str(order_id),
            items=[OrderItem.from_dict(item) for item in items],
        )

    def to_dict(self) -> Dict:
        return {
            'OrderId': self.order_id,
            'Items': [item.to_dict() for item in self.items],
        }


def parse_orders(payload: Any) -> List[Order]:
    """Turn a decoded orders response into Order records"""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ParseError(f"Expected a list of orders, got {type(payload).__name__}")
    return [Order.from_dict(entry) for entry in payload]
