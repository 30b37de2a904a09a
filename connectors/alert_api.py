"""
Alert API connector - one message per delivered item
"""
import logging
from typing import Dict

from models import OrderItem
from .base import AlertSink, HttpConnector

logger = logging.getLogger(__name__)


def build_alert_message(order_id: str, item: OrderItem) -> Dict:
    """Alert payload for a delivered item"""
    return {
        'Message': (
            f"Alert for delivered item: Order {order_id}, Item: {item.description}, "
            f"Delivery Notifications: {item.delivery_notification}"
        )
    }


class AlertApiConnector(HttpConnector, AlertSink):
    """Alert sink backed by the REST alert API"""

    async def send_alert(self, order_id: str, item: OrderItem) -> None:
        url = self.endpoints.alerts_endpoint
        logger.info("Sending alert for order %s, item %s", order_id, item.description)

        try:
            await self._request('POST', url, json=build_alert_message(order_id, item))
        except Exception:
            logger.error("Failed to send alert for order %s, item %s",
                         order_id, item.description, exc_info=True)
            raise

        logger.info("Successfully sent alert for order %s, item %s", order_id, item.description)
