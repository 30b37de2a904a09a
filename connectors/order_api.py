"""
Order management API connector (fetch orders, post updates)
"""
import logging
from typing import List

from errors import ParseError
from models import Order, parse_orders
from .base import HttpConnector, OrderSource

logger = logging.getLogger(__name__)


class OrderApiConnector(HttpConnector, OrderSource):
    """Order source backed by the REST order API"""

    async def fetch_orders(self) -> List[Order]:
        """Fetch medical equipment orders"""
        url = self.endpoints.orders_endpoint
        logger.info("Fetching orders from %s", url)

        try:
            response = await self._request('GET', url)
        except Exception:
            logger.error("Failed to fetch orders from API", exc_info=True)
            raise

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Failed to parse orders response", exc_info=True)
            raise ParseError(f"Orders response from {url} is not valid JSON") from e

        try:
            orders = parse_orders(payload)
        except ParseError:
            logger.error("Failed to parse orders response", exc_info=True)
            raise

        logger.info("Successfully fetched %d orders", len(orders))
        return orders

    async def update_order(self, order: Order) -> None:
        """Post the order back with its updated counters"""
        url = self.endpoints.update_endpoint
        logger.info("Updating order %s", order.order_id)

        try:
            await self._request('POST', url, json=order.to_dict())
        except Exception:
            logger.error("Failed to update order %s", order.order_id, exc_info=True)
            raise

        logger.info("Successfully updated order %s", order.order_id)
