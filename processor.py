"""
Core delivery alert processing
"""
import logging
from dataclasses import dataclass
from typing import Optional

from connectors import AlertSink, OrderSource
from models import Order

logger = logging.getLogger(__name__)


@dataclass
class ProcessingSummary:
    """Counts for one processing pass"""
    orders_fetched: int = 0
    alerts_sent: int = 0
    alerts_failed: int = 0
    orders_updated: int = 0

    def to_dict(self) -> dict:
        return {
            'orders_fetched': self.orders_fetched,
            'alerts_sent': self.alerts_sent,
            'alerts_failed': self.alerts_failed,
            'orders_updated': self.orders_updated,
        }


class OrderProcessor:
    """Sends alerts for delivered items and writes the counters back.

    Failures are isolated per item inside one order: every delivered item is
    attempted, but the order is only updated when all of its alerts went
    through. The first failure of an order is re-raised once its items are
    done, which stops the rest of the batch.

    Only ``Exception`` is isolated. Cancellation (``asyncio.CancelledError``)
    always propagates straight away.
    """

    def __init__(self, order_source: OrderSource, alert_sink: AlertSink):
        if order_source is None:
            raise ValueError("order_source is required")
        if alert_sink is None:
            raise ValueError("alert_sink is required")

        self.order_source = order_source
        self.alert_sink = alert_sink
        self.summary = ProcessingSummary()

    async def process_orders(self) -> ProcessingSummary:
        """Fetch the batch and process each order in sequence"""
        self.summary = ProcessingSummary()

        try:
            logger.info("Starting order processing")
            orders = await self.order_source.fetch_orders()
            self.summary.orders_fetched = len(orders)

            # No isolation across orders: the first failing order ends the batch
            for order in orders:
                await self.process_order(order)

            logger.info("Completed order processing: %s", self.summary.to_dict())
        except Exception:
            logger.error("Error during order processing", exc_info=True)
            raise

        return self.summary

    async def process_order(self, order: Order) -> None:
        """Alert every delivered item, update the order if all alerts succeeded"""
        touched = False
        failure: Optional[Exception] = None

        for item in order.items:
            if not item.is_delivered:
                continue

            try:
                await self.alert_sink.send_alert(order.order_id, item)
            except Exception as e:
                self.summary.alerts_failed += 1
                if failure is None:
                    failure = e
                    logger.error("Alert failed for order %s, item %s",
                                 order.order_id, item.description, exc_info=True)
                else:
                    logger.warning("Another alert failed for order %s, item %s: %s",
                                   order.order_id, item.description, e)
                continue

            item.delivery_notification += 1
            self.summary.alerts_sent += 1
            touched = True

        if touched and failure is None:
            try:
                await self.order_source.update_order(order)
                self.summary.orders_updated += 1
            except Exception as e:
                failure = e

        if failure is not None:
            logger.error("Error processing order %s", order.order_id)
            raise failure
