from unittest.mock import AsyncMock

import pytest

from config import ApiEndpoints
from connectors import AlertSink, OrderSource
from models import Order, OrderItem
from processor import OrderProcessor


def make_order(order_id, *items):
    """Order from (description, status[, count]) tuples"""
    return Order(
        order_id=order_id,
        items=[OrderItem(*item) for item in items],
    )


@pytest.fixture
def endpoints():
    return ApiEndpoints(
        orders_endpoint='https://orders.example.test/api/orders',
        update_endpoint='https://orders.example.test/api/orders/update',
        alerts_endpoint='https://alerts.example.test/api/alerts',
    )


@pytest.fixture
def order_source():
    source = AsyncMock(spec=OrderSource)
    source.fetch_orders.return_value = []
    return source


@pytest.fixture
def alert_sink():
    return AsyncMock(spec=AlertSink)


@pytest.fixture
def processor(order_source, alert_sink):
    return OrderProcessor(order_source, alert_sink)
