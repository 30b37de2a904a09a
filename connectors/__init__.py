"""
Connector factory - builds the order source and alert sink
"""
from typing import Optional, Tuple

import httpx

from config import ApiEndpoints
from errors import ConnectorError, ParseError, TransportError
from .alert_api import AlertApiConnector
from .base import AlertSink, HttpConnector, OrderSource
from .order_api import OrderApiConnector

__all__ = [
    'AlertApiConnector',
    'AlertSink',
    'ConnectorError',
    'HttpConnector',
    'OrderApiConnector',
    'OrderSource',
    'ParseError',
    'TransportError',
    'create_connectors',
]


def create_connectors(endpoints: ApiEndpoints, timeout: Optional[float] = 30,
                      client: Optional[httpx.AsyncClient] = None) -> Tuple[OrderSource, AlertSink]:
    """Get order source and alert sink sharing one HTTP client"""
    order_source = OrderApiConnector(endpoints, client=client, timeout=timeout)
    alert_sink = AlertApiConnector(endpoints, client=order_source.client, timeout=timeout)
    return order_source, alert_sink
