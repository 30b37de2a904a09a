"""
Base connector interfaces - the processor only talks to these
"""
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx

from config import ApiEndpoints
from errors import TransportError
from models import Order, OrderItem


class OrderSource(ABC):
    """Where orders come from and where updated orders go back to"""

    @abstractmethod
    async def fetch_orders(self) -> List[Order]:
        """Fetch the current batch of orders"""
        pass

    @abstractmethod
    async def update_order(self, order: Order) -> None:
        """Persist an order (with its updated item counters)"""
        pass

    async def aclose(self) -> None:
        """Release connections"""


class AlertSink(ABC):
    """Receives one notification per delivered item"""

    @abstractmethod
    async def send_alert(self, order_id: str, item: OrderItem) -> None:
        """Send a delivered-item alert, raise on failure"""
        pass

    async def aclose(self) -> None:
        """Release connections"""


class HttpConnector:
    """Shared httpx plumbing for the HTTP connectors.

    Cancelling the awaiting task drops the in-flight request.
    """

    def __init__(self, endpoints: ApiEndpoints, client: Optional[httpx.AsyncClient] = None,
                 timeout: Optional[float] = 30):
        self.endpoints = endpoints
        self.timeout = timeout

        if client is None:
            client = httpx.AsyncClient(
                timeout=timeout,
                headers={
                    'Content-Type': 'application/json',
                    'Accept': 'application/json',
                },
            )
        self.client = client

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise TransportError(f"{method} {url} returned HTTP {status_code}",
                                 url=url, status_code=status_code) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        return response

    async def aclose(self) -> None:
        """Close HTTP client"""
        await self.client.aclose()
