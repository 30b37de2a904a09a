"""
Main application - one delivery alert pass, then exit
"""
import asyncio
import logging
import sys
from typing import Optional

import config
from connectors import create_connectors
from processor import OrderProcessor, ProcessingSummary

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=config.get_log_level(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def build_processor(endpoints: config.ApiEndpoints,
                    request_timeout: Optional[float] = config.REQUEST_TIMEOUT) -> OrderProcessor:
    order_source, alert_sink = create_connectors(endpoints, timeout=request_timeout)
    return OrderProcessor(order_source, alert_sink)


async def run_processor(processor: OrderProcessor,
                        run_timeout: Optional[float] = config.RUN_TIMEOUT) -> ProcessingSummary:
    """Process the current batch once, then close the HTTP client"""
    try:
        # wait_for cancels the in-flight request when the deadline passes
        return await asyncio.wait_for(processor.process_orders(), timeout=run_timeout)
    finally:
        await processor.order_source.aclose()


async def run(endpoints: config.ApiEndpoints, request_timeout: Optional[float] = config.REQUEST_TIMEOUT,
              run_timeout: Optional[float] = config.RUN_TIMEOUT) -> ProcessingSummary:
    """Build connectors and process the current batch once"""
    processor = build_processor(endpoints, request_timeout)
    return await run_processor(processor, run_timeout)


def main() -> int:
    """Run one pass, return process exit code"""
    try:
        configure_logging()
        endpoints = config.get_endpoints()
        summary = asyncio.run(run(endpoints))
    except KeyboardInterrupt:
        logger.warning("Interrupted, shutting down")
        return 130
    except asyncio.TimeoutError:
        logger.error("Order processing did not finish within %s seconds", config.RUN_TIMEOUT)
        return 1
    except Exception:
        logger.exception("Unhandled exception")
        return 1

    logger.info(
        "Run complete: %d orders, %d alerts sent, %d alerts failed, %d orders updated",
        summary.orders_fetched, summary.alerts_sent, summary.alerts_failed, summary.orders_updated,
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
