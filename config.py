import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# API endpoints
ORDERS_API_URL = os.getenv('ORDERS_API_URL')
UPDATE_ORDER_API_URL = os.getenv('UPDATE_ORDER_API_URL')
ALERTS_API_URL = os.getenv('ALERTS_API_URL')

# Timeouts (seconds)
REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', 30))
RUN_TIMEOUT = float(os.getenv('RUN_TIMEOUT')) if os.getenv('RUN_TIMEOUT') else None

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ConfigurationError(Exception):
    """Required setting is missing or invalid"""


@dataclass(frozen=True)
class ApiEndpoints:
    """URLs of the order and alert APIs"""
    orders_endpoint: str
    update_endpoint: str
    alerts_endpoint: str


def get_endpoints() -> ApiEndpoints:
    """Build endpoints from settings, fail if any is missing"""
    settings = {
        'ORDERS_API_URL': ORDERS_API_URL,
        'UPDATE_ORDER_API_URL': UPDATE_ORDER_API_URL,
        'ALERTS_API_URL': ALERTS_API_URL,
    }
    missing = [name for name, value in settings.items() if not value]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    return ApiEndpoints(
        orders_endpoint=ORDERS_API_URL,
        update_endpoint=UPDATE_ORDER_API_URL,
        alerts_endpoint=ALERTS_API_URL,
    )


def get_log_level() -> int:
    """Numeric level for LOG_LEVEL"""
    if LOG_LEVEL not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid LOG_LEVEL {LOG_LEVEL!r}, expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, LOG_LEVEL)
