"""Tests for endpoint configuration."""

import logging

import pytest

import config
from config import ApiEndpoints, ConfigurationError, get_endpoints, get_log_level


@pytest.fixture
def all_urls(monkeypatch):
    monkeypatch.setattr(config, 'ORDERS_API_URL', 'https://api.test/orders')
    monkeypatch.setattr(config, 'UPDATE_ORDER_API_URL', 'https://api.test/orders/update')
    monkeypatch.setattr(config, 'ALERTS_API_URL', 'https://api.test/alerts')


def test_get_endpoints(all_urls):
    assert get_endpoints() == ApiEndpoints(
        orders_endpoint='https://api.test/orders',
        update_endpoint='https://api.test/orders/update',
        alerts_endpoint='https://api.test/alerts',
    )


def test_missing_endpoints_are_named(all_urls, monkeypatch):
    monkeypatch.setattr(config, 'ORDERS_API_URL', None)
    monkeypatch.setattr(config, 'ALERTS_API_URL', '')

    with pytest.raises(ConfigurationError) as exc_info:
        get_endpoints()

    message = str(exc_info.value)
    assert 'ORDERS_API_URL' in message
    assert 'ALERTS_API_URL' in message
    assert 'UPDATE_ORDER_API_URL' not in message


def test_endpoints_are_immutable(all_urls):
    endpoints = get_endpoints()

    with pytest.raises(AttributeError):
        endpoints.orders_endpoint = 'https://elsewhere.test'


@pytest.mark.parametrize("level,expected", [
    ('DEBUG', logging.DEBUG),
    ('INFO', logging.INFO),
    ('WARNING', logging.WARNING),
])
def test_get_log_level(monkeypatch, level, expected):
    monkeypatch.setattr(config, 'LOG_LEVEL', level)
    assert get_log_level() == expected


def test_invalid_log_level_raises(monkeypatch):
    monkeypatch.setattr(config, 'LOG_LEVEL', 'VERBOSE')

    with pytest.raises(ConfigurationError, match='VERBOSE'):
        get_log_level()
