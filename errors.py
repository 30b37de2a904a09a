"""
Errors raised by the order and alert connectors
"""
from typing import Optional


class ConnectorError(Exception):
    """Base class for collaborator failures"""


class TransportError(ConnectorError):
    """Network or HTTP failure while talking to an API"""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(ConnectorError):
    """Orders response could not be understood"""
