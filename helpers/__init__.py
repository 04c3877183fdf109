"""
Helper modules for dydx-v3-client.
"""

from .unified_logger import get_logger, get_client_logger, get_core_logger

__all__ = [
    'get_logger',
    'get_client_logger',
    'get_core_logger',
]
