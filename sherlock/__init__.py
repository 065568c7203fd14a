"""
Sherlock Domains client - search, buy and manage domains and DNS records
"""

import logging

from sherlock.api import (
    SherlockClient,
    Contact,
    APIError,
    NotAuthenticatedError,
    IncompleteContactError,
    RemoteRejectionError,
    NetworkError
)
from sherlock.tools import build_tools
from sherlock.utils.config import Settings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "SherlockClient",
    "Contact",
    "APIError",
    "NotAuthenticatedError",
    "IncompleteContactError",
    "RemoteRejectionError",
    "NetworkError",
    "build_tools",
    "Settings",
    "get_settings"
]
