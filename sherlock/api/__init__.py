"""
API Layer - Sherlock Domains client, models and exceptions
"""

# Client
from sherlock.api.client import SherlockClient

# Models
from sherlock.api.models import Contact, Offer, PurchaseOffers, CONTACT_FIELDS

# Exceptions
from sherlock.api.exceptions import (
    APIError,
    NotAuthenticatedError,
    ValidationError,
    IncompleteContactError,
    RemoteRejectionError,
    AuthenticationError,
    PaymentRequiredError,
    NotFoundError,
    RateLimitError,
    ServerError,
    NetworkError,
    InvalidResponseError
)

__all__ = [
    # Client
    "SherlockClient",

    # Models
    "Contact",
    "Offer",
    "PurchaseOffers",
    "CONTACT_FIELDS",

    # Exceptions
    "APIError",
    "NotAuthenticatedError",
    "ValidationError",
    "IncompleteContactError",
    "RemoteRejectionError",
    "AuthenticationError",
    "PaymentRequiredError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "InvalidResponseError"
]
