"""
Shared fixtures for the Sherlock client tests.
HTTP is mocked by patching requests.request; no network access is needed.
"""

import json

import pytest
import requests
from unittest.mock import patch

from sherlock.api.client import SherlockClient
from sherlock.utils.config import Settings


API = "https://api.sherlockdomains.com/api/v0"
TOKEN = "test-token"

CONTACT = {
    "first_name": "Jane",
    "last_name": "Doe",
    "email": "jane@example.com",
    "address": "123 Main St",
    "city": "Austin",
    "state": "TX",
    "postal_code": "78701",
    "country": "US",
}


def make_response(status_code: int = 200, body=None, raw: bytes = None) -> requests.Response:
    """Build a real requests.Response with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def client(settings):
    return SherlockClient(TOKEN, config=settings)


@pytest.fixture
def anon_client(settings):
    return SherlockClient(config=settings)


@pytest.fixture
def mock_request():
    with patch("sherlock.api.client.requests.request") as mock:
        mock.return_value = make_response(200, {})
        yield mock
