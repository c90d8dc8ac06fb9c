"""
Shared fixtures for TingTing CLI tests.
"""

import json
from http import HTTPStatus
from typing import Any
from unittest.mock import patch

import pytest
import requests

from tingting_cli.api import TingTingClient
from tingting_cli.config import ClientConfig

BASE_URL = "https://api.tingting.test/api/v1/"


def make_response(status_code: int = 200, body: Any = None) -> requests.Response:
    """Build a requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = HTTPStatus(status_code).phrase
    response.url = BASE_URL
    
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = body or b""
    
    return response


@pytest.fixture
def config():
    """Configuration with a static API token."""
    return ClientConfig(base_url=BASE_URL, api_token="static-token")


@pytest.fixture
def client(config):
    """API client for the test configuration."""
    with TingTingClient(config) as api_client:
        yield api_client


@pytest.fixture
def send(client):
    """Patch the session's send method; returns an empty 200 by default."""
    with patch.object(client._http.session, "send") as mock_send:
        mock_send.return_value = make_response(200, {})
        yield mock_send


def sent_request(mock_send) -> requests.PreparedRequest:
    """Get the prepared request passed to the last send call."""
    return mock_send.call_args[0][0]
