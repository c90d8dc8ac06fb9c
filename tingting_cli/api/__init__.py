"""
TingTing API Client Package.

This package provides a modular API client for the TingTing telephony/SMS service.

Structure:
    - client.py: Main TingTingClient facade
    - _http.py: Base HTTP client with session, auth, and error handling
    - auth.py: Login, token refresh, API keys, user profile
    - phones.py: Broker and user phone numbers
    - campaigns.py: Campaign management
    - contacts.py: Campaign contacts and attributes
    - otp.py: One-time password delivery

Usage:
    from tingting_cli.api import TingTingClient, get_client

    client = TingTingClient()

    # Domain-specific
    campaigns = client.campaigns.list({"limit": 5})

    # Flat methods
    campaigns = client.list_campaigns({"limit": 5})
"""

from .client import TingTingClient, get_client
from ._http import HTTPClient
from .auth import AuthAPI
from .phones import PhonesAPI
from .campaigns import CampaignsAPI
from .contacts import ContactsAPI
from .otp import OtpAPI

__all__ = [
    # Main client
    "TingTingClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Domain APIs
    "AuthAPI",
    "PhonesAPI",
    "CampaignsAPI",
    "ContactsAPI",
    "OtpAPI",
]
