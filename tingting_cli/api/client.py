"""
TingTing API Client - Main facade for all API operations.

This module provides flat access to every API endpoint while organizing
functionality into domain-specific modules.
"""

from typing import Optional, Dict, Any, List, Union

from ..config import ClientConfig
from ._http import HTTPClient
from .auth import AuthAPI
from .phones import PhonesAPI
from .campaigns import CampaignsAPI
from .contacts import ContactsAPI, BulkContacts
from .otp import OtpAPI


class TingTingClient:
    """
    Client for interacting with the TingTing API.

    This is a facade that provides both:
    - Domain-specific sub-clients (client.campaigns, client.contacts, etc.)
    - Flat methods for every endpoint (client.list_campaigns(), etc.)

    Usage:
        with TingTingClient(ClientConfig(api_token="...")) as client:
            campaigns = client.list_campaigns({"limit": 5})
            client.contacts.add_bulk(42, "contacts.csv")

    Usage (session token from login):
        client = TingTingClient()
        tokens = client.login("me@example.com", "secret")
        client.set_token(tokens["access"])
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize the API client.

        Args:
            config: Optional configuration. Read from the environment if not provided.
        """
        self._http = HTTPClient(config)

        # Domain-specific API modules
        self.auth = AuthAPI(self._http)
        self.phones = PhonesAPI(self._http)
        self.campaigns = CampaignsAPI(self._http)
        self.contacts = ContactsAPI(self._http)
        self.otp = OtpAPI(self._http)

    @property
    def config(self) -> ClientConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    @property
    def token(self) -> Optional[str]:
        """Get the token used for requests, if any."""
        return self._http.token

    def set_token(self, token: str) -> "TingTingClient":
        """Set the Bearer token (JWT or API token) for authentication."""
        self._http.set_token(token)
        return self

    def set_api_token(self, token: str) -> "TingTingClient":
        """Set the API token for authentication (alias for set_token)."""
        return self.set_token(token)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Any] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a raw request to an endpoint relative to the base URL."""
        return self._http.request(method, endpoint, params=params, json_data=json_data, files=files)

    # ========== Authentication Methods ==========

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Login to get access and refresh tokens."""
        return self.auth.login(email, password)

    def refresh_token(self, refresh: str) -> Dict[str, Any]:
        """Refresh the access token."""
        return self.auth.refresh(refresh)

    def generate_api_keys(self) -> Dict[str, Any]:
        """Generate a new static API token."""
        return self.auth.generate_api_keys()

    def get_api_keys(self) -> Dict[str, Any]:
        """Get the current static API token."""
        return self.auth.get_api_keys()

    def user_detail(self) -> Dict[str, Any]:
        """Get user details."""
        return self.auth.user_detail()

    # ========== Phone Number Methods ==========

    def active_broker_phones(self) -> Dict[str, Any]:
        """List all broker phone numbers."""
        return self.phones.active_broker()

    def active_user_phones(self) -> Dict[str, Any]:
        """List all active phone numbers assigned to the user."""
        return self.phones.active_user()

    # ========== Campaign Methods ==========

    def list_campaigns(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """List campaigns."""
        return self.campaigns.list(filters)

    def create_campaign(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a campaign."""
        return self.campaigns.create(data)

    def update_campaign(self, campaign_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update a campaign."""
        return self.campaigns.update(campaign_id, data)

    def delete_campaign(self, campaign_id: int) -> Dict[str, Any]:
        """Delete a campaign."""
        return self.campaigns.delete(campaign_id)

    def run_campaign(self, campaign_id: int) -> Dict[str, Any]:
        """Run a campaign."""
        return self.campaigns.run(campaign_id)

    def add_voice_assistance(self, campaign_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Add voice assistance to a campaign."""
        return self.campaigns.add_voice_assistance(campaign_id, data)

    # ========== Contact Methods ==========

    def add_contact(
        self,
        campaign_id: int,
        data: Union[Dict[str, Any], List[Dict[str, Any]]]
    ) -> Dict[str, Any]:
        """Add a contact or list of contacts to a campaign."""
        return self.contacts.add(campaign_id, data)

    def add_bulk_contacts(self, campaign_id: int, bulk_data: BulkContacts) -> Dict[str, Any]:
        """Add bulk contacts to a campaign via file upload or data."""
        return self.contacts.add_bulk(campaign_id, bulk_data)

    def list_contacts(
        self,
        campaign_id: int,
        filters: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """List all contacts for a specific campaign."""
        return self.contacts.list(campaign_id, filters)

    def delete_contact(self, contact_id: int) -> Dict[str, Any]:
        """Delete a contact from a campaign."""
        return self.contacts.delete(contact_id)

    def get_contact_attributes(self, contact_id: int) -> Dict[str, Any]:
        """Get attributes for a specific contact."""
        return self.contacts.get_attributes(contact_id)

    def edit_contact_attributes(self, contact_id: int, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """Edit attributes for a specific contact."""
        return self.contacts.edit_attributes(contact_id, attributes)

    def update_contact_number(self, contact_id: int, number: str) -> Dict[str, Any]:
        """Update a contact's phone number."""
        return self.contacts.update_number(contact_id, number)

    # ========== OTP Methods ==========

    def send_otp(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Send OTP."""
        return self.otp.send(data)

    def list_sent_otps(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """List sent OTPs."""
        return self.otp.list_sent(filters)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "TingTingClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(config: Optional[ClientConfig] = None) -> TingTingClient:
    """
    Get an API client instance.

    Args:
        config: Optional configuration

    Returns:
        TingTingClient instance
    """
    return TingTingClient(config)
