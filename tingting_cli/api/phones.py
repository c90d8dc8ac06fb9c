"""
Phones API - Broker and user phone numbers.
"""

from typing import Dict, Any

from ._http import HTTPClient


class PhonesAPI:
    """API for listing phone numbers."""
    
    def __init__(self, http: HTTPClient):
        self._http = http
    
    def active_broker(self) -> Dict[str, Any]:
        """List all broker phone numbers."""
        return self._http.request("GET", "active-broker-phone/")
    
    def active_user(self) -> Dict[str, Any]:
        """List all active phone numbers assigned to the user."""
        return self._http.request("GET", "phone-number/active/")
