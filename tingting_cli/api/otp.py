"""
OTP API - One-time password delivery.
"""

from typing import Optional, Dict, Any

from ._http import HTTPClient


class OtpAPI:
    """API for sending OTPs by voice or SMS and listing sent OTPs."""
    
    def __init__(self, http: HTTPClient):
        self._http = http
    
    def send(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an OTP.
        
        Args:
            data: OTP request body (recipient number, message, delivery type, ...)
        
        Returns:
            Send result
        """
        return self._http.request("POST", "auths/send/otp/", json_data=data)
    
    def list_sent(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List sent OTPs.
        
        Args:
            filters: Optional query filters (limit, offset, ...)
        
        Returns:
            Sent OTP records
        """
        return self._http.request("GET", "auths/list/send-otps/", params=filters or {})
