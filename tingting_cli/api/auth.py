"""
Auth API - Login, token refresh, API keys and user profile.
"""

from typing import Dict, Any

from ._http import HTTPClient


class AuthAPI:
    """
    API for authentication endpoints.
    
    Handles:
    - Email/password login (JWT access and refresh tokens)
    - Access token refresh
    - Static API token generation and lookup
    - Current user profile
    """
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Auth API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Login to get access and refresh tokens.
        
        The returned token is not applied to the client; call
        ``set_token`` with it to authenticate subsequent requests.
        
        Args:
            email: Account email
            password: Account password
        
        Returns:
            Token response (access and refresh tokens)
        """
        return self._http.request(
            "POST",
            "auths/login/",
            json_data={"email": email, "password": password}
        )
    
    def refresh(self, refresh: str) -> Dict[str, Any]:
        """
        Refresh the access token.
        
        Args:
            refresh: Refresh token obtained from login
        
        Returns:
            New access token
        """
        return self._http.request(
            "POST",
            "auths/login/refresh/",
            json_data={"refresh": refresh}
        )
    
    def generate_api_keys(self) -> Dict[str, Any]:
        """
        Generate a new static API token.
        
        Previously generated keys are soft-deleted by the server.
        
        Returns:
            Dict with ``token`` and ``message``
        """
        return self._http.request("POST", "auths/generate-api-keys/")
    
    def get_api_keys(self) -> Dict[str, Any]:
        """
        Get the current static API token.
        
        Returns:
            Dict with ``token``, ``last_used`` and ``created_at``
        """
        return self._http.request("GET", "auths/get-api-keys/")
    
    def user_detail(self) -> Dict[str, Any]:
        """Get the authenticated user's profile."""
        return self._http.request("GET", "auths/user-profile/")
