"""
Campaigns API - Campaign management.
"""

import logging
from typing import Optional, Dict, Any

from ._http import HTTPClient

logger = logging.getLogger(__name__)


class CampaignsAPI:
    """
    API for campaign management.
    
    Handles:
    - Campaign CRUD operations
    - Running campaigns
    - Voice assistance messages
    """
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Campaigns API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List campaigns.
        
        Args:
            filters: Optional query filters: limit, offset, status, etc.
        
        Returns:
            Campaign list
        """
        return self._http.request("GET", "campaign/", params=filters or {})
    
    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a campaign.
        
        Args:
            data: Campaign fields
        
        Returns:
            Created campaign
        """
        return self._http.request("POST", "campaign/create/", json_data=data)
    
    def update(self, campaign_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a campaign.
        
        Args:
            campaign_id: Campaign ID
            data: Fields to update
        
        Returns:
            Updated campaign
        """
        return self._http.request("POST", f"campaign/{int(campaign_id)}/", json_data=data)
    
    def delete(self, campaign_id: int) -> Dict[str, Any]:
        """Delete a campaign."""
        return self._http.request("DELETE", f"campaign/{int(campaign_id)}/")
    
    def run(self, campaign_id: int) -> Dict[str, Any]:
        """Run a campaign."""
        logger.info(f"Running campaign {campaign_id}")
        return self._http.request("POST", f"run-campaign/{int(campaign_id)}/")
    
    def add_voice_assistance(self, campaign_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add voice assistance to a campaign.
        
        Args:
            campaign_id: Campaign ID
            data: Voice message settings
        
        Returns:
            Updated campaign message
        """
        return self._http.request(
            "PATCH",
            f"campaign/create/{int(campaign_id)}/message/",
            json_data=data
        )
