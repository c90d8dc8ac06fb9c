"""
Contacts API - Campaign contacts and their attributes.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any, List, Union

from ._http import HTTPClient

logger = logging.getLogger(__name__)

BulkContacts = Union[str, os.PathLike, Dict[str, Any], List[Any]]


def is_upload_file(bulk_data: Any) -> bool:
    """
    Check whether bulk contact input names an existing, readable local file.
    
    Only strings and path objects qualify; anything else is sent as JSON.
    """
    if not isinstance(bulk_data, (str, os.PathLike)):
        return False
    return os.path.isfile(bulk_data) and os.access(bulk_data, os.R_OK)


class ContactsAPI:
    """
    API for contact management.
    
    Handles:
    - Adding single, multiple and bulk contacts to campaigns
    - Listing and deleting contacts
    - Contact attributes and phone numbers
    """
    
    BULK_FILE_FIELD = "bulk_file"
    
    def __init__(self, http: HTTPClient):
        """
        Initialize Contacts API.
        
        Args:
            http: HTTP client instance
        """
        self._http = http
    
    def add(
        self,
        campaign_id: int,
        data: Union[Dict[str, Any], List[Dict[str, Any]]]
    ) -> Dict[str, Any]:
        """
        Add a contact, or a list of contacts, to a campaign.
        
        Args:
            campaign_id: Campaign ID
            data: Contact mapping or list of contact mappings
        
        Returns:
            Created contact(s)
        """
        return self._http.request(
            "POST",
            f"campaign/{int(campaign_id)}/add-contact/",
            json_data=data
        )
    
    def add_bulk(self, campaign_id: int, bulk_data: BulkContacts) -> Dict[str, Any]:
        """
        Add bulk contacts to a campaign via file upload or data.
        
        If ``bulk_data`` is the path of an existing file, the file is uploaded
        as multipart field ``bulk_file``. Any other value, including a path
        that does not exist, is sent as the JSON body.
        
        Args:
            campaign_id: Campaign ID
            bulk_data: Path to a CSV/Excel file, or contact data
        
        Returns:
            Import result
        """
        endpoint = f"campaign/create/{int(campaign_id)}/detail/"
        
        if is_upload_file(bulk_data):
            file_path = Path(bulk_data)
            logger.debug(f"Uploading bulk contacts file: {file_path}")
            with open(file_path, "rb") as f:
                files = {self.BULK_FILE_FIELD: (file_path.name, f)}
                return self._http.request("POST", endpoint, files=files)
        
        return self._http.request("POST", endpoint, json_data=bulk_data)
    
    def list(self, campaign_id: int, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List all contacts for a specific campaign.
        
        Args:
            campaign_id: Campaign ID
            filters: Optional query filters
        
        Returns:
            Contact list
        """
        return self._http.request(
            "GET",
            f"campaign-detail/{int(campaign_id)}/",
            params=filters or {}
        )
    
    def delete(self, contact_id: int) -> Dict[str, Any]:
        """Delete a contact from a campaign."""
        return self._http.request("DELETE", f"phone-number/delete/{int(contact_id)}/")
    
    def get_attributes(self, contact_id: int) -> Dict[str, Any]:
        """Get attributes for a specific contact."""
        return self._http.request("GET", f"campaign/{int(contact_id)}/attributes/")
    
    def edit_attributes(self, contact_id: int, attributes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Edit attributes for a specific contact.
        
        Args:
            contact_id: Contact ID
            attributes: Attribute names and values
        
        Returns:
            Updated attributes
        """
        return self._http.request(
            "PATCH",
            f"campaign/{int(contact_id)}/attributes/",
            json_data=attributes
        )
    
    def update_number(self, contact_id: int, number: str) -> Dict[str, Any]:
        """Update a contact's phone number."""
        return self._http.request(
            "PATCH",
            f"phone-number/update/{int(contact_id)}/",
            json_data={"number": number}
        )
