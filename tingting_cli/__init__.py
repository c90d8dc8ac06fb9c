"""
TingTing CLI - Python client and command line tool for the TingTing API.

TingTing is a telephony/SMS service offering voice campaigns, contact
management and OTP delivery. This package wraps its REST API.
"""

__version__ = "1.0.0"
__prog_name__ = "tingting"
__author__ = "TingTing"

from .api import TingTingClient, get_client
from .config import ClientConfig, get_config
from .exceptions import TingTingError, ApiError, ConfigurationError

__all__ = [
    "__version__",
    "TingTingClient",
    "get_client",
    "ClientConfig",
    "get_config",
    "TingTingError",
    "ApiError",
    "ConfigurationError",
]
