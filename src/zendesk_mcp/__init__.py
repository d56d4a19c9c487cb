from .client import ZendeskClient
from .config import ZendeskSettings
from .errors import ApiError, ConfigurationError, ZendeskError

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ConfigurationError",
    "ZendeskClient",
    "ZendeskError",
    "ZendeskSettings",
]
