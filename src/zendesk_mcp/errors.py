import json
from typing import Any


class ZendeskError(Exception):
    """Base class for errors raised by the Zendesk client."""


class ConfigurationError(ZendeskError):
    """Raised when Zendesk credentials are missing."""


class ApiError(ZendeskError):
    """Raised when the Zendesk API answers with a non-success status."""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Zendesk API Error: {status_code} - {json.dumps(body, ensure_ascii=False, separators=(',', ':'))}"
        )
