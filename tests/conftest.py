"""Pytest configuration and fixtures."""

import httpx
import pytest

from zendesk_mcp.client import ZendeskClient
from zendesk_mcp.config import ZendeskSettings


@pytest.fixture
def settings():
    return ZendeskSettings(subdomain="acme", email="agent@acme.com", api_token="secret-token")


@pytest.fixture
def sent_requests():
    """Requests that reached the mocked Zendesk API, in order."""
    return []


@pytest.fixture
def make_client(settings, sent_requests):
    """Build a ZendeskClient whose HTTP traffic goes to ``handler``.

    Without a handler every request gets an empty JSON object back.
    """
    def _make(handler=None, client_settings=None):
        def _handle(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if handler is None:
                return httpx.Response(200, json={})
            return handler(request)

        return ZendeskClient(client_settings or settings, transport=httpx.MockTransport(_handle))

    return _make
