import base64
import logging
from typing import Any, Dict, Optional

import httpx

from .config import ZendeskSettings
from .errors import ApiError, ConfigurationError


logger = logging.getLogger(__name__)


def _compact(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


class ZendeskClient:
    """Authenticated access to the Zendesk API v2.

    Covers the Support, Help Center, Talk and Chat endpoints. Every call is a
    single attempt; failures surface as ``ConfigurationError``, ``ApiError`` or
    the underlying ``httpx`` transport error.
    """

    def __init__(self, settings: ZendeskSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

        if not settings.is_configured:
            logger.warning(
                "Zendesk credentials not found in environment variables. Please set %s.",
                ", ".join(settings.missing_fields()),
            )

    @property
    def base_url(self) -> str:
        return f"https://{self.settings.subdomain}.zendesk.com/api/v2"

    def auth_header(self) -> str:
        credentials = f"{self.settings.email}/token:{self.settings.api_token}"
        return f"Basic {base64.b64encode(credentials.encode()).decode()}"

    def auth_headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.auth_header(),
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request to the Zendesk API and return the decoded body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path below the API root, e.g. '/tickets.json'
            data: JSON body for POST/PUT requests
            params: Query parameters; entries set to None are left out

        Raises:
            ConfigurationError: if any credential is missing (no request is sent)
            ApiError: if Zendesk answers with a non-2xx status
            httpx.RequestError: on network failures
        """
        if not self.settings.is_configured:
            raise ConfigurationError("Zendesk credentials not configured. Please set environment variables.")

        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, endpoint)

        async with httpx.AsyncClient(transport=self._transport, timeout=None, follow_redirects=True) as client:
            response = await client.request(
                method,
                url,
                headers=self.auth_headers(),
                json=data,
                params=_compact(params),
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise ApiError(response.status_code, body) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    # TICKETS
    async def list_tickets(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/tickets.json", params=params)

    async def get_ticket(self, ticket_id: int) -> Any:
        return await self.request("GET", f"/tickets/{ticket_id}.json")

    async def create_ticket(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/tickets.json", {"ticket": data})

    async def update_ticket(self, ticket_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/tickets/{ticket_id}.json", {"ticket": data})

    async def delete_ticket(self, ticket_id: int) -> Any:
        return await self.request("DELETE", f"/tickets/{ticket_id}.json")

    # USERS
    async def list_users(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/users.json", params=params)

    async def get_user(self, user_id: int) -> Any:
        return await self.request("GET", f"/users/{user_id}.json")

    async def create_user(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/users.json", {"user": data})

    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/users/{user_id}.json", {"user": data})

    async def delete_user(self, user_id: int) -> Any:
        return await self.request("DELETE", f"/users/{user_id}.json")

    # ORGANIZATIONS
    async def list_organizations(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/organizations.json", params=params)

    async def get_organization(self, organization_id: int) -> Any:
        return await self.request("GET", f"/organizations/{organization_id}.json")

    async def create_organization(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/organizations.json", {"organization": data})

    async def update_organization(self, organization_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/organizations/{organization_id}.json", {"organization": data})

    async def delete_organization(self, organization_id: int) -> Any:
        return await self.request("DELETE", f"/organizations/{organization_id}.json")

    # GROUPS
    async def list_groups(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/groups.json", params=params)

    async def get_group(self, group_id: int) -> Any:
        return await self.request("GET", f"/groups/{group_id}.json")

    async def create_group(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/groups.json", {"group": data})

    async def update_group(self, group_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/groups/{group_id}.json", {"group": data})

    async def delete_group(self, group_id: int) -> Any:
        return await self.request("DELETE", f"/groups/{group_id}.json")

    # MACROS
    async def list_macros(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/macros.json", params=params)

    async def get_macro(self, macro_id: int) -> Any:
        return await self.request("GET", f"/macros/{macro_id}.json")

    async def create_macro(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/macros.json", {"macro": data})

    async def update_macro(self, macro_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/macros/{macro_id}.json", {"macro": data})

    async def delete_macro(self, macro_id: int) -> Any:
        return await self.request("DELETE", f"/macros/{macro_id}.json")

    # VIEWS
    async def list_views(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/views.json", params=params)

    async def get_view(self, view_id: int) -> Any:
        return await self.request("GET", f"/views/{view_id}.json")

    async def create_view(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/views.json", {"view": data})

    async def update_view(self, view_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/views/{view_id}.json", {"view": data})

    async def delete_view(self, view_id: int) -> Any:
        return await self.request("DELETE", f"/views/{view_id}.json")

    # TRIGGERS
    async def list_triggers(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/triggers.json", params=params)

    async def get_trigger(self, trigger_id: int) -> Any:
        return await self.request("GET", f"/triggers/{trigger_id}.json")

    async def create_trigger(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/triggers.json", {"trigger": data})

    async def update_trigger(self, trigger_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/triggers/{trigger_id}.json", {"trigger": data})

    async def delete_trigger(self, trigger_id: int) -> Any:
        return await self.request("DELETE", f"/triggers/{trigger_id}.json")

    # AUTOMATIONS
    async def list_automations(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/automations.json", params=params)

    async def get_automation(self, automation_id: int) -> Any:
        return await self.request("GET", f"/automations/{automation_id}.json")

    async def create_automation(self, data: Dict[str, Any]) -> Any:
        return await self.request("POST", "/automations.json", {"automation": data})

    async def update_automation(self, automation_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/automations/{automation_id}.json", {"automation": data})

    async def delete_automation(self, automation_id: int) -> Any:
        return await self.request("DELETE", f"/automations/{automation_id}.json")

    # SEARCH
    async def search(self, query: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/search.json", params={"query": query, **(params or {})})

    # HELP CENTER
    async def list_articles(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/help_center/articles.json", params=params)

    async def get_article(self, article_id: int) -> Any:
        return await self.request("GET", f"/help_center/articles/{article_id}.json")

    async def create_article(self, data: Dict[str, Any], section_id: int) -> Any:
        return await self.request("POST", f"/help_center/sections/{section_id}/articles.json", {"article": data})

    async def update_article(self, article_id: int, data: Dict[str, Any]) -> Any:
        return await self.request("PUT", f"/help_center/articles/{article_id}.json", {"article": data})

    async def delete_article(self, article_id: int) -> Any:
        return await self.request("DELETE", f"/help_center/articles/{article_id}.json")

    # TALK
    async def get_talk_stats(self) -> Any:
        return await self.request("GET", "/channels/voice/stats.json")

    # CHAT
    async def list_chats(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", "/chats.json", params=params)
