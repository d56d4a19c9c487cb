from typing import Annotated, Literal, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, respond


#SEARCH
async def search(
    client: ZendeskClient,
    query: Annotated[str, Field(description="Search query, e.g. 'type:ticket status:open'")],
    sort_by: Annotated[Optional[str], Field(description="Field to sort by (e.g. created_at, updated_at, priority, status)")] = None,
    sort_order: Annotated[Optional[Literal["asc", "desc"]], Field(description="Sort order")] = None,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of results per page (max 100)")] = None,
) -> CallToolResult:
    """Search across tickets, users and organizations.

    Query syntax follows the Zendesk search reference, for example
    'type:ticket status:open priority:urgent' or 'type:user email:*@example.com'.
    """
    params = {"sort_by": sort_by, "sort_order": sort_order, "page": page, "per_page": per_page}
    return await respond("searching", client.search(query, params))


TOOLS = [
    ToolDefinition("search", "Search across Zendesk data", search),
]
