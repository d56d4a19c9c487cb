from typing import Annotated, Any, Dict, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


ViewId = Annotated[int, Field(description="View ID")]
ViewConditions = Dict[str, Any]


#LIST VIEWS
async def list_views(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of views per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing views", client.list_views(params))


#GET VIEW
async def get_view(client: ZendeskClient, id: ViewId) -> CallToolResult:
    return await respond("getting view", client.get_view(id))


#CREATE VIEW
async def create_view(
    client: ZendeskClient,
    title: Annotated[str, Field(description="View title")],
    conditions: Annotated[ViewConditions, Field(description="Conditions for the view, with 'all' and/or 'any' lists of {field, operator, value}")],
    description: Annotated[Optional[str], Field(description="View description")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, conditions=conditions)
    return await respond("creating view", client.create_view(data))


#UPDATE VIEW
async def update_view(
    client: ZendeskClient,
    id: ViewId,
    title: Annotated[Optional[str], Field(description="Updated view title")] = None,
    description: Annotated[Optional[str], Field(description="Updated view description")] = None,
    conditions: Annotated[Optional[ViewConditions], Field(description="Updated conditions")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, conditions=conditions)
    return await respond("updating view", client.update_view(id, data))


#DELETE VIEW
async def delete_view(client: ZendeskClient, id: ViewId) -> CallToolResult:
    return await respond("deleting view", client.delete_view(id))


TOOLS = [
    ToolDefinition("list_views", "List views in Zendesk", list_views),
    ToolDefinition("get_view", "Get a specific view by ID", get_view),
    ToolDefinition("create_view", "Create a new view", create_view),
    ToolDefinition("update_view", "Update an existing view", update_view),
    ToolDefinition("delete_view", "Delete a view", delete_view),
]
