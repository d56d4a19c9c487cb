from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


GroupId = Annotated[int, Field(description="Group ID")]


#LIST GROUPS
async def list_groups(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of groups per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing groups", client.list_groups(params))


#GET GROUP
async def get_group(client: ZendeskClient, id: GroupId) -> CallToolResult:
    return await respond("getting group", client.get_group(id))


#CREATE GROUP
async def create_group(
    client: ZendeskClient,
    name: Annotated[str, Field(description="Group name")],
    description: Annotated[Optional[str], Field(description="Group description")] = None,
) -> CallToolResult:
    data = compact(name=name, description=description)
    return await respond("creating group", client.create_group(data))


#UPDATE GROUP
async def update_group(
    client: ZendeskClient,
    id: GroupId,
    name: Annotated[Optional[str], Field(description="Updated group name")] = None,
    description: Annotated[Optional[str], Field(description="Updated group description")] = None,
) -> CallToolResult:
    data = compact(name=name, description=description)
    return await respond("updating group", client.update_group(id, data))


#DELETE GROUP
async def delete_group(client: ZendeskClient, id: GroupId) -> CallToolResult:
    return await respond("deleting group", client.delete_group(id))


TOOLS = [
    ToolDefinition("list_groups", "List agent groups in Zendesk", list_groups),
    ToolDefinition("get_group", "Get a specific group by ID", get_group),
    ToolDefinition("create_group", "Create a new agent group", create_group),
    ToolDefinition("update_group", "Update an existing group", update_group),
    ToolDefinition("delete_group", "Delete a group", delete_group),
]
