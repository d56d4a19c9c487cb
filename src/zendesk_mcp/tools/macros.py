from typing import Annotated, Any, Dict, List, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


MacroId = Annotated[int, Field(description="Macro ID")]
MacroActions = List[Dict[str, Any]]


#LIST MACROS
async def list_macros(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of macros per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing macros", client.list_macros(params))


#GET MACRO
async def get_macro(client: ZendeskClient, id: MacroId) -> CallToolResult:
    return await respond("getting macro", client.get_macro(id))


#CREATE MACRO
async def create_macro(
    client: ZendeskClient,
    title: Annotated[str, Field(description="Macro title")],
    actions: Annotated[MacroActions, Field(description="Actions to perform, as a list of {field, value} objects")],
    description: Annotated[Optional[str], Field(description="Macro description")] = None,
) -> CallToolResult:
    """Create a macro.

    Example actions: [{"field": "status", "value": "solved"},
    {"field": "comment_value", "value": "Thanks for reaching out"}]
    """
    data = compact(title=title, description=description, actions=actions)
    return await respond("creating macro", client.create_macro(data))


#UPDATE MACRO
async def update_macro(
    client: ZendeskClient,
    id: MacroId,
    title: Annotated[Optional[str], Field(description="Updated macro title")] = None,
    description: Annotated[Optional[str], Field(description="Updated macro description")] = None,
    actions: Annotated[Optional[MacroActions], Field(description="Updated actions")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, actions=actions)
    return await respond("updating macro", client.update_macro(id, data))


#DELETE MACRO
async def delete_macro(client: ZendeskClient, id: MacroId) -> CallToolResult:
    return await respond("deleting macro", client.delete_macro(id))


TOOLS = [
    ToolDefinition("list_macros", "List macros in Zendesk", list_macros),
    ToolDefinition("get_macro", "Get a specific macro by ID", get_macro),
    ToolDefinition("create_macro", "Create a new macro", create_macro),
    ToolDefinition("update_macro", "Update an existing macro", update_macro),
    ToolDefinition("delete_macro", "Delete a macro", delete_macro),
]
