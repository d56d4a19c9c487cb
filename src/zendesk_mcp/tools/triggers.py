from typing import Annotated, Any, Dict, List, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


TriggerId = Annotated[int, Field(description="Trigger ID")]


#LIST TRIGGERS
async def list_triggers(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of triggers per page (max 100)")] = None,
    active: Annotated[Optional[bool], Field(description="Only return active (true) or inactive (false) triggers")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page, "active": active}
    return await respond("listing triggers", client.list_triggers(params))


#GET TRIGGER
async def get_trigger(client: ZendeskClient, id: TriggerId) -> CallToolResult:
    return await respond("getting trigger", client.get_trigger(id))


#CREATE TRIGGER
async def create_trigger(
    client: ZendeskClient,
    title: Annotated[str, Field(description="Trigger title")],
    conditions: Annotated[Dict[str, Any], Field(description="Conditions for the trigger, with 'all' and/or 'any' lists of {field, operator, value}")],
    actions: Annotated[List[Dict[str, Any]], Field(description="Actions to perform when the trigger fires")],
    description: Annotated[Optional[str], Field(description="Trigger description")] = None,
    active: Annotated[Optional[bool], Field(description="Whether the trigger is active")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, conditions=conditions, actions=actions, active=active)
    return await respond("creating trigger", client.create_trigger(data))


#UPDATE TRIGGER
async def update_trigger(
    client: ZendeskClient,
    id: TriggerId,
    title: Annotated[Optional[str], Field(description="Updated trigger title")] = None,
    description: Annotated[Optional[str], Field(description="Updated trigger description")] = None,
    conditions: Annotated[Optional[Dict[str, Any]], Field(description="Updated conditions")] = None,
    actions: Annotated[Optional[List[Dict[str, Any]]], Field(description="Updated actions")] = None,
    active: Annotated[Optional[bool], Field(description="Whether the trigger is active")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, conditions=conditions, actions=actions, active=active)
    return await respond("updating trigger", client.update_trigger(id, data))


#DELETE TRIGGER
async def delete_trigger(client: ZendeskClient, id: TriggerId) -> CallToolResult:
    return await respond("deleting trigger", client.delete_trigger(id))


TOOLS = [
    ToolDefinition("list_triggers", "List triggers in Zendesk", list_triggers),
    ToolDefinition("get_trigger", "Get a specific trigger by ID", get_trigger),
    ToolDefinition("create_trigger", "Create a new trigger", create_trigger),
    ToolDefinition("update_trigger", "Update an existing trigger", update_trigger),
    ToolDefinition("delete_trigger", "Delete a trigger", delete_trigger),
]
