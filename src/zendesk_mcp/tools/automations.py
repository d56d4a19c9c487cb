from typing import Annotated, Any, Dict, List, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


AutomationId = Annotated[int, Field(description="Automation ID")]


#LIST AUTOMATIONS
async def list_automations(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of automations per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing automations", client.list_automations(params))


#GET AUTOMATION
async def get_automation(client: ZendeskClient, id: AutomationId) -> CallToolResult:
    return await respond("getting automation", client.get_automation(id))


#CREATE AUTOMATION
async def create_automation(
    client: ZendeskClient,
    title: Annotated[str, Field(description="Automation title")],
    conditions: Annotated[Dict[str, Any], Field(description="Conditions for the automation; Zendesk requires at least one time-based condition (e.g. hours_since_solved)")],
    actions: Annotated[List[Dict[str, Any]], Field(description="Actions to perform when the automation runs")],
    description: Annotated[Optional[str], Field(description="Automation description")] = None,
    active: Annotated[Optional[bool], Field(description="Whether the automation is active")] = None,
) -> CallToolResult:
    """Create an automation.

    Automations run hourly against tickets matching the conditions, so the
    conditions must include a time-based rule and an action that nullifies it.
    """
    data = compact(title=title, description=description, conditions=conditions, actions=actions, active=active)
    return await respond("creating automation", client.create_automation(data))


#UPDATE AUTOMATION
async def update_automation(
    client: ZendeskClient,
    id: AutomationId,
    title: Annotated[Optional[str], Field(description="Updated automation title")] = None,
    description: Annotated[Optional[str], Field(description="Updated automation description")] = None,
    conditions: Annotated[Optional[Dict[str, Any]], Field(description="Updated conditions")] = None,
    actions: Annotated[Optional[List[Dict[str, Any]]], Field(description="Updated actions")] = None,
    active: Annotated[Optional[bool], Field(description="Whether the automation is active")] = None,
) -> CallToolResult:
    data = compact(title=title, description=description, conditions=conditions, actions=actions, active=active)
    return await respond("updating automation", client.update_automation(id, data))


#DELETE AUTOMATION
async def delete_automation(client: ZendeskClient, id: AutomationId) -> CallToolResult:
    return await respond("deleting automation", client.delete_automation(id))


TOOLS = [
    ToolDefinition("list_automations", "List automations in Zendesk", list_automations),
    ToolDefinition("get_automation", "Get a specific automation by ID", get_automation),
    ToolDefinition("create_automation", "Create a new automation", create_automation),
    ToolDefinition("update_automation", "Update an existing automation", update_automation),
    ToolDefinition("delete_automation", "Delete an automation", delete_automation),
]
