from typing import Annotated, List, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


OrganizationId = Annotated[int, Field(description="Organization ID")]


#LIST ORGANIZATIONS
async def list_organizations(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of organizations per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing organizations", client.list_organizations(params))


#GET ORGANIZATION
async def get_organization(client: ZendeskClient, id: OrganizationId) -> CallToolResult:
    return await respond("getting organization", client.get_organization(id))


#CREATE ORGANIZATION
async def create_organization(
    client: ZendeskClient,
    name: Annotated[str, Field(description="Organization name")],
    domain_names: Annotated[Optional[List[str]], Field(description="Domain names associated with the organization")] = None,
    details: Annotated[Optional[str], Field(description="Details about the organization")] = None,
    notes: Annotated[Optional[str], Field(description="Notes about the organization")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Tags for the organization")] = None,
) -> CallToolResult:
    data = compact(name=name, domain_names=domain_names, details=details, notes=notes, tags=tags)
    return await respond("creating organization", client.create_organization(data))


#UPDATE ORGANIZATION
async def update_organization(
    client: ZendeskClient,
    id: OrganizationId,
    name: Annotated[Optional[str], Field(description="Updated organization name")] = None,
    domain_names: Annotated[Optional[List[str]], Field(description="Updated domain names")] = None,
    details: Annotated[Optional[str], Field(description="Updated details")] = None,
    notes: Annotated[Optional[str], Field(description="Updated notes")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Updated tags")] = None,
) -> CallToolResult:
    data = compact(name=name, domain_names=domain_names, details=details, notes=notes, tags=tags)
    return await respond("updating organization", client.update_organization(id, data))


#DELETE ORGANIZATION
async def delete_organization(client: ZendeskClient, id: OrganizationId) -> CallToolResult:
    return await respond("deleting organization", client.delete_organization(id))


TOOLS = [
    ToolDefinition("list_organizations", "List organizations in Zendesk", list_organizations),
    ToolDefinition("get_organization", "Get a specific organization by ID", get_organization),
    ToolDefinition("create_organization", "Create a new organization", create_organization),
    ToolDefinition("update_organization", "Update an existing organization", update_organization),
    ToolDefinition("delete_organization", "Delete an organization", delete_organization),
]
