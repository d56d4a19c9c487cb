from typing import Annotated, List, Literal, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


UserId = Annotated[int, Field(description="User ID")]
UserRole = Literal["end-user", "agent", "admin"]


#LIST USERS
async def list_users(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of users per page (max 100)")] = None,
    role: Annotated[Optional[UserRole], Field(description="Filter users by role")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page, "role": role}
    return await respond("listing users", client.list_users(params))


#GET USER
async def get_user(client: ZendeskClient, id: UserId) -> CallToolResult:
    return await respond("getting user", client.get_user(id))


#CREATE USER
async def create_user(
    client: ZendeskClient,
    name: Annotated[str, Field(description="User's full name")],
    email: Annotated[str, Field(description="User's email address")],
    role: Annotated[Optional[UserRole], Field(description="User's role")] = None,
    phone: Annotated[Optional[str], Field(description="User's phone number")] = None,
    organization_id: Annotated[Optional[int], Field(description="ID of the user's organization")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Tags for the user")] = None,
    notes: Annotated[Optional[str], Field(description="Notes about the user")] = None,
) -> CallToolResult:
    data = compact(
        name=name,
        email=email,
        role=role,
        phone=phone,
        organization_id=organization_id,
        tags=tags,
        notes=notes,
    )
    return await respond("creating user", client.create_user(data))


#UPDATE USER
async def update_user(
    client: ZendeskClient,
    id: UserId,
    name: Annotated[Optional[str], Field(description="Updated full name")] = None,
    email: Annotated[Optional[str], Field(description="Updated email address")] = None,
    role: Annotated[Optional[UserRole], Field(description="Updated role")] = None,
    phone: Annotated[Optional[str], Field(description="Updated phone number")] = None,
    organization_id: Annotated[Optional[int], Field(description="Updated organization ID")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Updated tags")] = None,
    notes: Annotated[Optional[str], Field(description="Updated notes")] = None,
) -> CallToolResult:
    data = compact(
        name=name,
        email=email,
        role=role,
        phone=phone,
        organization_id=organization_id,
        tags=tags,
        notes=notes,
    )
    return await respond("updating user", client.update_user(id, data))


#DELETE USER
async def delete_user(client: ZendeskClient, id: UserId) -> CallToolResult:
    return await respond("deleting user", client.delete_user(id))


TOOLS = [
    ToolDefinition("list_users", "List users in Zendesk", list_users),
    ToolDefinition("get_user", "Get a specific user by ID", get_user),
    ToolDefinition("create_user", "Create a new user", create_user),
    ToolDefinition("update_user", "Update an existing user", update_user),
    ToolDefinition("delete_user", "Delete a user", delete_user),
]
