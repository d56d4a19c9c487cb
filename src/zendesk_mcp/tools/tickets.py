from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


class TicketPriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

class TicketStatus(str, Enum):
    NEW = "new"
    OPEN = "open"
    PENDING = "pending"
    HOLD = "hold"
    SOLVED = "solved"
    CLOSED = "closed"

class TicketType(str, Enum):
    PROBLEM = "problem"
    INCIDENT = "incident"
    QUESTION = "question"
    TASK = "task"


TicketId = Annotated[int, Field(description="Ticket ID")]


def _ticket_data(
    subject: Optional[str] = None,
    comment: Optional[str] = None,
    **fields: Any,
) -> Dict[str, Any]:
    # Zendesk expects the comment as an object, not a bare string
    data = compact(subject=subject, **fields)
    if comment is not None:
        data["comment"] = {"body": comment}
    return data


#LIST TICKETS
async def list_tickets(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of tickets per page (max 100)")] = None,
    sort_by: Annotated[Optional[str], Field(description="Field to sort by (e.g. created_at, updated_at, priority, status)")] = None,
    sort_order: Annotated[Optional[Literal["asc", "desc"]], Field(description="Sort order")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page, "sort_by": sort_by, "sort_order": sort_order}
    return await respond("listing tickets", client.list_tickets(params))

#GET TICKET
async def get_ticket(client: ZendeskClient, id: TicketId) -> CallToolResult:
    return await respond("getting ticket", client.get_ticket(id))

#CREATE TICKET
async def create_ticket(
    client: ZendeskClient,
    subject: Annotated[str, Field(description="Ticket subject")],
    comment: Annotated[str, Field(description="Ticket comment/description")],
    priority: Annotated[Optional[TicketPriority], Field(description="Ticket priority")] = None,
    status: Annotated[Optional[TicketStatus], Field(description="Ticket status")] = None,
    requester_id: Annotated[Optional[int], Field(description="User ID of the requester")] = None,
    assignee_id: Annotated[Optional[int], Field(description="User ID of the assignee")] = None,
    group_id: Annotated[Optional[int], Field(description="Group ID for the ticket")] = None,
    type: Annotated[Optional[TicketType], Field(description="Ticket type")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Tags for the ticket")] = None,
    custom_fields: Annotated[Optional[List[Dict[str, Any]]], Field(description="Custom field values as a list of {id, value} objects")] = None,
) -> CallToolResult:
    """Create a ticket.

    The comment becomes the ticket's first (public) comment.
    """
    data = _ticket_data(
        subject=subject,
        comment=comment,
        priority=priority,
        status=status,
        requester_id=requester_id,
        assignee_id=assignee_id,
        group_id=group_id,
        type=type,
        tags=tags,
        custom_fields=custom_fields,
    )
    return await respond("creating ticket", client.create_ticket(data))

#UPDATE TICKET
async def update_ticket(
    client: ZendeskClient,
    id: TicketId,
    subject: Annotated[Optional[str], Field(description="Updated ticket subject")] = None,
    comment: Annotated[Optional[str], Field(description="New comment to add")] = None,
    priority: Annotated[Optional[TicketPriority], Field(description="Updated ticket priority")] = None,
    status: Annotated[Optional[TicketStatus], Field(description="Updated ticket status")] = None,
    assignee_id: Annotated[Optional[int], Field(description="User ID of the new assignee")] = None,
    group_id: Annotated[Optional[int], Field(description="New group ID for the ticket")] = None,
    type: Annotated[Optional[TicketType], Field(description="Updated ticket type")] = None,
    tags: Annotated[Optional[List[str]], Field(description="Updated tags for the ticket")] = None,
    custom_fields: Annotated[Optional[List[Dict[str, Any]]], Field(description="Updated custom field values")] = None,
) -> CallToolResult:
    data = _ticket_data(
        subject=subject,
        comment=comment,
        priority=priority,
        status=status,
        assignee_id=assignee_id,
        group_id=group_id,
        type=type,
        tags=tags,
        custom_fields=custom_fields,
    )
    return await respond("updating ticket", client.update_ticket(id, data))

#DELETE TICKET
async def delete_ticket(client: ZendeskClient, id: TicketId) -> CallToolResult:
    return await respond("deleting ticket", client.delete_ticket(id))


TOOLS = [
    ToolDefinition("list_tickets", "List tickets in Zendesk", list_tickets),
    ToolDefinition("get_ticket", "Get a specific ticket by ID", get_ticket),
    ToolDefinition("create_ticket", "Create a new ticket", create_ticket),
    ToolDefinition("update_ticket", "Update an existing ticket", update_ticket),
    ToolDefinition("delete_ticket", "Delete a ticket", delete_ticket),
]
