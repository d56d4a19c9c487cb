from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, respond


#LIST CHATS
async def list_chats(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of chats per page (max 100)")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page}
    return await respond("listing chats", client.list_chats(params))


TOOLS = [
    ToolDefinition("list_chats", "List Zendesk Chat conversations", list_chats),
]
