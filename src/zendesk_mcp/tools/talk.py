from mcp.types import CallToolResult

from ..client import ZendeskClient
from .base import ToolDefinition, respond


#GET TALK STATS
async def get_talk_stats(client: ZendeskClient) -> CallToolResult:
    return await respond("getting Talk stats", client.get_talk_stats())


TOOLS = [
    ToolDefinition("get_talk_stats", "Get Zendesk Talk statistics", get_talk_stats),
]
