"""Zendesk MCP tools.

Each sub-module exposes a ``TOOLS`` list of ``ToolDefinition`` entries;
``register_tools`` binds them to a client and adds them to a FastMCP server.
"""

from functools import partial
from typing import Iterable, List

from mcp.server.fastmcp import FastMCP

from ..client import ZendeskClient
from . import (
    automations,
    chat,
    groups,
    help_center,
    macros,
    organizations,
    search,
    talk,
    tickets,
    triggers,
    users,
    views,
)
from .base import ToolDefinition

ALL_TOOLS: List[ToolDefinition] = [
    *tickets.TOOLS,
    *users.TOOLS,
    *organizations.TOOLS,
    *groups.TOOLS,
    *macros.TOOLS,
    *views.TOOLS,
    *triggers.TOOLS,
    *automations.TOOLS,
    *search.TOOLS,
    *help_center.TOOLS,
    *talk.TOOLS,
    *chat.TOOLS,
]


def register_tools(mcp: FastMCP, client: ZendeskClient, tools: Iterable[ToolDefinition] = ALL_TOOLS) -> None:
    for tool in tools:
        handler = partial(tool.handler, client)
        # FastMCP names the argument model after the callable
        handler.__name__ = tool.handler.__name__
        mcp.add_tool(
            handler,
            name=tool.name,
            description=tool.description,
            structured_output=False,
        )


__all__ = ["ALL_TOOLS", "ToolDefinition", "register_tools"]
