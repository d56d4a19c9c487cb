import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .client import ZendeskClient
from .config import ZendeskSettings
from .tools import register_tools


def create_server(client: ZendeskClient, name: str = "zendesk_mcp") -> FastMCP:
    """Build a FastMCP server exposing every Zendesk tool bound to ``client``."""
    mcp = FastMCP(name)
    register_tools(mcp, client)
    return mcp


def main(settings: Optional[ZendeskSettings] = None):
    settings = settings or ZendeskSettings.from_env()

    # stderr only; stdout carries the MCP stream
    logging.basicConfig(level=settings.log_level)

    logging.info("Starting Zendesk MCP server")
    mcp = create_server(ZendeskClient(settings))
    mcp.run(transport='stdio')

if __name__ == "__main__":
    main()
