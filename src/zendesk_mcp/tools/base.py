import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Union

from mcp.types import CallToolResult, TextContent


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool exposed to the MCP host.

    ``handler`` is an async function taking the Zendesk client as its first
    positional argument; its remaining keyword parameters make up the tool's
    input schema.
    """

    name: str
    description: str
    handler: Callable[..., Awaitable[CallToolResult]]


@dataclass(frozen=True)
class ToolSuccess:
    data: Any


@dataclass(frozen=True)
class ToolFailure:
    action: str
    message: str

    @property
    def text(self) -> str:
        return f"Error {self.action}: {self.message}"


ToolOutcome = Union[ToolSuccess, ToolFailure]


def compact(**fields: Any) -> Dict[str, Any]:
    """Build a request payload, leaving out fields that were not supplied."""
    return {key: value for key, value in fields.items() if value is not None}


async def run_tool(action: str, call: Awaitable[Any]) -> ToolOutcome:
    """Await a client call and capture its outcome.

    Args:
        action: Verb phrase used in the error text, e.g. 'listing chats'
        call: The pending client call
    """
    try:
        return ToolSuccess(await call)
    except Exception as e:
        logger.warning("Error %s: %s", action, e)
        return ToolFailure(action, str(e))


def render_result(outcome: ToolOutcome) -> CallToolResult:
    if isinstance(outcome, ToolSuccess):
        text = json.dumps(outcome.data, indent=2, ensure_ascii=False)
        return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)
    return CallToolResult(content=[TextContent(type="text", text=outcome.text)], isError=True)


async def respond(action: str, call: Awaitable[Any]) -> CallToolResult:
    return render_result(await run_tool(action, call))
