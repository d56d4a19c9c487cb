from typing import Annotated, List, Literal, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..client import ZendeskClient
from .base import ToolDefinition, compact, respond


ArticleId = Annotated[int, Field(description="Article ID")]


#LIST ARTICLES
async def list_articles(
    client: ZendeskClient,
    page: Annotated[Optional[int], Field(description="Page number for pagination")] = None,
    per_page: Annotated[Optional[int], Field(description="Number of articles per page (max 100)")] = None,
    sort_by: Annotated[Optional[Literal["position", "title", "created_at", "updated_at"]], Field(description="Field to sort by")] = None,
    sort_order: Annotated[Optional[Literal["asc", "desc"]], Field(description="Sort order")] = None,
) -> CallToolResult:
    params = {"page": page, "per_page": per_page, "sort_by": sort_by, "sort_order": sort_order}
    return await respond("listing articles", client.list_articles(params))


#GET ARTICLE
async def get_article(client: ZendeskClient, id: ArticleId) -> CallToolResult:
    return await respond("getting article", client.get_article(id))


#CREATE ARTICLE
async def create_article(
    client: ZendeskClient,
    section_id: Annotated[int, Field(description="ID of the section the article belongs to")],
    title: Annotated[str, Field(description="Article title")],
    body: Annotated[str, Field(description="Article body content (HTML)")],
    locale: Annotated[Optional[str], Field(description="Article locale (e.g. 'en-us')")] = None,
    draft: Annotated[Optional[bool], Field(description="Whether the article is a draft")] = None,
    permission_group_id: Annotated[Optional[int], Field(description="Permission group ID controlling who can edit the article")] = None,
    user_segment_id: Annotated[Optional[int], Field(description="User segment ID controlling who can view the article")] = None,
    label_names: Annotated[Optional[List[str]], Field(description="Labels for the article")] = None,
) -> CallToolResult:
    """Create a Help Center article inside a section."""
    data = compact(
        title=title,
        body=body,
        locale=locale,
        draft=draft,
        permission_group_id=permission_group_id,
        user_segment_id=user_segment_id,
        label_names=label_names,
    )
    return await respond("creating article", client.create_article(data, section_id))


#UPDATE ARTICLE
async def update_article(
    client: ZendeskClient,
    id: ArticleId,
    title: Annotated[Optional[str], Field(description="Updated article title")] = None,
    body: Annotated[Optional[str], Field(description="Updated article body content (HTML)")] = None,
    locale: Annotated[Optional[str], Field(description="Updated article locale")] = None,
    draft: Annotated[Optional[bool], Field(description="Whether the article is a draft")] = None,
    permission_group_id: Annotated[Optional[int], Field(description="Updated permission group ID")] = None,
    user_segment_id: Annotated[Optional[int], Field(description="Updated user segment ID")] = None,
    label_names: Annotated[Optional[List[str]], Field(description="Updated labels")] = None,
) -> CallToolResult:
    data = compact(
        title=title,
        body=body,
        locale=locale,
        draft=draft,
        permission_group_id=permission_group_id,
        user_segment_id=user_segment_id,
        label_names=label_names,
    )
    return await respond("updating article", client.update_article(id, data))


#DELETE ARTICLE
async def delete_article(client: ZendeskClient, id: ArticleId) -> CallToolResult:
    return await respond("deleting article", client.delete_article(id))


TOOLS = [
    ToolDefinition("list_articles", "List Help Center articles", list_articles),
    ToolDefinition("get_article", "Get a specific Help Center article by ID", get_article),
    ToolDefinition("create_article", "Create a new Help Center article", create_article),
    ToolDefinition("update_article", "Update an existing Help Center article", update_article),
    ToolDefinition("delete_article", "Delete a Help Center article", delete_article),
]
