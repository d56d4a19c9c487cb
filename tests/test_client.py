import base64
import json

import httpx
import pytest

from zendesk_mcp.config import ZendeskSettings
from zendesk_mcp.errors import ApiError, ConfigurationError


def test_base_url(make_client):
    client = make_client()
    assert client.base_url == "https://acme.zendesk.com/api/v2"


def test_auth_header_uses_email_token_format(make_client):
    client = make_client()
    expected = base64.b64encode(b"agent@acme.com/token:secret-token").decode()
    assert client.auth_header() == f"Basic {expected}"


@pytest.mark.asyncio
async def test_request_sends_one_authenticated_call(make_client, sent_requests):
    client = make_client(lambda request: httpx.Response(200, json={"tickets": []}))

    result = await client.request("GET", "/tickets.json", params={"page": 1})

    assert result == {"tickets": []}
    assert len(sent_requests) == 1
    request = sent_requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://acme.zendesk.com/api/v2/tickets.json?page=1"
    assert request.headers["Authorization"] == client.auth_header()
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["subdomain", "email", "api_token"])
async def test_missing_credentials_raise_before_any_request(make_client, sent_requests, settings, missing):
    incomplete = settings.model_copy(update={missing: None})
    client = make_client(client_settings=incomplete)

    with pytest.raises(ConfigurationError, match="credentials not configured"):
        await client.request("GET", "/tickets.json")

    assert sent_requests == []


@pytest.mark.asyncio
async def test_error_response_raises_api_error(make_client):
    client = make_client(lambda request: httpx.Response(404, json={"error": "RecordNotFound"}))

    with pytest.raises(ApiError) as exc_info:
        await client.get_ticket(999)

    error = exc_info.value
    assert error.status_code == 404
    assert error.body == {"error": "RecordNotFound"}
    assert str(error) == 'Zendesk API Error: 404 - {"error":"RecordNotFound"}'


@pytest.mark.asyncio
async def test_error_response_with_text_body(make_client):
    client = make_client(lambda request: httpx.Response(503, text="Service Unavailable"))

    with pytest.raises(ApiError) as exc_info:
        await client.list_users()

    assert exc_info.value.body == "Service Unavailable"
    assert "503" in str(exc_info.value)


@pytest.mark.asyncio
async def test_transport_error_propagates_unchanged(make_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(refuse)

    with pytest.raises(httpx.ConnectError, match="connection refused"):
        await client.list_tickets()


@pytest.mark.asyncio
async def test_unset_query_params_are_omitted(make_client, sent_requests):
    client = make_client()

    await client.list_tickets({"page": 2, "per_page": None, "sort_by": None})

    assert dict(sent_requests[0].url.params) == {"page": "2"}


@pytest.mark.asyncio
async def test_empty_response_body_returns_none(make_client):
    client = make_client(lambda request: httpx.Response(204))

    assert await client.delete_ticket(1) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation, path, envelope",
    [
        ("create_ticket", "/api/v2/tickets.json", "ticket"),
        ("create_user", "/api/v2/users.json", "user"),
        ("create_organization", "/api/v2/organizations.json", "organization"),
        ("create_group", "/api/v2/groups.json", "group"),
        ("create_macro", "/api/v2/macros.json", "macro"),
        ("create_view", "/api/v2/views.json", "view"),
        ("create_trigger", "/api/v2/triggers.json", "trigger"),
        ("create_automation", "/api/v2/automations.json", "automation"),
    ],
)
async def test_create_wraps_data_in_envelope(make_client, sent_requests, operation, path, envelope):
    client = make_client()
    data = {"subject": "x", "tags": ["vip"]}

    await getattr(client, operation)(data)

    request = sent_requests[0]
    assert request.method == "POST"
    assert request.url.path == path
    assert json.loads(request.content) == {envelope: data}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation, path, envelope",
    [
        ("update_ticket", "/api/v2/tickets/42.json", "ticket"),
        ("update_user", "/api/v2/users/42.json", "user"),
        ("update_organization", "/api/v2/organizations/42.json", "organization"),
        ("update_group", "/api/v2/groups/42.json", "group"),
        ("update_macro", "/api/v2/macros/42.json", "macro"),
        ("update_view", "/api/v2/views/42.json", "view"),
        ("update_trigger", "/api/v2/triggers/42.json", "trigger"),
        ("update_automation", "/api/v2/automations/42.json", "automation"),
        ("update_article", "/api/v2/help_center/articles/42.json", "article"),
    ],
)
async def test_update_puts_to_resource_path(make_client, sent_requests, operation, path, envelope):
    client = make_client()

    await getattr(client, operation)(42, {"name": "renamed"})

    request = sent_requests[0]
    assert request.method == "PUT"
    assert request.url.path == path
    assert json.loads(request.content) == {envelope: {"name": "renamed"}}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation, path",
    [
        ("delete_ticket", "/api/v2/tickets/7.json"),
        ("delete_user", "/api/v2/users/7.json"),
        ("delete_organization", "/api/v2/organizations/7.json"),
        ("delete_group", "/api/v2/groups/7.json"),
        ("delete_macro", "/api/v2/macros/7.json"),
        ("delete_view", "/api/v2/views/7.json"),
        ("delete_trigger", "/api/v2/triggers/7.json"),
        ("delete_automation", "/api/v2/automations/7.json"),
        ("delete_article", "/api/v2/help_center/articles/7.json"),
    ],
)
async def test_delete_paths(make_client, sent_requests, operation, path):
    client = make_client(lambda request: httpx.Response(204))

    await getattr(client, operation)(7)

    assert sent_requests[0].method == "DELETE"
    assert sent_requests[0].url.path == path
    assert sent_requests[0].content == b""


@pytest.mark.asyncio
async def test_create_article_posts_to_section(make_client, sent_requests):
    client = make_client()

    await client.create_article({"title": "How to reset a password"}, 360001)

    request = sent_requests[0]
    assert request.url.path == "/api/v2/help_center/sections/360001/articles.json"
    assert json.loads(request.content) == {"article": {"title": "How to reset a password"}}


@pytest.mark.asyncio
async def test_search_merges_query_with_params(make_client, sent_requests):
    client = make_client()

    await client.search("type:ticket status:open", {"sort_by": "created_at", "page": None})

    request = sent_requests[0]
    assert request.url.path == "/api/v2/search.json"
    assert dict(request.url.params) == {"query": "type:ticket status:open", "sort_by": "created_at"}


@pytest.mark.asyncio
async def test_single_purpose_endpoints(make_client, sent_requests):
    client = make_client()

    await client.get_talk_stats()
    await client.list_chats({"page": 2, "per_page": 50})
    await client.list_articles()

    assert [r.url.path for r in sent_requests] == [
        "/api/v2/channels/voice/stats.json",
        "/api/v2/chats.json",
        "/api/v2/help_center/articles.json",
    ]
    assert dict(sent_requests[1].url.params) == {"page": "2", "per_page": "50"}


def test_missing_credentials_warn_on_construction(make_client, caplog):
    with caplog.at_level("WARNING", logger="zendesk_mcp.client"):
        make_client(client_settings=ZendeskSettings(subdomain="acme"))

    assert "ZENDESK_EMAIL" in caplog.text
    assert "ZENDESK_API_TOKEN" in caplog.text
    assert "ZENDESK_SUBDOMAIN" not in caplog.text


def test_api_error_keeps_non_ascii_body_text():
    error = ApiError(422, {"description": "Ungültig"})

    assert str(error) == 'Zendesk API Error: 422 - {"description":"Ungültig"}'
