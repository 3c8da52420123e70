import asyncio
import json

import mcp.types as types

from hubspot_mcp.server import app as server_app
from hubspot_mcp.server.app import HubSpotMCPServer, describe_tools, to_call_tool_result, to_mcp_tool
from hubspot_mcp.tools.definitions import ToolResult


def test_to_mcp_tool(dispatcher):
    tool = next(t for t in dispatcher.list_tools() if t.name == "create_contact")
    mcp_tool = to_mcp_tool(tool)
    assert isinstance(mcp_tool, types.Tool)
    assert mcp_tool.name == "create_contact"
    assert mcp_tool.inputSchema["required"] == ["email"]


def test_to_call_tool_result_keeps_error_flag():
    result = ToolResult(
        name="x",
        content=[{"type": "text", "text": "Error executing tool x: Unknown tool: x"}],
        is_error=True,
    )
    converted = to_call_tool_result(result)
    assert converted.isError is True
    assert converted.content[0].text == "Error executing tool x: Unknown tool: x"


def test_server_registers_handlers(settings_stub, service):
    app = HubSpotMCPServer(settings_stub, service=service)
    assert types.ListToolsRequest in app.server.request_handlers
    assert types.CallToolRequest in app.server.request_handlers
    assert len(app.dispatcher.tool_names) == 15


def _call(app, name, arguments):
    handler = app.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def test_call_tool_request_success(settings_stub, service):
    app = HubSpotMCPServer(settings_stub, service=service)
    result = _call(app, "create_deal", {"dealname": "D", "dealstage": "closedwon", "amount": 500})
    assert result.isError is False
    payload = json.loads(result.content[0].text)
    assert payload["success"] is True
    assert payload["data"]["properties"]["amount"] == "500"


def test_call_tool_request_missing_argument(settings_stub, service):
    app = HubSpotMCPServer(settings_stub, service=service)
    result = _call(app, "get_contact", {})
    assert result.isError is True
    assert result.content[0].text == "Error executing tool get_contact: Missing required argument: contactId"


def test_call_tool_request_unknown_tool(settings_stub, service):
    app = HubSpotMCPServer(settings_stub, service=service)
    result = _call(app, "delete_contact", {"contactId": "1"})
    assert result.isError is True
    assert result.content[0].text == "Error executing tool delete_contact: Unknown tool: delete_contact"


def test_list_tools_request_returns_every_tool(settings_stub, service):
    app = HubSpotMCPServer(settings_stub, service=service)
    handler = app.server.request_handlers[types.ListToolsRequest]
    result = asyncio.run(handler(types.ListToolsRequest(method="tools/list"))).root
    assert [tool.name for tool in result.tools] == [
        "get_contacts", "get_contact", "create_contact", "update_contact", "search_contacts",
        "get_companies", "get_company", "create_company", "update_company",
        "get_deals", "get_deal", "create_deal", "update_deal",
        "send_email", "get_email_events",
    ]
    assert all(tool.inputSchema["type"] == "object" for tool in result.tools)


def test_describe_tools(dispatcher):
    text = describe_tools(dispatcher)
    assert "Contacts: get_contacts, get_contact, create_contact, update_contact, search_contacts" in text
    assert "Emails: send_email, get_email_events" in text


def test_main_without_credentials_exits_with_error(monkeypatch, capsys):
    class NoCredentials:
        hubspot_api_key = None
        hubspot_access_token = None

    monkeypatch.setattr(server_app, "settings", NoCredentials())
    assert server_app.main([]) == 1
    assert "HUBSPOT_API_KEY" in capsys.readouterr().err


def test_main_check_lists_tools(monkeypatch, capsys, settings_stub):
    monkeypatch.setattr(server_app, "settings", settings_stub)
    assert server_app.main(["--check"]) == 0
    assert "Deals: get_deals, get_deal, create_deal, update_deal" in capsys.readouterr().err
