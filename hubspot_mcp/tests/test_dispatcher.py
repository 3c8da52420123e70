"""测试工具分发器的注册与错误归一化。"""

import pytest

from hubspot_mcp.domain.exceptions import UnknownToolError
from hubspot_mcp.server.dispatcher import ToolDispatcher
from hubspot_mcp.tools.base import BaseTool
from hubspot_mcp.tools.contacts import ContactTool
from hubspot_mcp.tools.definitions import ToolDef


EXPECTED_TOOLS = {
    "get_contacts", "get_contact", "create_contact", "update_contact", "search_contacts",
    "get_companies", "get_company", "create_company", "update_company",
    "get_deals", "get_deal", "create_deal", "update_deal",
    "send_email", "get_email_events",
}


class EchoTool(BaseTool):
    def __init__(self, name, tool_names):
        super().__init__(hubspot_service=None)
        self.name = name
        self._tool_names = tool_names

    def get_tools(self):
        return [ToolDef(name=n, description=n, params={}) for n in self._tool_names]

    def routes(self):
        return {n: (lambda args, n=n: {"handler": self.name, "tool": n}) for n in self._tool_names}


def test_list_tools_has_no_duplicates(dispatcher):
    names = [tool.name for tool in dispatcher.list_tools()]
    assert len(names) == len(set(names)) == 15
    assert set(names) == EXPECTED_TOOLS
    assert set(dispatcher.tool_names) == EXPECTED_TOOLS


def test_input_schema_shape(dispatcher):
    schemas = {tool.name: tool.input_schema() for tool in dispatcher.list_tools()}
    assert schemas["create_deal"]["required"] == ["dealname", "dealstage"]
    assert schemas["create_deal"]["properties"]["amount"]["type"] == "number"
    assert "required" not in schemas["get_contacts"]
    assert schemas["get_contacts"]["properties"]["limit"]["default"] == 10
    assert schemas["send_email"]["properties"]["to"]["items"] == {"type": "string"}


def test_unknown_tool_is_error_result(dispatcher):
    res = dispatcher.call_tool("delete_everything", {"id": "1"})
    assert res.is_error
    assert "delete_everything" in res.text
    assert res.text == "Error executing tool delete_everything: Unknown tool: delete_everything"


def test_none_arguments_are_treated_as_empty(dispatcher, fake_client):
    res = dispatcher.call_tool("get_contacts", None)
    assert not res.is_error
    assert fake_client.calls[-1][2] == 10


def test_first_registrant_wins_on_collision():
    first = EchoTool("first", ["shared", "only_first"])
    second = EchoTool("second", ["shared", "only_second"])
    dispatcher = ToolDispatcher([first, second])

    assert dispatcher.handler_for("shared") is first
    assert dispatcher.handler_for("only_second") is second
    assert '"handler": "first"' in dispatcher.call_tool("shared", {}).text


def test_handler_rejects_foreign_tool_name(service):
    tool = ContactTool(service)
    with pytest.raises(UnknownToolError) as exc_info:
        tool.execute_tool("get_deals", {})
    assert exc_info.value.code == "UNKNOWN_TOOL"
    assert exc_info.value.message == "Unknown tool: get_deals"
