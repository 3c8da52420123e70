"""MCP Server 入口。

把 ToolDispatcher 挂到 mcp SDK 的低层 Server 上，并通过 stdio 提供服务：

- list_tools: ToolDef -> mcp.types.Tool。
- call_tool: 在工作线程中执行同步的 dispatcher，返回带 isError 标记的 CallToolResult。
  入参校验交给各 handler 自己做，所以关闭 SDK 的 inputSchema 校验。
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, Optional, Sequence

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from hubspot_mcp.config.settings import settings
from hubspot_mcp.domain.exceptions import ConfigurationError
from hubspot_mcp.infrastructure.logging.logger import logger
from hubspot_mcp.server.dispatcher import ToolDispatcher, create_dispatcher
from hubspot_mcp.services.hubspot import HubSpotService
from hubspot_mcp.tools.definitions import ToolDef, ToolResult


def to_mcp_tool(tool: ToolDef) -> types.Tool:
    return types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block["text"]) for block in result.content],
        isError=result.is_error,
    )


class HubSpotMCPServer:
    """组装 settings、HubSpotService、ToolDispatcher 与 mcp Server。"""

    def __init__(self, config=None, service: Optional[HubSpotService] = None):
        self._settings = config or settings
        self.hubspot_service = service or HubSpotService(self._settings)
        self.dispatcher: ToolDispatcher = create_dispatcher(self.hubspot_service)
        self.server = self._create_server()

    def _create_server(self) -> Server:
        server = Server(self._settings.server_name, version=self._settings.server_version)
        dispatcher = self.dispatcher

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [to_mcp_tool(tool) for tool in dispatcher.list_tools()]

        @server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
            result = await asyncio.to_thread(dispatcher.call_tool, name, arguments or {})
            return to_call_tool_result(result)

        return server

    async def run(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("HubSpot MCP Server running on stdio")
            print("HubSpot MCP Server running on stdio", file=sys.stderr)
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def describe_tools(dispatcher: ToolDispatcher) -> str:
    """按 handler 分组列出工具名，用于 --check 自检输出。"""

    groups: Dict[str, list] = {}
    for name in dispatcher.tool_names:
        handler = dispatcher.handler_for(name)
        groups.setdefault(handler.name, []).append(name)
    lines = ["Available tools:"]
    for group, names in groups.items():
        lines.append(f"  {group.capitalize()}: {', '.join(names)}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hubspot-mcp", description="HubSpot CRM MCP server (stdio)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="initialize the server, print the available tools and exit",
    )
    args = parser.parse_args(argv)

    try:
        app = HubSpotMCPServer()
    except ConfigurationError as e:
        logger.error(
            f"Server initialization failed: {e.message}",
            extra={"extra": {"code": e.code}},
        )
        print(
            "Error: HUBSPOT_API_KEY or HUBSPOT_ACCESS_TOKEN must be set (environment or .env file)",
            file=sys.stderr,
        )
        return 1

    if args.check:
        print(describe_tools(app.dispatcher), file=sys.stderr)
        return 0

    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        pass
    return 0
