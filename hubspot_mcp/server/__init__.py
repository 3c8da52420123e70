"""MCP 协议层：工具分发器与 stdio server。"""

from hubspot_mcp.server.dispatcher import ToolDispatcher, create_dispatcher

__all__ = ["ToolDispatcher", "create_dispatcher"]
