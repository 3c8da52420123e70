"""HubSpot MCP Server 顶层包。

该包把 HubSpot CRM 的联系人、公司、交易与邮件操作暴露为 MCP 工具，
包括配置加载、领域模型、HubSpot 客户端、记录服务、工具 handler 与分发器。
"""

from hubspot_mcp.server.dispatcher import ToolDispatcher, create_dispatcher
from hubspot_mcp.services.hubspot import HubSpotService

__all__ = ["HubSpotService", "ToolDispatcher", "create_dispatcher"]
