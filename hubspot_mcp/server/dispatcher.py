"""工具分发器。

启动时遍历每个 handler 声明的工具，建立“工具名 -> handler”映射（之后只读）：

- list_tools(): 按注册顺序拼接所有 handler 的工具定义。
- call_tool(name, args): 找到对应 handler 执行；成功时把结果 JSON 序列化为一个文本块，
  任何失败（未知工具、参数缺失、上游错误）都转为 is_error=True 的文本结果，不向传输层抛出。

同名工具以先注册者为准，后来者只记录一条警告。
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from hubspot_mcp.domain.exceptions import BusinessError, UnknownToolError
from hubspot_mcp.infrastructure.logging.logger import logger
from hubspot_mcp.services.hubspot import HubSpotService
from hubspot_mcp.tools.base import BaseTool
from hubspot_mcp.tools.companies import CompanyTool
from hubspot_mcp.tools.contacts import ContactTool
from hubspot_mcp.tools.deals import DealTool
from hubspot_mcp.tools.definitions import ToolDef, ToolResult
from hubspot_mcp.tools.emails import EmailTool


class ToolDispatcher:
    def __init__(self, handlers: Sequence[BaseTool]):
        self._handlers: List[BaseTool] = list(handlers)
        self._tools: Dict[str, BaseTool] = {}
        for handler in self._handlers:
            for tool in handler.get_tools():
                owner = self._tools.get(tool.name)
                if owner is not None:
                    logger.warning(
                        f"Tool {tool.name} already registered by {owner.name}, ignoring {handler.name}",
                        extra={"extra": {"tool": tool.name, "owner": owner.name, "ignored": handler.name}},
                    )
                    continue
                self._tools[tool.name] = handler

    @property
    def tool_names(self) -> List[str]:
        return list(self._tools)

    def handler_for(self, name: str) -> Optional[BaseTool]:
        return self._tools.get(name)

    def list_tools(self) -> List[ToolDef]:
        tools: List[ToolDef] = []
        for handler in self._handlers:
            tools.extend(handler.get_tools())
        return tools

    def call_tool(self, name: str, args: Optional[Dict[str, Any]] = None) -> ToolResult:
        try:
            handler = self._tools.get(name)
            if handler is None:
                raise UnknownToolError(code="UNKNOWN_TOOL", message=f"Unknown tool: {name}", tool=name)
            result = handler.execute_tool(name, args or {})
        except BusinessError as e:
            logger.warning(
                f"Tool {name} failed: {e.message}",
                extra={"extra": {"tool": name, "code": e.code, "http_status": e.http_status}},
            )
            return self._error_result(name, e.message)
        except Exception as e:
            logger.exception(f"Tool {name} raised unexpectedly", extra={"extra": {"tool": name}})
            return self._error_result(name, str(e) or "Unknown error")
        logger.info(f"Tool {name} succeeded", extra={"extra": {"tool": name}})
        text = json.dumps(result, indent=2, ensure_ascii=False, default=str)
        return ToolResult(name=name, content=[{"type": "text", "text": text}])

    @staticmethod
    def _error_result(name: str, message: str) -> ToolResult:
        return ToolResult(
            name=name,
            content=[{"type": "text", "text": f"Error executing tool {name}: {message}"}],
            is_error=True,
        )


def create_dispatcher(service: HubSpotService) -> ToolDispatcher:
    """按固定顺序注册四个 handler：contacts、companies、deals、emails。"""

    return ToolDispatcher(
        [
            ContactTool(service),
            CompanyTool(service),
            DealTool(service),
            EmailTool(service),
        ]
    )
