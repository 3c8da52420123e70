"""工具数据结构定义。

这些 dataclass 描述了“工具调用”的 schema，既用于：
- 将可用工具列表暴露给 MCP 客户端（ToolDef / ToolParam）。
- 在 Dispatcher 中返回一次工具调用的结果（ToolResult）。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ToolParam:
    """单个工具参数的定义。"""

    name: str
    description: str
    required: bool
    schema: Dict[str, Any]


@dataclass(frozen=True)
class ToolDef:
    """一个可供客户端调用的工具定义，启动时创建，之后不再修改。"""

    name: str
    description: str
    params: Dict[str, ToolParam]

    @property
    def required(self) -> List[str]:
        return [name for name, param in self.params.items() if param.required]

    def input_schema(self) -> Dict[str, Any]:
        """转换为 JSON Schema 形式的 inputSchema。"""

        properties: Dict[str, Any] = {}
        for name, param in self.params.items():
            schema = dict(param.schema or {"type": "string"})
            if param.description:
                schema["description"] = param.description
            properties[name] = schema
        result: Dict[str, Any] = {"type": "object", "properties": properties}
        if self.required:
            result["required"] = self.required
        return result


@dataclass
class ToolResult:
    """工具执行结果的封装（文本内容块 + 错误标记）。"""

    name: str
    content: List[Dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.get("text", "") for block in self.content)


def param(name: str, description: str, schema: Dict[str, Any], required: bool = False) -> ToolParam:
    return ToolParam(name=name, description=description, required=required, schema=schema)


def string_param(name: str, description: str, required: bool = False) -> ToolParam:
    return param(name, description, {"type": "string"}, required)


def string_list_param(name: str, description: str, default: Optional[List[str]] = None, required: bool = False) -> ToolParam:
    schema: Dict[str, Any] = {"type": "array", "items": {"type": "string"}}
    if default is not None:
        schema["default"] = list(default)
    return param(name, description, schema, required)


def params_of(*items: ToolParam) -> Dict[str, ToolParam]:
    return {item.name: item for item in items}
