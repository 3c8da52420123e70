"""工具 handler 基类。

每种 CRM 对象对应一个 handler（ContactTool / CompanyTool / DealTool / EmailTool），
都实现同一组能力：

- get_tools(): 返回本 handler 声明的静态工具列表。
- execute_tool(name, args): 按工具名分发到自己的实现方法。

参数整形规则（_build_properties）在这里集中实现，各 handler 只声明字段表。
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from hubspot_mcp.domain.exceptions import UnknownToolError, ValidationError
from hubspot_mcp.domain.models import CrmObject, CrmPage, ResultEnvelope
from hubspot_mcp.services.hubspot import HubSpotService
from hubspot_mcp.tools.definitions import ToolDef


ADDITIONAL_PROPERTIES = "additionalProperties"

ToolHandlerFunc = Callable[[Dict[str, Any]], Dict[str, Any]]


class BaseTool:
    """所有工具 handler 的公共基类。"""

    name = "base"

    def __init__(self, hubspot_service: HubSpotService):
        self.hubspot_service = hubspot_service

    def get_tools(self) -> List[ToolDef]:
        raise NotImplementedError

    def routes(self) -> Dict[str, ToolHandlerFunc]:
        """工具名 -> 实现方法。"""
        raise NotImplementedError

    def execute_tool(self, name: str, args: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        handler = self.routes().get(name)
        if handler is None:
            raise UnknownToolError(code="UNKNOWN_TOOL", message=f"Unknown tool: {name}", tool=name)
        return handler(args or {})

    @staticmethod
    def _validate_required_args(args: Mapping[str, Any], required: Iterable[str]) -> None:
        for field in required:
            value = args.get(field)
            # 空列表/空对象视为已提供
            if not value and not isinstance(value, (list, dict)):
                raise ValidationError(
                    code="MISSING_ARGUMENT",
                    message=f"Missing required argument: {field}",
                    field=field,
                )

    @staticmethod
    def _limit_arg(args: Mapping[str, Any], default: int = 10) -> Any:
        """只有未传或为 null 时才使用默认值，显式的 0 原样保留。"""

        limit = args.get("limit", default)
        return default if limit is None else limit

    @staticmethod
    def _build_properties(
        args: Mapping[str, Any],
        fields: Iterable[str],
        *,
        required: Iterable[str] = (),
        exclude: Iterable[str] = (),
        coerce: Optional[Mapping[str, Callable[[Any], Any]]] = None,
        strip_empty: bool = False,
    ) -> Dict[str, Any]:
        """把扁平参数整形为 CRM properties。

        合并顺序（后者覆盖前者）：必填字段 -> 有值的具名字段 -> 未声明的额外参数
        -> additionalProperties 映射。strip_empty 时去掉 None 与空字符串。
        """

        required = list(required)
        fields = list(fields)
        coerce = coerce or {}
        reserved = {*required, *fields, *exclude, ADDITIONAL_PROPERTIES}

        properties: Dict[str, Any] = {field: args.get(field) for field in required}
        for field in fields:
            value = args.get(field)
            if value:
                convert = coerce.get(field)
                properties[field] = convert(value) if convert else value
        for key, value in args.items():
            if key not in reserved:
                properties[key] = value
        additional = args.get(ADDITIONAL_PROPERTIES)
        if isinstance(additional, Mapping):
            properties.update(additional)

        if strip_empty:
            properties = {k: v for k, v in properties.items() if v is not None and v != ""}
        return properties

    # ---- 结果封装 ----

    @staticmethod
    def _page_result(page: CrmPage, **extra: Any) -> Dict[str, Any]:
        return ResultEnvelope(
            success=True,
            data=[record.to_dict() for record in page.results],
            count=len(page.results),
            has_more=page.has_more,
            extra=extra,
        ).to_dict()

    @staticmethod
    def _record_result(record: CrmObject, message: Optional[str] = None) -> Dict[str, Any]:
        return ResultEnvelope(success=True, data=record.to_dict(), message=message).to_dict()
