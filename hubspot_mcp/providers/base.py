"""CRM 客户端抽象接口。

上层 HubSpotService 不直接依赖 HTTP 细节，而是依赖此协议：

- HubSpotClient 是基于 httpx 的默认实现。
- 测试中可以用任意实现了同名方法的假对象替换，不需要真实网络。

所有方法失败时抛出 domain.exceptions 中的异常，不做重试。
"""

from typing import Any, Dict, List, Protocol

from hubspot_mcp.domain.models import CrmObject, CrmPage


class CrmClient(Protocol):
    """CRM 记录级操作协议。kind 为对象类型名，如 "contacts"。"""

    name: str

    def get_page(self, kind: str, limit: int, properties: List[str]) -> CrmPage:
        ...

    def get_by_id(self, kind: str, object_id: str, properties: List[str]) -> CrmObject:
        ...

    def create(self, kind: str, properties: Dict[str, Any]) -> CrmObject:
        ...

    def update(self, kind: str, object_id: str, properties: Dict[str, Any]) -> CrmObject:
        ...

    def search(self, kind: str, query: str, limit: int, properties: List[str]) -> CrmPage:
        ...
