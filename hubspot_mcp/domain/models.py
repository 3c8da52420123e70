"""统一的 CRM 记录与工具结果数据模型。

本模块定义了 HubSpot 客户端、记录服务与工具 handler 之间共享的数据结构：

- CrmObject: 一条 CRM 记录（contact/company/deal）。
- CrmPage: 一页列表/搜索结果，附带续页游标。
- ResultEnvelope: 工具返回给调用方的统一结果（success/data/count/hasMore/message）。

HubSpotClient 负责把 API JSON 解析成这些模型，handler 再把它们转回 dict 输出。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# HubSpot 记录上除五个基础字段之外、出现时需要原样输出的键
PASSTHROUGH_KEYS = (
    "archivedAt",
    "associations",
    "propertiesWithHistory",
    "url",
    "objectWriteTraceId",
)


@dataclass
class CrmObject:
    """单条 CRM 记录。

    - properties: HubSpot 返回的属性值，均为字符串或 None。
    - raw: 原始 JSON。to_dict() 会把其中 PASSTHROUGH_KEYS 里出现的键原样带出。
    """

    id: str
    properties: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CrmObject":
        return cls(
            id=str(payload.get("id") or ""),
            properties=dict(payload.get("properties") or {}),
            created_at=payload.get("createdAt"),
            updated_at=payload.get("updatedAt"),
            archived=bool(payload.get("archived", False)),
            raw=payload,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "properties": self.properties,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "archived": self.archived,
        }
        for key in PASSTHROUGH_KEYS:
            if self.raw.get(key) is not None:
                payload[key] = self.raw[key]
        return payload


@dataclass
class CrmPage:
    """一页 CRM 记录。只取单页，不做自动翻页。"""

    results: List[CrmObject]
    next_after: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_after)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CrmPage":
        results = [CrmObject.from_payload(item) for item in payload.get("results") or []]
        next_page = (payload.get("paging") or {}).get("next") or {}
        return cls(
            results=results,
            next_after=next_page.get("after"),
        )


@dataclass
class ResultEnvelope:
    """工具结果封装，每次调用新建，不做持久化。

    to_dict() 只输出已设置的可选字段，extra 中的键原样并入顶层。
    """

    success: bool
    data: Any = None
    count: Optional[int] = None
    has_more: Optional[bool] = None
    message: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"success": self.success, "data": self.data}
        if self.count is not None:
            payload["count"] = self.count
        payload.update(self.extra)
        if self.has_more is not None:
            payload["hasMore"] = self.has_more
        if self.message is not None:
            payload["message"] = self.message
        return payload
