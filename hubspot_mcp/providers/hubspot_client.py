"""HubSpot CRM v3 objects API 适配器。

所有对象类型共用同一组端点：
- 列表: GET   {base_url}/crm/v3/objects/{kind}
- 单条: GET   {base_url}/crm/v3/objects/{kind}/{id}
- 创建: POST  {base_url}/crm/v3/objects/{kind}
- 更新: PATCH {base_url}/crm/v3/objects/{kind}/{id}
- 搜索: POST  {base_url}/crm/v3/objects/{kind}/search

认证：access token 走 Authorization: Bearer <token>，旧式 API key 走 hapikey 查询参数。
本客户端只负责单次请求与错误映射，不做重试、限流等待或自动翻页。
"""

from typing import Any, Dict, List, Optional

import httpx

from hubspot_mcp.config.settings import settings
from hubspot_mcp.domain.exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)
from hubspot_mcp.domain.models import CrmObject, CrmPage
from hubspot_mcp.providers.registry import get_object_kind


class HubSpotClient:
    """HubSpot CRM 客户端实现。"""

    name = "hubspot"

    def __init__(
        self,
        cfg=settings,
        *,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
    ):
        self._settings = cfg
        self._api_key = api_key
        self._access_token = access_token

    # ---- 记录操作 ----

    def get_page(self, kind: str, limit: int, properties: List[str]) -> CrmPage:
        params = {"limit": limit, "properties": ",".join(properties)}
        data = self._request("GET", get_object_kind(kind).path, params=params)
        return CrmPage.from_payload(data)

    def get_by_id(self, kind: str, object_id: str, properties: List[str]) -> CrmObject:
        path = f"{get_object_kind(kind).path}/{object_id}"
        data = self._request("GET", path, params={"properties": ",".join(properties)})
        return CrmObject.from_payload(data)

    def create(self, kind: str, properties: Dict[str, Any]) -> CrmObject:
        data = self._request("POST", get_object_kind(kind).path, json={"properties": properties})
        return CrmObject.from_payload(data)

    def update(self, kind: str, object_id: str, properties: Dict[str, Any]) -> CrmObject:
        path = f"{get_object_kind(kind).path}/{object_id}"
        data = self._request("PATCH", path, json={"properties": properties})
        return CrmObject.from_payload(data)

    def search(self, kind: str, query: str, limit: int, properties: List[str]) -> CrmPage:
        payload = {"query": query, "limit": limit, "properties": properties}
        data = self._request("POST", f"{get_object_kind(kind).path}/search", json=payload)
        return CrmPage.from_payload(data)

    # ---- 辅助方法 ----

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        query = dict(params or {})
        headers = {"Content-Type": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        elif self._api_key:
            query["hapikey"] = self._api_key
        base = getattr(self._settings, "hubspot_base_url", None) or "https://api.hubapi.com"
        try:
            with httpx.Client(timeout=self._settings.http_timeout, trust_env=False) as client:
                resp = client.request(
                    method,
                    f"{base.rstrip('/')}{path}",
                    params=query or None,
                    json=json,
                    headers=headers,
                )
        except httpx.RequestError as e:
            raise NetworkError(code="NETWORK_ERROR", message=str(e))
        self._raise_for_status(resp)
        return resp.json()

    def _raise_for_status(self, resp) -> None:
        status = resp.status_code
        if status < 400:
            return
        message = self._error_message(resp)
        if status == 429:
            raise RateLimitError(code="RATE_LIMIT", message=message or "HubSpot rate limit", http_status=429)
        if status in (401, 403):
            raise AuthenticationError(code="AUTH_ERROR", message=message, http_status=status)
        if status == 404:
            raise NotFoundError(code="NOT_FOUND", message=message, http_status=404)
        raise ApiError(code="API_ERROR", message=message, http_status=status)

    @staticmethod
    def _error_message(resp) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return resp.text
