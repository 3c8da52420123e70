"""HubSpot 记录服务。

在 CRM 客户端之上提供按“对象类型 × 动作”划分的方法，并补齐默认属性列表：

- get_*s: 单页列表，默认 limit=10。
- get_*: 按 ID 查询单条记录。
- create_* / update_*: 以 properties 映射写入。
- search_contacts: 联系人全文搜索（固定 limit=10）。

客户端抛出的异常原样向上传播，这里不做重试、限流处理或多页循环。
"""

from typing import Any, Dict, List, Optional

from hubspot_mcp.config.settings import settings
from hubspot_mcp.domain.exceptions import ConfigurationError
from hubspot_mcp.domain.models import CrmObject, CrmPage
from hubspot_mcp.infrastructure.logging.logger import logger
from hubspot_mcp.providers import create_client
from hubspot_mcp.providers.base import CrmClient
from hubspot_mcp.providers.registry import COMPANIES, CONTACTS, DEALS, ObjectKind


DEFAULT_PAGE_SIZE = 10
SEARCH_LIMIT = 10


class HubSpotService:
    """HubSpot CRM 记录服务。

    凭证优先使用 api key，其次 access token；两者都没有时初始化失败。
    client 参数主要用于测试注入假客户端。
    """

    def __init__(self, config=settings, client: Optional[CrmClient] = None):
        self._settings = config
        api_key = getattr(config, "hubspot_api_key", None)
        access_token = getattr(config, "hubspot_access_token", None)
        if not api_key and not access_token:
            raise ConfigurationError(
                code="MISSING_CREDENTIALS",
                message="Either API key or access token must be provided",
            )
        self.client_id = getattr(config, "hubspot_client_id", None)
        self.client_secret = getattr(config, "hubspot_client_secret", None)
        if client is not None:
            self._client = client
        elif api_key:
            self._client = create_client(config, api_key=api_key)
        else:
            self._client = create_client(config, access_token=access_token)

    def get_client(self) -> CrmClient:
        return self._client

    # ---- Contacts ----

    def get_contacts(self, limit: int = DEFAULT_PAGE_SIZE, properties: Optional[List[str]] = None) -> CrmPage:
        return self._get_page(CONTACTS, limit, properties)

    def get_contact(self, contact_id: str, properties: Optional[List[str]] = None) -> CrmObject:
        return self._get_one(CONTACTS, contact_id, properties)

    def create_contact(self, properties: Dict[str, Any]) -> CrmObject:
        return self._client.create(CONTACTS.name, properties)

    def update_contact(self, contact_id: str, properties: Dict[str, Any]) -> CrmObject:
        return self._client.update(CONTACTS.name, contact_id, properties)

    def search_contacts(self, query: str, properties: Optional[List[str]] = None) -> CrmPage:
        return self._client.search(
            CONTACTS.name,
            query,
            SEARCH_LIMIT,
            properties or list(CONTACTS.search_properties),
        )

    # ---- Companies ----

    def get_companies(self, limit: int = DEFAULT_PAGE_SIZE, properties: Optional[List[str]] = None) -> CrmPage:
        return self._get_page(COMPANIES, limit, properties)

    def get_company(self, company_id: str, properties: Optional[List[str]] = None) -> CrmObject:
        return self._get_one(COMPANIES, company_id, properties)

    def create_company(self, properties: Dict[str, Any]) -> CrmObject:
        return self._client.create(COMPANIES.name, properties)

    def update_company(self, company_id: str, properties: Dict[str, Any]) -> CrmObject:
        return self._client.update(COMPANIES.name, company_id, properties)

    # ---- Deals ----

    def get_deals(self, limit: int = DEFAULT_PAGE_SIZE, properties: Optional[List[str]] = None) -> CrmPage:
        return self._get_page(DEALS, limit, properties)

    def get_deal(self, deal_id: str, properties: Optional[List[str]] = None) -> CrmObject:
        return self._get_one(DEALS, deal_id, properties)

    def create_deal(self, properties: Dict[str, Any]) -> CrmObject:
        return self._client.create(DEALS.name, properties)

    def update_deal(self, deal_id: str, properties: Dict[str, Any]) -> CrmObject:
        return self._client.update(DEALS.name, deal_id, properties)

    # ---- Email ----

    def send_email(self, email_data: Dict[str, Any]) -> Dict[str, Any]:
        # 需要 Marketing Email API 及对应权限，目前只回显输入
        logger.warning(
            "Email sending functionality requires Marketing Email API setup",
            extra={"extra": {"recipients": email_data.get("to")}},
        )
        return {
            "message": "Email functionality not yet implemented",
            "data": email_data,
        }

    # ---- 辅助方法 ----

    def _get_page(self, kind: ObjectKind, limit: int, properties: Optional[List[str]]) -> CrmPage:
        return self._client.get_page(kind.name, limit, properties or list(kind.list_properties))

    def _get_one(self, kind: ObjectKind, object_id: str, properties: Optional[List[str]]) -> CrmObject:
        return self._client.get_by_id(kind.name, object_id, properties or list(kind.detail_properties))
