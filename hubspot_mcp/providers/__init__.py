"""CRM 客户端集成层。

该包下的模块负责：
- 定义 CRM 客户端抽象接口 (base)。
- 维护对象类型与默认属性配置 (registry)。
- 提供 HubSpot 的具体实现 (hubspot_client)。
"""

from typing import Optional

from hubspot_mcp.config.settings import settings
from hubspot_mcp.providers.base import CrmClient
from hubspot_mcp.providers.hubspot_client import HubSpotClient


def create_client(
    cfg=None,
    *,
    api_key: Optional[str] = None,
    access_token: Optional[str] = None,
) -> CrmClient:
    """根据凭证创建 CRM 客户端实例，默认取全局配置。"""

    return HubSpotClient(cfg or settings, api_key=api_key, access_token=access_token)
