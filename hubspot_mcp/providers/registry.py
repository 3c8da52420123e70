"""CRM 对象类型配置。

本模块把“对象类型”（contacts / companies / deals）与其默认属性列表集中管理：

- list_properties: 列表查询时默认返回的属性。
- detail_properties: 单条查询时默认返回的属性（额外包含创建/修改时间）。
- search_properties: 搜索时默认返回的属性（目前只有 contacts 支持搜索）。

上层 Service 只关心对象类型名，具体取哪些字段由这里集中配置，便于后续调整。"""

from dataclasses import dataclass, field
from typing import List, Mapping


TIMESTAMP_PROPERTIES = ["createdate", "lastmodifieddate"]


@dataclass(frozen=True)
class ObjectKind:
    """单个 CRM 对象类型的配置。"""

    name: str
    list_properties: List[str]
    detail_properties: List[str]
    search_properties: List[str] = field(default_factory=list)

    @property
    def path(self) -> str:
        return f"/crm/v3/objects/{self.name}"


CONTACTS = ObjectKind(
    name="contacts",
    list_properties=["firstname", "lastname", "email", "phone", "company", "lifecyclestage"],
    detail_properties=[
        "firstname",
        "lastname",
        "email",
        "phone",
        "company",
        "lifecyclestage",
        *TIMESTAMP_PROPERTIES,
    ],
    search_properties=["firstname", "lastname", "email", "phone", "company"],
)

COMPANIES = ObjectKind(
    name="companies",
    list_properties=["name", "domain", "industry", "city", "state", "country"],
    detail_properties=[
        "name",
        "domain",
        "industry",
        "city",
        "state",
        "country",
        *TIMESTAMP_PROPERTIES,
    ],
)

DEALS = ObjectKind(
    name="deals",
    list_properties=["dealname", "amount", "dealstage", "pipeline", "closedate", "dealtype"],
    detail_properties=[
        "dealname",
        "amount",
        "dealstage",
        "pipeline",
        "closedate",
        "dealtype",
        *TIMESTAMP_PROPERTIES,
    ],
)


OBJECT_REGISTRY: Mapping[str, ObjectKind] = {
    "contacts": CONTACTS,
    "companies": COMPANIES,
    "deals": DEALS,
}


def get_object_kind(name: str) -> ObjectKind:
    """根据名称获取 ObjectKind，名称不区分大小写。"""

    kind = OBJECT_REGISTRY.get(name.lower())
    if kind is not None:
        return kind
    raise KeyError(f"Unknown CRM object kind: {name!r}")
