"""交易工具：get_deals / get_deal / create_deal / update_deal。

HubSpot 的 amount 属性按字符串传输，数值在发送前统一转成字符串。
"""

from typing import Any, Dict, List

from hubspot_mcp.tools.base import ADDITIONAL_PROPERTIES, BaseTool, ToolHandlerFunc
from hubspot_mcp.tools.definitions import ToolDef, param, params_of, string_list_param, string_param


DEAL_FIELDS = ["dealname", "amount", "dealstage", "pipeline", "closedate", "dealtype"]
PROPERTY_DEFAULTS = ["dealname", "amount", "dealstage", "pipeline", "closedate"]
DEAL_STAGES = "'qualifiedtobuy', 'presentationscheduled', 'decisionmakerboughtin', 'contractsent', 'closedwon', 'closedlost'"


def amount_to_string(value: Any) -> str:
    """500 -> "500"，500.0 -> "500"，12.5 -> "12.5"，字符串原样返回。"""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _properties_param():
    return string_list_param(
        "properties",
        "List of deal properties to retrieve",
        default=PROPERTY_DEFAULTS,
    )


def _deal_field_params(for_create: bool = False):
    stage_description = f"Deal stage (e.g., {DEAL_STAGES})" if for_create else "Deal stage"
    dealtype_description = (
        "Type of deal (e.g., 'newbusiness', 'existingbusiness')" if for_create else "Type of deal"
    )
    return [
        string_param("dealname", "Deal name/title", required=for_create),
        param("amount", "Deal amount/value", {"type": "number"}),
        string_param("dealstage", stage_description, required=for_create),
        string_param("pipeline", "Deal pipeline ID"),
        string_param("closedate", "Expected close date (YYYY-MM-DD format)"),
        string_param("dealtype", dealtype_description),
        param(ADDITIONAL_PROPERTIES, "Additional custom properties for the deal", {"type": "object"}),
    ]


class DealTool(BaseTool):
    name = "deals"

    def get_tools(self) -> List[ToolDef]:
        return [
            ToolDef(
                name="get_deals",
                description="Get a list of deals from HubSpot",
                params=params_of(
                    param(
                        "limit",
                        "Number of deals to retrieve (default: 10, max: 100)",
                        {"type": "number", "default": 10},
                    ),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="get_deal",
                description="Get a specific deal by ID from HubSpot",
                params=params_of(
                    string_param("dealId", "The ID of the deal to retrieve", required=True),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="create_deal",
                description="Create a new deal in HubSpot",
                params=params_of(*_deal_field_params(for_create=True)),
            ),
            ToolDef(
                name="update_deal",
                description="Update an existing deal in HubSpot",
                params=params_of(
                    string_param("dealId", "The ID of the deal to update", required=True),
                    *_deal_field_params(),
                ),
            ),
        ]

    def routes(self) -> Dict[str, ToolHandlerFunc]:
        return {
            "get_deals": self._get_deals,
            "get_deal": self._get_deal,
            "create_deal": self._create_deal,
            "update_deal": self._update_deal,
        }

    def _get_deals(self, args: Dict[str, Any]) -> Dict[str, Any]:
        page = self.hubspot_service.get_deals(self._limit_arg(args), args.get("properties"))
        return self._page_result(page)

    def _get_deal(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["dealId"])
        record = self.hubspot_service.get_deal(args["dealId"], args.get("properties"))
        return self._record_result(record)

    def _create_deal(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["dealname", "dealstage"])
        properties = self._build_properties(
            args,
            [f for f in DEAL_FIELDS if f not in ("dealname", "dealstage")],
            required=["dealname", "dealstage"],
            coerce={"amount": amount_to_string},
        )
        record = self.hubspot_service.create_deal(properties)
        return self._record_result(record, "Deal created successfully")

    def _update_deal(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["dealId"])
        properties = self._build_properties(
            args,
            DEAL_FIELDS,
            exclude=["dealId"],
            coerce={"amount": amount_to_string},
            strip_empty=True,
        )
        record = self.hubspot_service.update_deal(args["dealId"], properties)
        return self._record_result(record, "Deal updated successfully")
