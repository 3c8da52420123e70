"""公司工具：get_companies / get_company / create_company / update_company。"""

from typing import Any, Dict, List

from hubspot_mcp.tools.base import ADDITIONAL_PROPERTIES, BaseTool, ToolHandlerFunc
from hubspot_mcp.tools.definitions import ToolDef, param, params_of, string_list_param, string_param


COMPANY_FIELDS = ["name", "domain", "industry", "city", "state", "country", "phone"]
PROPERTY_DEFAULTS = ["name", "domain", "industry", "city", "state"]


def _properties_param():
    return string_list_param(
        "properties",
        "List of company properties to retrieve",
        default=PROPERTY_DEFAULTS,
    )


def _company_field_params(name_required: bool = False):
    return [
        string_param("name", "Company name", required=name_required),
        string_param("domain", "Company domain/website"),
        string_param("industry", "Company industry"),
        string_param("city", "Company city"),
        string_param("state", "Company state/province"),
        string_param("country", "Company country"),
        string_param("phone", "Company phone number"),
        param(ADDITIONAL_PROPERTIES, "Additional custom properties for the company", {"type": "object"}),
    ]


class CompanyTool(BaseTool):
    name = "companies"

    def get_tools(self) -> List[ToolDef]:
        return [
            ToolDef(
                name="get_companies",
                description="Get a list of companies from HubSpot",
                params=params_of(
                    param(
                        "limit",
                        "Number of companies to retrieve (default: 10, max: 100)",
                        {"type": "number", "default": 10},
                    ),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="get_company",
                description="Get a specific company by ID from HubSpot",
                params=params_of(
                    string_param("companyId", "The ID of the company to retrieve", required=True),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="create_company",
                description="Create a new company in HubSpot",
                params=params_of(*_company_field_params(name_required=True)),
            ),
            ToolDef(
                name="update_company",
                description="Update an existing company in HubSpot",
                params=params_of(
                    string_param("companyId", "The ID of the company to update", required=True),
                    *_company_field_params(),
                ),
            ),
        ]

    def routes(self) -> Dict[str, ToolHandlerFunc]:
        return {
            "get_companies": self._get_companies,
            "get_company": self._get_company,
            "create_company": self._create_company,
            "update_company": self._update_company,
        }

    def _get_companies(self, args: Dict[str, Any]) -> Dict[str, Any]:
        page = self.hubspot_service.get_companies(self._limit_arg(args), args.get("properties"))
        return self._page_result(page)

    def _get_company(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["companyId"])
        record = self.hubspot_service.get_company(args["companyId"], args.get("properties"))
        return self._record_result(record)

    def _create_company(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["name"])
        properties = self._build_properties(
            args,
            [f for f in COMPANY_FIELDS if f != "name"],
            required=["name"],
        )
        record = self.hubspot_service.create_company(properties)
        return self._record_result(record, "Company created successfully")

    def _update_company(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["companyId"])
        properties = self._build_properties(
            args,
            COMPANY_FIELDS,
            exclude=["companyId"],
            strip_empty=True,
        )
        record = self.hubspot_service.update_company(args["companyId"], properties)
        return self._record_result(record, "Company updated successfully")
