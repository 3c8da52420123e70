"""联系人工具：get_contacts / get_contact / create_contact / update_contact / search_contacts。"""

from typing import Any, Dict, List

from hubspot_mcp.tools.base import ADDITIONAL_PROPERTIES, BaseTool, ToolHandlerFunc
from hubspot_mcp.tools.definitions import ToolDef, param, params_of, string_list_param, string_param


CONTACT_FIELDS = ["firstname", "lastname", "email", "phone", "company", "lifecyclestage"]
PROPERTY_DEFAULTS = ["firstname", "lastname", "email", "phone", "company"]


def _properties_param():
    return string_list_param(
        "properties",
        "List of contact properties to retrieve",
        default=PROPERTY_DEFAULTS,
    )


def _contact_field_params(email_required: bool = False):
    return [
        string_param("email", "Contact's email address", required=email_required),
        string_param("firstname", "Contact's first name"),
        string_param("lastname", "Contact's last name"),
        string_param("phone", "Contact's phone number"),
        string_param("company", "Contact's company name"),
        string_param("lifecyclestage", "Contact's lifecycle stage"),
        param(ADDITIONAL_PROPERTIES, "Additional custom properties for the contact", {"type": "object"}),
    ]


class ContactTool(BaseTool):
    name = "contacts"

    def get_tools(self) -> List[ToolDef]:
        return [
            ToolDef(
                name="get_contacts",
                description="Get a list of contacts from HubSpot",
                params=params_of(
                    param(
                        "limit",
                        "Number of contacts to retrieve (default: 10, max: 100)",
                        {"type": "number", "default": 10},
                    ),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="get_contact",
                description="Get a specific contact by ID from HubSpot",
                params=params_of(
                    string_param("contactId", "The ID of the contact to retrieve", required=True),
                    _properties_param(),
                ),
            ),
            ToolDef(
                name="create_contact",
                description="Create a new contact in HubSpot",
                params=params_of(*_contact_field_params(email_required=True)),
            ),
            ToolDef(
                name="update_contact",
                description="Update an existing contact in HubSpot",
                params=params_of(
                    string_param("contactId", "The ID of the contact to update", required=True),
                    *_contact_field_params(),
                ),
            ),
            ToolDef(
                name="search_contacts",
                description="Search for contacts in HubSpot",
                params=params_of(
                    string_param(
                        "query",
                        "Search query (name, email, or other contact information)",
                        required=True,
                    ),
                    _properties_param(),
                ),
            ),
        ]

    def routes(self) -> Dict[str, ToolHandlerFunc]:
        return {
            "get_contacts": self._get_contacts,
            "get_contact": self._get_contact,
            "create_contact": self._create_contact,
            "update_contact": self._update_contact,
            "search_contacts": self._search_contacts,
        }

    def _get_contacts(self, args: Dict[str, Any]) -> Dict[str, Any]:
        page = self.hubspot_service.get_contacts(self._limit_arg(args), args.get("properties"))
        return self._page_result(page)

    def _get_contact(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["contactId"])
        record = self.hubspot_service.get_contact(args["contactId"], args.get("properties"))
        return self._record_result(record)

    def _create_contact(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["email"])
        properties = self._build_properties(
            args,
            [f for f in CONTACT_FIELDS if f != "email"],
            required=["email"],
        )
        record = self.hubspot_service.create_contact(properties)
        return self._record_result(record, "Contact created successfully")

    def _update_contact(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["contactId"])
        properties = self._build_properties(
            args,
            CONTACT_FIELDS,
            exclude=["contactId"],
            strip_empty=True,
        )
        record = self.hubspot_service.update_contact(args["contactId"], properties)
        return self._record_result(record, "Contact updated successfully")

    def _search_contacts(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["query"])
        query = args["query"]
        page = self.hubspot_service.search_contacts(query, args.get("properties"))
        return self._page_result(page, query=query)
