"""邮件工具：send_email / get_email_events。

两者目前都是占位实现：发送邮件需要 Marketing Email API，邮件事件需要 Events API。
"""

from typing import Any, Dict, List

from hubspot_mcp.domain.models import ResultEnvelope
from hubspot_mcp.tools.base import BaseTool, ToolHandlerFunc
from hubspot_mcp.tools.definitions import ToolDef, param, params_of, string_list_param, string_param


class EmailTool(BaseTool):
    name = "emails"

    def get_tools(self) -> List[ToolDef]:
        return [
            ToolDef(
                name="send_email",
                description="Send an email through HubSpot (requires Marketing Email API setup)",
                params=params_of(
                    string_list_param("to", "List of recipient email addresses", required=True),
                    string_param("subject", "Email subject line", required=True),
                    string_param("htmlBody", "HTML content of the email", required=True),
                    string_param("textBody", "Plain text content of the email (optional)"),
                    string_param("fromEmail", "Sender email address"),
                    string_param("fromName", "Sender name"),
                ),
            ),
            ToolDef(
                name="get_email_events",
                description="Get email events and engagement data (placeholder - requires specific API setup)",
                params=params_of(
                    string_param("contactId", "Contact ID to get email events for", required=True),
                    param("limit", "Number of events to retrieve", {"type": "number", "default": 10}),
                ),
            ),
        ]

    def routes(self) -> Dict[str, ToolHandlerFunc]:
        return {
            "send_email": self._send_email,
            "get_email_events": self._get_email_events,
        }

    def _send_email(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["to", "subject", "htmlBody"])
        email_data = {
            key: args.get(key)
            for key in ("to", "subject", "htmlBody", "textBody", "fromEmail", "fromName")
        }
        result = self.hubspot_service.send_email(email_data)
        return ResultEnvelope(
            success=True,
            data=result,
            message="Email functionality requires Marketing Email API setup",
        ).to_dict()

    def _get_email_events(self, args: Dict[str, Any]) -> Dict[str, Any]:
        self._validate_required_args(args, ["contactId"])
        # TODO: query the Events API once it is enabled for the portal
        return ResultEnvelope(
            success=True,
            data=[],
            message="Email events functionality requires Events API setup",
            extra={"contactId": args["contactId"], "limit": self._limit_arg(args)},
        ).to_dict()
