import pytest

from hubspot_mcp.domain.exceptions import ConfigurationError
from hubspot_mcp.providers.hubspot_client import HubSpotClient
from hubspot_mcp.providers.registry import DEALS, get_object_kind
from hubspot_mcp.services.hubspot import HubSpotService


class NoCredentials:
    hubspot_api_key = None
    hubspot_access_token = None


class BothCredentials:
    hubspot_api_key = "legacy-api-key"
    hubspot_access_token = "pat-na1-token"
    hubspot_client_id = "client-id"
    hubspot_client_secret = "client-secret"
    hubspot_base_url = "https://api.hubapi.com"
    http_timeout = 1.0


def test_missing_credentials_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        HubSpotService(NoCredentials())
    assert exc_info.value.message == "Either API key or access token must be provided"


def test_api_key_preferred_over_access_token():
    service = HubSpotService(BothCredentials())
    client = service.get_client()
    assert isinstance(client, HubSpotClient)
    assert client._api_key == "legacy-api-key"
    assert client._access_token is None
    assert service.client_id == "client-id"


def test_default_property_lists(service, fake_client):
    service.get_contacts()
    service.get_contact("1")
    service.get_companies(limit=5)
    service.get_deal("2")

    assert fake_client.calls[0] == (
        "get_page",
        "contacts",
        10,
        ["firstname", "lastname", "email", "phone", "company", "lifecyclestage"],
    )
    assert fake_client.calls[1][3] == [
        "firstname", "lastname", "email", "phone", "company", "lifecyclestage",
        "createdate", "lastmodifieddate",
    ]
    assert fake_client.calls[2] == (
        "get_page",
        "companies",
        5,
        ["name", "domain", "industry", "city", "state", "country"],
    )
    assert fake_client.calls[3][1:3] == ("deals", "2")
    assert "dealtype" in fake_client.calls[3][3]


def test_empty_property_list_falls_back_to_defaults(service, fake_client):
    service.get_deals(properties=[])
    assert fake_client.calls[-1][3] == ["dealname", "amount", "dealstage", "pipeline", "closedate", "dealtype"]


def test_send_email_echoes_input(service, fake_client):
    data = {"to": ["x@y.com"], "subject": "s", "htmlBody": "<b>b</b>"}
    result = service.send_email(data)
    assert result == {"message": "Email functionality not yet implemented", "data": data}
    assert fake_client.calls == []


def test_object_kind_lookup_by_plural_name():
    assert get_object_kind("Deals") is DEALS
    with pytest.raises(KeyError):
        get_object_kind("deal")
