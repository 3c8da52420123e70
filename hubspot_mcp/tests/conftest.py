import pytest

from hubspot_mcp.domain.models import CrmObject, CrmPage
from hubspot_mcp.server.dispatcher import create_dispatcher
from hubspot_mcp.services.hubspot import HubSpotService


class SettingsStub:
    hubspot_api_key = None
    hubspot_access_token = "pat-na1-0000000000"
    hubspot_client_id = None
    hubspot_client_secret = None
    hubspot_base_url = "https://api.hubapi.com"
    http_timeout = 1.0
    server_name = "hubspot-mcp-server"
    server_version = "1.0.0"


class FakeCrmClient:
    """记录所有调用的假 CRM 客户端。"""

    name = "fake"

    def __init__(self, page=None, error=None):
        self.calls = []
        self._page = page or CrmPage(results=[CrmObject(id="1", properties={"email": "a@b.com"})])
        self._error = error

    def _record(self, *call):
        self.calls.append(call)
        if self._error is not None:
            raise self._error

    def get_page(self, kind, limit, properties):
        self._record("get_page", kind, limit, properties)
        return self._page

    def get_by_id(self, kind, object_id, properties):
        self._record("get_by_id", kind, object_id, properties)
        return CrmObject(id=object_id, properties={p: None for p in properties})

    def create(self, kind, properties):
        self._record("create", kind, properties)
        return CrmObject(id="101", properties=dict(properties))

    def update(self, kind, object_id, properties):
        self._record("update", kind, object_id, properties)
        return CrmObject(id=object_id, properties=dict(properties))

    def search(self, kind, query, limit, properties):
        self._record("search", kind, query, limit, properties)
        return self._page


@pytest.fixture
def fake_client():
    return FakeCrmClient()


@pytest.fixture
def service(fake_client):
    return HubSpotService(SettingsStub(), client=fake_client)


@pytest.fixture
def dispatcher(service):
    return create_dispatcher(service)


@pytest.fixture
def settings_stub():
    return SettingsStub()


@pytest.fixture
def make_dispatcher():
    """按给定分页结果或异常构造 (dispatcher, client)。"""

    def _make(page=None, error=None):
        client = FakeCrmClient(page=page, error=error)
        return create_dispatcher(HubSpotService(SettingsStub(), client=client)), client

    return _make
