import pytest
from pydantic import ValidationError

from hubspot_mcp.config.settings import HubSpotSettings


def test_credentials_from_env(monkeypatch):
    monkeypatch.setenv("HUBSPOT_ACCESS_TOKEN", "pat-na1-1234567890")
    monkeypatch.delenv("HUBSPOT_API_KEY", raising=False)
    cfg = HubSpotSettings(_env_file=None)
    assert cfg.hubspot_access_token == "pat-na1-1234567890"
    assert cfg.hubspot_api_key is None
    assert cfg.hubspot_base_url == "https://api.hubapi.com"


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "hubspot.yaml"
    path.write_text("server_name: crm-tools\nhttp_timeout: 12\nlog_level: debug\n", encoding="utf-8")
    monkeypatch.setenv("HUBSPOT_MCP_CONFIG_FILE", str(path))
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    cfg = HubSpotSettings(_env_file=None)
    assert cfg.server_name == "crm-tools"
    assert cfg.http_timeout == 12.0
    assert cfg.log_level == "DEBUG"


def test_env_overrides_yaml(monkeypatch, tmp_path):
    path = tmp_path / "hubspot.yaml"
    path.write_text("server_name: from-yaml\n", encoding="utf-8")
    monkeypatch.setenv("HUBSPOT_MCP_CONFIG_FILE", str(path))
    monkeypatch.setenv("SERVER_NAME", "from-env")
    assert HubSpotSettings(_env_file=None).server_name == "from-env"


def test_short_credential_rejected():
    with pytest.raises(ValidationError):
        HubSpotSettings(_env_file=None, hubspot_api_key="short")
