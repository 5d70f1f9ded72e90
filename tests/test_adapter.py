"""Tests for magento_onx.core.adapter.CommerceAdapter."""

import os
from unittest.mock import patch, MagicMock

import pytest

from magento_onx.core.adapter import CommerceAdapter
from magento_onx.core.magento_client import MagentoRESTClient


_BASE_ENV = {
    "M2_BASE_URL": "https://store.example.com/",
    "M2_ACCESS_TOKEN": "token-123",
    "M2_API_VERSION": "V1",
    "M2_TIMEOUT": "15",
    "M2_STORE_VIEW": "default",
    "M2_STORE_CURRENCY": "EUR",
    "ONX_VENDOR_NAMESPACE": "shop",
    "DEBUG": "false",
}


def _make_adapter(env_overrides=None, client=None):
    env = dict(_BASE_ENV)
    if env_overrides:
        env.update(env_overrides)

    with patch.dict(os.environ, env, clear=True):
        adapter = CommerceAdapter(env_file="/nonexistent/.env", client=client)
    return adapter


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def test_validate_config_valid():
    assert _make_adapter().validate_config() is True


@pytest.mark.parametrize("key", ["M2_BASE_URL", "M2_ACCESS_TOKEN"])
def test_validate_config_missing_required(key, capsys):
    adapter = _make_adapter(env_overrides={key: ""})
    assert adapter.validate_config() is False
    assert f"{key} is required" in capsys.readouterr().out


def test_settings_loaded_from_env():
    adapter = _make_adapter()
    assert adapter.store_url == "https://store.example.com"
    assert adapter.timeout == 15.0
    assert adapter.context.vendor_ns == "shop"
    assert adapter.context.currency == "EUR"
    assert adapter.debug is False


def test_defaults_when_optional_settings_absent():
    with patch.dict(os.environ, {"M2_BASE_URL": "https://s", "M2_ACCESS_TOKEN": "t"}, clear=True):
        adapter = CommerceAdapter(env_file="/nonexistent/.env")
    assert adapter.api_version == "V1"
    assert adapter.store_view_code == "default"
    assert adapter.timeout == 30.0
    assert adapter.context.vendor_ns == "m2"
    assert adapter.context.currency == "USD"


def test_client_built_once_from_settings():
    adapter = _make_adapter()
    client = adapter.client
    assert isinstance(client, MagentoRESTClient)
    assert adapter.client is client
    assert client.build_url("orders") == "https://store.example.com/rest/V1/orders"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def test_run_dispatches_with_context():
    client = MagicMock()
    client.get.return_value = {"items": [{"id": 7, "email": "a@example.com"}]}
    adapter = _make_adapter(client=client)

    result = adapter.run("get-customers", {"ids": ["7"]})

    assert result["success"] is True
    fields = result["customers"][0]["customFields"]
    assert all(f["name"].startswith("shop:") for f in fields)


def test_unknown_operation():
    adapter = _make_adapter(client=MagicMock())
    assert adapter.run("delete-everything") == {
        "success": False,
        "error": "Unknown operation: delete-everything",
    }


def test_create_sales_order_alias():
    client = MagicMock()
    client.post.return_value = {"entity_id": 100, "state": "new"}
    adapter = _make_adapter(client=client)

    result = adapter.run("create-sales-order", {"order": {"lineItems": []}})

    assert result["success"] is True
    assert result["order"]["id"] == "100"
    assert client.post.call_args.args[0] == "orders"


def test_operation_names_include_alias():
    names = CommerceAdapter.operation_names()
    assert "get-orders" in names
    assert "create-sales-order" in names
    assert len(names) == 13
