"""
Unit tests for the hub proxy factory
"""
import pytest
from unittest.mock import Mock, patch

from hub_event_framework.core.hub_proxy import HubProxy
from hub_event_framework.factory import (
    HubProxyFactory,
    HubProxyFactoryRegistry,
    InMemoryHubProxyFactory,
    create_hub_proxy,
)


class TestHubProxyFactory:
    """Test cases for hub proxy creation"""

    def test_create_with_explicit_config(self):
        proxy = create_hub_proxy("chatHub", {"isolate_handler_errors": False, "strict_conversion": True})

        assert isinstance(proxy, HubProxy)
        assert proxy.hub_name == "chatHub"
        assert proxy.isolate_handler_errors is False
        assert proxy.strict_conversion is True

    def test_create_defaults(self):
        proxy = create_hub_proxy("chatHub", {})

        assert proxy.isolate_handler_errors is True
        assert proxy.strict_conversion is False

    @pytest.mark.parametrize("value", ["no", "off", "0", 0, "false"])
    def test_falsy_config_strings_disable_isolation(self, value):
        proxy = create_hub_proxy("chatHub", {"isolate_handler_errors": value})

        assert proxy.isolate_handler_errors is False

    @pytest.mark.parametrize("value", ["yes", "on", "1", 1])
    def test_truthy_config_strings_enable_strict_conversion(self, value):
        proxy = create_hub_proxy("chatHub", {"strict_conversion": value})

        assert proxy.strict_conversion is True

    def test_create_loads_hub_config(self):
        with patch("hub_event_framework.factory.get_hub_config",
                   return_value={"strict_conversion": True}) as get_hub_config:
            proxy = create_hub_proxy("chatHub")

        get_hub_config.assert_called_once_with("chatHub")
        assert proxy.strict_conversion is True

    def test_unknown_proxy_type(self):
        with pytest.raises(ValueError):
            create_hub_proxy("chatHub", {}, proxy_type="unknown")

    def test_register_custom_factory(self):
        custom_proxy = Mock()
        factory = Mock(spec=HubProxyFactory)
        factory.create_hub_proxy.return_value = custom_proxy

        HubProxyFactoryRegistry.register_factory("custom", factory)
        try:
            proxy = create_hub_proxy("chatHub", {"proxy_type": "custom"})
        finally:
            HubProxyFactoryRegistry._factories.pop("custom", None)

        assert proxy is custom_proxy
        factory.create_hub_proxy.assert_called_once_with("chatHub", {"proxy_type": "custom"})

    def test_default_factory_registered(self):
        assert isinstance(HubProxyFactoryRegistry.get_factory("memory"), InMemoryHubProxyFactory)
