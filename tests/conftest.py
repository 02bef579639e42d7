"""
全局测试配置
"""
import pytest
from unittest.mock import Mock

from hub_event_framework import HubProxy


@pytest.fixture
def hub_proxy():
    """内存Hub代理"""
    return HubProxy("testHub")


@pytest.fixture
def mock_hub_proxy():
    """模拟Hub代理，subscribe 返回同一个模拟订阅"""
    subscription = Mock()
    proxy = Mock()
    proxy.strict_conversion = False
    proxy.subscribe.return_value = subscription
    return proxy
