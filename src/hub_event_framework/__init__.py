"""
Hub Event Framework

在Hub代理的按名称路由、无类型的发布/订阅通道之上，提供类型化事件处理器、
通配处理器和可观察序列。
"""
# 导出公共组件（日志需最先初始化）
from .common.logger import get_logger
from .common.config import load_config, get_config, get_dispatch_config, get_hub_config

# 导出核心接口与注册表
from .core.interfaces import IHubProxy, ISubscription, IObserver
from .core.hub_proxy import HubProxy
from .core.subscription import Subscription, HandlerToken
from .core.constants import HubConstants
from .core.models import InvocationMessage
from .core.converter import MISSING, convert
from .core.exceptions import (
    HubEventError,
    InvalidArgumentError,
    ConversionError,
    HandlerError,
)

# 导出适配器
from .adapters import (
    on,
    on_dynamic,
    on_any,
    on_missing,
    observe,
    HubObservable,
    get_value,
)

# 导出工厂模式
from .factory import (
    HubProxyFactory,
    InMemoryHubProxyFactory,
    HubProxyFactoryRegistry,
    create_hub_proxy,
)

# 版本信息
__version__ = "0.1.0"

__all__ = [
    # 适配器
    "on",
    "on_dynamic",
    "on_any",
    "on_missing",
    "observe",
    "HubObservable",
    "get_value",

    # 核心接口与注册表
    "IHubProxy",
    "ISubscription",
    "IObserver",
    "HubProxy",
    "Subscription",
    "HandlerToken",
    "InvocationMessage",
    "HubConstants",
    "MISSING",
    "convert",

    # 异常
    "HubEventError",
    "InvalidArgumentError",
    "ConversionError",
    "HandlerError",

    # 工厂模式
    "HubProxyFactory",
    "InMemoryHubProxyFactory",
    "HubProxyFactoryRegistry",
    "create_hub_proxy",

    # 公共组件
    "get_logger",
    "load_config",
    "get_config",
    "get_dispatch_config",
    "get_hub_config",
]
