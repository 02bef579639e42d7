"""
Hub事件框架核心模块。

此模块包含外部协作者接口、订阅注册表、参数转换器、数据模型、常量和异常。
"""

from .constants import ErrorMessages, HubConstants
from .exceptions import (
    ConversionError,
    HandlerError,
    HubEventError,
    InvalidArgumentError,
)
from .interfaces import IHubProxy, IObserver, ISubscription
from .converter import MISSING, argument_at, convert, default_value, get_converter, strict_mode
from .models import InvocationMessage
from .subscription import HandlerToken, Subscription
from .hub_proxy import HubProxy

__all__ = [
    # 接口
    "IHubProxy",
    "ISubscription",
    "IObserver",

    # 订阅注册表
    "HubProxy",
    "Subscription",
    "HandlerToken",

    # 参数转换
    "MISSING",
    "argument_at",
    "convert",
    "default_value",
    "get_converter",
    "strict_mode",

    # 数据模型
    "InvocationMessage",

    # 常量
    "HubConstants",
    "ErrorMessages",

    # 异常
    "HubEventError",
    "InvalidArgumentError",
    "ConversionError",
    "HandlerError",
]
