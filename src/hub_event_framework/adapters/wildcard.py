"""
通配事件适配器

on_any 订阅保留通道 "*"，每次成功路由的方法调用都会额外触发；
on_missing 订阅保留通道 "!"，只在调用的方法没有本地订阅时触发。
两者的回调签名均为 (args, method_name)，args 为未转换的原始参数。
"""
from typing import Any, Callable, List

from ..common.logger import get_logger
from ..core.constants import HubConstants
from ..core.interfaces import IHubProxy
from ..core.subscription import HandlerToken
from .validation import require_callback, require_proxy

logger = get_logger("hub_event_framework.adapters.wildcard")

WildcardCallback = Callable[[List[Any], str], Any]


def _on_reserved(proxy: IHubProxy, event_name: str, on_data: WildcardCallback) -> HandlerToken:
    require_proxy(proxy)
    require_callback(on_data)

    subscription = proxy.subscribe(event_name)
    token = subscription.add_received_any(on_data)
    logger.debug(f"已注册通配通道 '{event_name}' 的处理器")
    return token


def on_any(proxy: IHubProxy, on_data: WildcardCallback) -> HandlerToken:
    """
    注册在每个已识别方法执行后调用的回调

    Args:
        proxy: Hub代理
        on_data: 回调，接收 (args, method_name)

    Returns:
        HandlerToken: 注销本次注册的句柄
    """
    return _on_reserved(proxy, HubConstants.ANY_EVENT, on_data)


def on_missing(proxy: IHubProxy, on_data: WildcardCallback) -> HandlerToken:
    """
    注册在客户端未定义的方法被调用时执行的回调

    Args:
        proxy: Hub代理
        on_data: 回调，接收 (args, method_name)

    Returns:
        HandlerToken: 注销本次注册的句柄
    """
    return _on_reserved(proxy, HubConstants.MISSING_EVENT, on_data)
