"""
适配器公共的参数校验

所有注册函数在产生任何订阅副作用之前调用这些校验。
"""
from typing import Any

from ..core.constants import ErrorMessages, HubConstants
from ..core.exceptions import InvalidArgumentError


def require_proxy(proxy: Any) -> None:
    if proxy is None:
        raise InvalidArgumentError(ErrorMessages.NULL_PROXY, "proxy")


def require_name(name: Any, param_name: str = "event_name") -> None:
    if not isinstance(name, str) or not name:
        message = ErrorMessages.EMPTY_STATE_NAME if param_name == "name" else ErrorMessages.EMPTY_EVENT_NAME
        raise InvalidArgumentError(message, param_name)


def require_callback(callback: Any, param_name: str = "on_data") -> None:
    if callback is None or not callable(callback):
        raise InvalidArgumentError(ErrorMessages.NULL_CALLBACK, param_name)


def require_event_name(event_name: Any) -> None:
    """类型化处理器和可观察序列不能占用保留通道"""
    require_name(event_name)
    if event_name in HubConstants.RESERVED_EVENTS:
        raise InvalidArgumentError(
            ErrorMessages.RESERVED_EVENT_NAME.format(event_name=event_name),
            "event_name",
        )
