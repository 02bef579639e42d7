"""
可观察序列适配器

observe() 把一个事件名称转换为推送式的可观察序列：每次投递的原始参数列表
作为一个 next 值推送给观察者，不做任何转换。

序列是"热"的：后订阅的观察者只会收到订阅之后的投递，不重放历史事件；
序列不会自行结束，只有注销观察者才会停止推送。
"""
from typing import Any, Callable, List, Union

from ..common.logger import get_logger
from ..core.constants import ErrorMessages
from ..core.exceptions import InvalidArgumentError
from ..core.interfaces import IHubProxy, IObserver
from ..core.subscription import HandlerToken
from .validation import require_event_name, require_proxy

logger = get_logger("hub_event_framework.adapters.observable")

ObserverLike = Union[IObserver, Callable[[List[Any]], Any]]


class HubObservable:
    """
    Hub事件的可观察序列

    每个观察者对应一个独立的转发处理器，注销时只移除它自己。
    """

    def __init__(self, proxy: IHubProxy, event_name: str):
        self._proxy = proxy
        self.event_name = event_name

    def subscribe(self, observer: ObserverLike) -> HandlerToken:
        """
        订阅序列

        Args:
            observer: 具有 on_next 方法的观察者，或直接作为 on_next 的可调用对象。
                只要对象带有 on_next 属性就按观察者处理，即使它本身也可调用

        Raises:
            InvalidArgumentError: 观察者为空或不可调用

        Returns:
            HandlerToken: 注销该观察者的句柄
        """
        on_next = getattr(observer, "on_next", None)
        if on_next is None:
            on_next = observer
        if on_next is None or not callable(on_next):
            raise InvalidArgumentError(ErrorMessages.NULL_OBSERVER, "observer")

        subscription = self._proxy.subscribe(self.event_name)

        def forward(args: List[Any]) -> None:
            on_next(args)

        token = subscription.add_received(forward)
        logger.debug(f"已为事件 '{self.event_name}' 添加观察者")
        return token


def observe(proxy: IHubProxy, event_name: str) -> HubObservable:
    """
    将Hub代理上的事件注册为可观察序列

    Args:
        proxy: Hub代理
        event_name: 事件名称

    Returns:
        HubObservable: 推送原始参数列表的可观察序列
    """
    require_proxy(proxy)
    require_event_name(event_name)

    return HubObservable(proxy, event_name)
