"""
Hub事件框架的抽象接口定义。

此模块定义了适配器所依赖的外部协作者接口（Hub代理与订阅），
以及可观察序列的观察者接口。任何满足这些接口的实现都可以与适配器配合使用。
"""
from typing import TYPE_CHECKING, Any, Callable, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .subscription import HandlerToken

# 原始参数处理器：(args) -> None
ReceivedHandler = Callable[[List[Any]], None]

# 通配处理器：(args, method_name) -> None
ReceivedAnyHandler = Callable[[List[Any], str], None]


@runtime_checkable
class ISubscription(Protocol):
    """
    单个事件名称在单个代理上的订阅。

    维护两个相互独立的原始处理器列表，均按注册顺序调用。
    """

    def add_received(self, handler: ReceivedHandler) -> "HandlerToken":
        """
        注册只接收原始参数的处理器。

        Args:
            handler: 接收 args 的回调

        Returns:
            只移除本次注册的处理器句柄
        """
        ...

    def add_received_any(self, handler: ReceivedAnyHandler) -> "HandlerToken":
        """
        注册同时接收原始参数与实际调用方法名的处理器（通配通道使用）。

        Args:
            handler: 接收 (args, method_name) 的回调

        Returns:
            只移除本次注册的处理器句柄
        """
        ...


@runtime_checkable
class IHubProxy(Protocol):
    """
    客户端Hub代理的抽象接口。

    提供按名称的事件订阅和只读的状态变量访问。
    """

    def subscribe(self, event_name: str) -> ISubscription:
        """
        获取或创建指定事件名称的订阅。对同一名称重复调用返回同一订阅。

        Args:
            event_name: 事件名称

        Returns:
            该事件名称的订阅
        """
        ...

    def __getitem__(self, name: str) -> Any:
        """读取状态变量，不存在时返回 None"""
        ...


@runtime_checkable
class IObserver(Protocol):
    """可观察序列的观察者"""

    def on_next(self, value: List[Any]) -> None:
        ...

    def on_error(self, error: BaseException) -> None:
        ...

    def on_completed(self) -> None:
        ...
