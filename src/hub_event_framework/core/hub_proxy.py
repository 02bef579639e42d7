"""
内存Hub代理

订阅注册表的参考实现：按事件名称保存订阅，保存状态变量，
并把一次到达的方法调用路由到对应的订阅和保留的通配通道。
它不做任何网络I/O，由传输层（或测试）调用 invoke_event / receive 来投递事件。

路由规则：
- 方法名有本地订阅时，先投递给该订阅，再投递给 "*" 通道；
- 否则只投递给 "!" 通道；
- 同一次调用最多触发两个保留通道中的一个。

事件名称按不区分大小写匹配。
"""
import threading
from typing import Any, Dict, Optional, Sequence, Union

from ..common.logger import get_logger
from .constants import ErrorMessages, HubConstants
from .exceptions import InvalidArgumentError
from .models import InvocationMessage
from .subscription import Subscription

logger = get_logger("hub_event_framework.hub_proxy")


class HubProxy:
    """
    内存中的Hub代理

    满足 IHubProxy 接口，可直接配合 on / on_any / on_missing / observe 使用。
    """

    def __init__(
        self,
        hub_name: str = HubConstants.DEFAULT_HUB_NAME,
        isolate_handler_errors: bool = True,
        strict_conversion: bool = False
    ):
        """
        初始化Hub代理

        Args:
            hub_name: Hub名称
            isolate_handler_errors: 单个处理器失败时是否继续调用其他处理器
            strict_conversion: 类型化适配器是否使用严格转换
        """
        self.hub_name = hub_name
        self.isolate_handler_errors = isolate_handler_errors
        self.strict_conversion = strict_conversion
        self._subscriptions: Dict[str, Subscription] = {}
        self._state: Dict[str, Any] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(event_name: str) -> str:
        return event_name.casefold()

    def subscribe(self, event_name: str) -> Subscription:
        """
        获取或创建事件订阅

        Args:
            event_name: 事件名称

        Returns:
            该名称对应的订阅，重复调用返回同一对象
        """
        if not event_name:
            raise InvalidArgumentError(ErrorMessages.EMPTY_EVENT_NAME, "event_name")

        key = self._key(event_name)
        with self._lock:
            subscription = self._subscriptions.get(key)
            if subscription is None:
                subscription = Subscription(event_name, self.isolate_handler_errors)
                self._subscriptions[key] = subscription
                logger.debug(f"[{self.hub_name}] 已创建事件订阅: {event_name}")
        return subscription

    def has_subscription(self, event_name: str) -> bool:
        """是否已存在该事件名称的订阅"""
        with self._lock:
            return self._key(event_name) in self._subscriptions

    def _get_subscription(self, event_name: str) -> Optional[Subscription]:
        with self._lock:
            return self._subscriptions.get(self._key(event_name))

    def __getitem__(self, name: str) -> Any:
        with self._lock:
            return self._state.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        with self._lock:
            self._state[name] = value

    def invoke_event(self, method: str, args: Sequence[Any] = ()) -> None:
        """
        将一次方法调用投递给已注册的处理器

        Args:
            method: 被调用的方法名
            args: 原始参数

        Raises:
            InvalidArgumentError: 方法名为空或为保留名称
        """
        if not method:
            raise InvalidArgumentError(ErrorMessages.EMPTY_EVENT_NAME, "method")
        if method in HubConstants.RESERVED_EVENTS:
            raise InvalidArgumentError(f"不能直接调用保留的事件名称: {method}", "method")

        args = list(args)
        subscription = self._get_subscription(method)

        if subscription is None:
            logger.debug(f"[{self.hub_name}] 未识别的方法调用: {method}")
            missing = self._get_subscription(HubConstants.MISSING_EVENT)
            if missing is not None:
                missing.on_received_any(args, method)
            return

        error: Optional[BaseException] = None
        try:
            subscription.on_received(args)
        except Exception as e:
            if not self.isolate_handler_errors:
                raise
            error = e

        any_subscription = self._get_subscription(HubConstants.ANY_EVENT)
        if any_subscription is not None:
            try:
                any_subscription.on_received_any(args, method)
            except Exception as e:
                if error is None:
                    raise
                logger.error(f"[{self.hub_name}] 通配处理器执行失败: {e}")

        if error is not None:
            raise error

    def receive(self, message: Union[InvocationMessage, Dict[str, Any]]) -> bool:
        """
        处理一条调用消息：合并状态后投递

        Args:
            message: 调用消息或其字典形式

        Returns:
            bool: 消息是否属于本Hub并已投递
        """
        if not isinstance(message, InvocationMessage):
            message = InvocationMessage.model_validate(message)

        if message.hub and message.hub.casefold() != self.hub_name.casefold():
            logger.debug(f"[{self.hub_name}] 忽略发往其他Hub的消息: {message.hub}.{message.method}")
            return False

        if message.state:
            with self._lock:
                self._state.update(message.state)

        self.invoke_event(message.method, message.args)
        return True
