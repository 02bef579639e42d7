"""
事件订阅与处理器句柄

Subscription 维护单个事件名称的两个有序处理器列表。每次注册生成一条带唯一标识的
注册记录，返回的 HandlerToken 只移除它自己的那条记录，不依赖回调对象的相等性，
因此同一回调注册多次时可以分别注销。

分发时在锁内对记录列表做快照，锁外按注册顺序调用；调用前检查记录是否仍然有效，
所以在分发过程中被注销的处理器不会再被调用，也不会影响其他处理器。
"""
import itertools
import threading
from typing import Any, Callable, List, Optional, Sequence

from ..common.logger import get_logger
from .constants import ErrorMessages
from .exceptions import HandlerError
from .interfaces import ReceivedAnyHandler, ReceivedHandler

logger = get_logger("hub_event_framework.subscription")

_record_ids = itertools.count(1)


class HandlerToken:
    """
    处理器注册句柄

    dispose() 是幂等的：重复调用不会报错，也不会产生额外效果。
    支持 with 语句，退出时自动注销。
    """

    def __init__(self, dispose_action: Callable[[], None]):
        self._dispose_action: Optional[Callable[[], None]] = dispose_action
        self._lock = threading.Lock()

    @property
    def disposed(self) -> bool:
        return self._dispose_action is None

    def dispose(self) -> None:
        """注销对应的处理器"""
        with self._lock:
            action, self._dispose_action = self._dispose_action, None
        if action is not None:
            action()

    def __enter__(self) -> "HandlerToken":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()


class _HandlerRecord:
    """一次注册对应的记录"""

    __slots__ = ("record_id", "handler", "active")

    def __init__(self, handler: Callable[..., None]):
        self.record_id = next(_record_ids)
        self.handler = handler
        self.active = True


class Subscription:
    """
    单个事件名称在单个代理上的订阅

    received 列表的处理器接收 (args)，由类型化适配器和可观察适配器使用；
    received_any 列表的处理器接收 (args, method_name)，由通配适配器使用。
    """

    def __init__(self, event_name: str, isolate_handler_errors: bool = True):
        self.event_name = event_name
        self.isolate_handler_errors = isolate_handler_errors
        self._received: List[_HandlerRecord] = []
        self._received_any: List[_HandlerRecord] = []
        self._lock = threading.Lock()

    def add_received(self, handler: ReceivedHandler) -> HandlerToken:
        """注册只接收原始参数的处理器"""
        return self._add(self._received, handler)

    def add_received_any(self, handler: ReceivedAnyHandler) -> HandlerToken:
        """注册接收原始参数和方法名的处理器"""
        return self._add(self._received_any, handler)

    def _add(self, records: List[_HandlerRecord], handler: Callable[..., None]) -> HandlerToken:
        record = _HandlerRecord(handler)
        with self._lock:
            records.append(record)
        logger.debug(f"[{self.event_name}] 已注册处理器 #{record.record_id}")
        return HandlerToken(lambda: self._remove(records, record))

    def _remove(self, records: List[_HandlerRecord], record: _HandlerRecord) -> None:
        with self._lock:
            record.active = False
            for index, candidate in enumerate(records):
                if candidate is record:
                    del records[index]
                    break
        logger.debug(f"[{self.event_name}] 已注销处理器 #{record.record_id}")

    @property
    def handler_count(self) -> int:
        """received 列表中的处理器数量"""
        with self._lock:
            return len(self._received)

    @property
    def any_handler_count(self) -> int:
        """received_any 列表中的处理器数量"""
        with self._lock:
            return len(self._received_any)

    def on_received(self, args: Sequence[Any]) -> None:
        """
        向 received 列表中的所有处理器投递一次事件

        Args:
            args: 原始参数列表
        """
        self._dispatch(self._received, args, ())

    def on_received_any(self, args: Sequence[Any], method_name: str) -> None:
        """
        向 received_any 列表中的所有处理器投递一次事件

        Args:
            args: 原始参数列表
            method_name: 实际被调用的方法名
        """
        self._dispatch(self._received_any, args, (method_name,))

    def _dispatch(self, records: List[_HandlerRecord], args: Sequence[Any], extra: tuple) -> None:
        with self._lock:
            snapshot = list(records)

        errors: List[BaseException] = []
        for record in snapshot:
            if not record.active:
                continue
            try:
                # 每个处理器拿到独立的参数列表副本
                record.handler(list(args), *extra)
            except Exception as e:
                if not self.isolate_handler_errors:
                    raise
                logger.error(f"[{self.event_name}] 处理器 #{record.record_id} 执行失败: {e}")
                errors.append(e)

        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise HandlerError(
                ErrorMessages.HANDLER_FAILED.format(event_name=self.event_name, count=len(errors)),
                event_name=self.event_name,
                errors=errors,
            )
