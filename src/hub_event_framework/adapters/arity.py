"""
类型化事件处理器适配器

on() 为 0 到 7 个参数的回调注册事件处理器。参数类型可以显式传入：

    on(proxy, "chat", handle_chat, str, int)

也可以从回调的类型注解推断，未注解的参数按无类型处理（原样传递）：

    def handle_chat(user: str, count: int) -> None: ...
    on(proxy, "chat", handle_chat)

注册时为每个位置构建一次转换函数；每次投递按从左到右的顺序转换参数后调用回调，
任一参数转换失败时抛出 ConversionError，回调不会被调用。
参数个数少于声明时，缺失的尾部参数取类型默认值。类型从签名推断时，
带默认值的尾部参数在缺失时不传入，由回调自身的默认值生效：

    def handle_chat(user: str, count: int = 1) -> None: ...
    on(proxy, "chat", handle_chat)   # ["alice"] 调用 handle_chat("alice")
"""
import inspect
from typing import Any, Callable, List, Sequence, Type, TypeVar, get_type_hints, overload

from ..common.logger import get_logger
from ..core.constants import ErrorMessages, HubConstants
from ..core.converter import MISSING, argument_at, get_converter, strict_mode
from ..core.exceptions import InvalidArgumentError
from ..core.interfaces import IHubProxy
from ..core.subscription import HandlerToken
from .validation import require_callback, require_event_name, require_proxy

logger = get_logger("hub_event_framework.adapters.arity")

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")
T7 = TypeVar("T7")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _callable_target(on_data: Callable[..., Any]) -> Any:
    if inspect.isfunction(on_data) or inspect.ismethod(on_data):
        return on_data
    return getattr(type(on_data), "__call__", on_data)


def infer_parameter_types(on_data: Callable[..., Any]) -> List[Any]:
    """
    从回调签名推断参数类型

    只统计位置参数，*args / **kwargs 不计入。无法获取签名时视为无参数。

    Args:
        on_data: 用户回调

    Returns:
        按位置排列的参数类型，未注解的参数为 Any
    """
    try:
        signature = inspect.signature(on_data)
    except (TypeError, ValueError):
        return []

    try:
        hints = get_type_hints(_callable_target(on_data))
    except (NameError, TypeError):
        hints = {}

    return [
        hints.get(parameter.name, Any)
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL_KINDS
    ]


def required_parameter_count(on_data: Callable[..., Any]) -> int:
    """回调中没有默认值的位置参数个数，无法获取签名时为 0"""
    try:
        signature = inspect.signature(on_data)
    except (TypeError, ValueError):
        return 0

    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL_KINDS and parameter.default is inspect.Parameter.empty
    )


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[], Any]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1], Any],
       t1: Type[T1]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2], Any],
       t1: Type[T1], t2: Type[T2]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2, T3], Any],
       t1: Type[T1], t2: Type[T2], t3: Type[T3]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2, T3, T4], Any],
       t1: Type[T1], t2: Type[T2], t3: Type[T3], t4: Type[T4]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2, T3, T4, T5], Any],
       t1: Type[T1], t2: Type[T2], t3: Type[T3], t4: Type[T4], t5: Type[T5]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2, T3, T4, T5, T6], Any],
       t1: Type[T1], t2: Type[T2], t3: Type[T3], t4: Type[T4], t5: Type[T5],
       t6: Type[T6]) -> HandlerToken: ...


@overload
def on(proxy: IHubProxy, event_name: str, on_data: Callable[[T1, T2, T3, T4, T5, T6, T7], Any],
       t1: Type[T1], t2: Type[T2], t3: Type[T3], t4: Type[T4], t5: Type[T5],
       t6: Type[T6], t7: Type[T7]) -> HandlerToken: ...


def on(proxy, event_name, on_data, *types):
    """
    注册指定名称事件的类型化回调

    Args:
        proxy: Hub代理
        event_name: 事件名称
        on_data: 回调，最多 7 个参数
        *types: 按位置排列的参数类型；省略时从回调签名推断

    Returns:
        HandlerToken: 注销本次注册的句柄

    Raises:
        InvalidArgumentError: proxy 为空、事件名为空或为保留名称、回调不可调用或参数超过 7 个
        ConversionError: 参数类型无法生成转换规则
    """
    require_proxy(proxy)
    require_event_name(event_name)
    require_callback(on_data)

    if types:
        parameter_types = list(types)
        required = len(parameter_types)
    else:
        parameter_types = infer_parameter_types(on_data)
        required = required_parameter_count(on_data)
    if len(parameter_types) > HubConstants.MAX_ARITY:
        raise InvalidArgumentError(
            ErrorMessages.TOO_MANY_PARAMETERS.format(max_arity=HubConstants.MAX_ARITY, arity=len(parameter_types)),
            "on_data",
        )

    strict = strict_mode(proxy)
    converters = [get_converter(parameter_type, strict) for parameter_type in parameter_types]

    def handler(args: Sequence[Any]) -> None:
        values = []
        for index, converter in enumerate(converters):
            value = argument_at(args, index)
            if value is MISSING and index >= required:
                break
            values.append(converter(value))
        on_data(*values)

    subscription = proxy.subscribe(event_name)
    token = subscription.add_received(handler)
    logger.debug(f"已注册事件 '{event_name}' 的 {len(converters)} 参数处理器")
    return token


def on_dynamic(proxy: IHubProxy, event_name: str, on_data: Callable[[Any], Any]) -> HandlerToken:
    """
    注册单个无类型参数的回调，第一个参数原样传递

    Args:
        proxy: Hub代理
        event_name: 事件名称
        on_data: 回调

    Returns:
        HandlerToken: 注销本次注册的句柄
    """
    return on(proxy, event_name, on_data, Any)
