"""
参数值转换器

将服务器推送的无类型值（数字、字符串、布尔、嵌套的映射/序列）
按结构转换为回调声明的类型。结构转换由 pydantic 的 TypeAdapter 完成。

规则：
1. 值缺失（索引越界、参数列表为空）或为 None 时返回类型的默认值，不报错；
2. 目标类型为 Any / object（或参数未注解）时原样返回；
3. 其余情况做结构转换，失败时抛出 ConversionError。
"""
import inspect
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Sequence

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from .constants import ErrorMessages
from .exceptions import ConversionError


class _Missing:
    """表示参数列表中不存在该位置的元素"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

# 值类型的零值，其余类型默认为 None
_ZERO_VALUES: Dict[Any, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    Decimal: Decimal(0),
}


def is_passthrough(target_type: Any) -> bool:
    """目标类型是否为无类型（不做转换）"""
    return target_type is Any or target_type is object or target_type is inspect.Parameter.empty


def default_value(target_type: Any) -> Any:
    """
    获取类型的默认值

    Args:
        target_type: 目标类型

    Returns:
        数值与布尔类型返回零值，其余返回 None
    """
    try:
        return _ZERO_VALUES.get(target_type)
    except TypeError:
        # 不可哈希的类型注解
        return None


def argument_at(args: Sequence[Any], index: int) -> Any:
    """按位置取参数，越界时返回 MISSING"""
    if args is None or index >= len(args):
        return MISSING
    return args[index]


@lru_cache(maxsize=256)
def _cached_type_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def _get_type_adapter(target_type: Any) -> TypeAdapter:
    try:
        return _cached_type_adapter(target_type)
    except TypeError:
        # 不可哈希的类型注解不走缓存
        return TypeAdapter(target_type)


def _describe(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


def strict_mode(proxy: Any) -> Optional[bool]:
    """代理开启严格转换时返回 True，否则返回 None 交给目标类型自身的配置决定"""
    return True if getattr(proxy, "strict_conversion", False) else None


def get_converter(target_type: Any, strict: Optional[bool] = None) -> Callable[[Any], Any]:
    """
    为目标类型构建转换函数

    在注册时调用一次，之后每次投递复用。

    Args:
        target_type: 目标类型
        strict: True 时强制 pydantic 严格模式；None 时沿用目标类型自身的配置
            （例如模型上的 ConfigDict(strict=True)）

    Returns:
        接收单个原始值（可能为 MISSING）并返回转换结果的函数

    Raises:
        ConversionError: 目标类型无法生成转换规则
    """
    if is_passthrough(target_type):
        def passthrough(value: Any) -> Any:
            return None if value is MISSING else value
        return passthrough

    try:
        adapter = _get_type_adapter(target_type)
    except PydanticSchemaGenerationError as e:
        raise ConversionError(
            f"不支持的目标类型: {_describe(target_type)}",
            target_type=target_type,
        ) from e

    default = default_value(target_type)

    def convert_value(value: Any) -> Any:
        if value is MISSING or value is None:
            return default
        try:
            return adapter.validate_python(value, strict=strict)
        except ValidationError as e:
            raise ConversionError(
                ErrorMessages.CONVERSION_FAILED.format(value=value, target=_describe(target_type)),
                target_type=target_type,
                value=value,
            ) from e

    return convert_value


def convert(value: Any, target_type: Any = Any, strict: Optional[bool] = None) -> Any:
    """
    将单个无类型值转换为目标类型

    Args:
        value: 原始值，MISSING 或 None 表示缺失
        target_type: 目标类型
        strict: True 时强制严格模式，None 表示沿用目标类型的配置

    Returns:
        转换后的值
    """
    return get_converter(target_type, strict)(value)
