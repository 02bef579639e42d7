"""
状态变量访问
"""
from typing import Any

from ..core.converter import get_converter, strict_mode
from ..core.interfaces import IHubProxy
from .validation import require_name, require_proxy


def get_value(proxy: IHubProxy, name: str, target_type: Any = Any) -> Any:
    """
    获取状态变量的值并转换为指定类型

    Args:
        proxy: Hub代理
        name: 状态变量名称
        target_type: 目标类型，默认不转换

    Returns:
        转换后的值；状态变量不存在时返回类型默认值
    """
    require_proxy(proxy)
    require_name(name, "name")

    return get_converter(target_type, strict_mode(proxy))(proxy[name])
