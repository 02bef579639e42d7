"""
Hub事件适配器

在订阅注册表之上提供类型化处理器、通配处理器、可观察序列和状态访问。
"""
from .arity import infer_parameter_types, on, on_dynamic, required_parameter_count
from .observable import HubObservable, observe
from .state import get_value
from .wildcard import on_any, on_missing

__all__ = [
    "on",
    "on_dynamic",
    "on_any",
    "on_missing",
    "observe",
    "HubObservable",
    "get_value",
    "infer_parameter_types",
    "required_parameter_count",
]
