"""
Hub事件框架的自定义异常定义。
"""
from typing import Any, List, Optional


class HubEventError(Exception):
    """Hub事件框架的基础异常类"""
    pass


class InvalidArgumentError(HubEventError, ValueError):
    """必需参数为空或无效（proxy、事件名、状态名、回调）"""

    def __init__(self, message: str, param_name: Optional[str] = None):
        super().__init__(message)
        self.param_name = param_name


class ConversionError(HubEventError, TypeError):
    """收到的值无法按结构转换为请求的类型"""

    def __init__(self, message: str, target_type: Any = None, value: Any = None):
        super().__init__(message)
        self.target_type = target_type
        self.value = value


class HandlerError(HubEventError):
    """同一次投递中多个处理器执行失败"""

    def __init__(self, message: str, event_name: Optional[str] = None, errors: Optional[List[BaseException]] = None):
        super().__init__(message)
        self.event_name = event_name
        self.errors = list(errors or [])
