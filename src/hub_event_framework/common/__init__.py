"""
公共模块

包含共享的日志和配置功能。
"""
from .logger import get_logger
from .config import (
    to_bool,
    load_config,
    get_config,
    get_dispatch_config,
    get_logging_config,
    get_hub_config,
)

__all__ = [
    "get_logger",
    "to_bool",
    "load_config",
    "get_config",
    "get_dispatch_config",
    "get_logging_config",
    "get_hub_config",
]
