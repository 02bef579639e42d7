"""
配置管理模块

提供通用的YAML配置加载功能，支持 ${VAR:-default} 形式的环境变量替换。
"""
import os
import re
from pathlib import Path
from typing import Any, Dict

import yaml

from .logger import get_logger

logger = get_logger("hub_event_framework.config")

# 分发行为的默认配置
DEFAULT_DISPATCH_CONFIG: Dict[str, Any] = {
    "isolate_handler_errors": True,
    "strict_conversion": False,
}


_TRUE_STRINGS = ('true', '1', 'yes', 'on')
_FALSE_STRINGS = ('false', '0', 'no', 'off', '')


def to_bool(value: Any, default: bool = False) -> bool:
    """
    将配置值转换为布尔值

    字符串按 true/1/yes/on 与 false/0/no/off 识别（不区分大小写），
    无法识别的值记录警告并返回默认值。

    Args:
        value: 配置值
        default: 值为 None 或无法识别时的默认值

    Returns:
        布尔值
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False

    logger.warning(f"无法识别的布尔配置值 {value!r}，使用默认值 {default}")
    return default


def _get_config_path() -> Path:
    """获取配置文件路径"""
    config_path = Path(os.environ.get("CONFIG_PATH", "/app/config/config.yml"))
    if not config_path.exists():
        config_path = Path("config/config.yml")
    return config_path


def _resolve_env_vars(value: str) -> str:
    """解析环境变量 ${VAR:default} 或 ${VAR:-default}"""
    if not isinstance(value, str):
        return value

    pattern = re.compile(r'\${([^}:]+)(?::(-?)([^}]*?))?}')

    def replace_var(match):
        var_name, dash, default = match.groups()
        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        return default if default is not None else ""

    return pattern.sub(replace_var, value)


def _resolve_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """递归解析字典中的环境变量并转换数据类型"""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = _resolve_dict(value)
        elif isinstance(value, str):
            resolved_value = _resolve_env_vars(value)
            if resolved_value.isdigit():
                result[key] = int(resolved_value)
            elif resolved_value.lower() in ('true', 'false'):
                result[key] = resolved_value.lower() == 'true'
            else:
                result[key] = resolved_value
        else:
            result[key] = value
    return result


def load_config() -> Dict[str, Any]:
    """加载配置文件，文件不存在或解析失败时返回空字典"""
    config_file = _get_config_path()
    if not config_file.exists():
        logger.debug(f"配置文件不存在: {config_file}")
        return {}

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"加载配置失败: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"配置文件顶层必须是映射: {config_file}")
        return {}

    logger.debug(f"成功加载配置: {config_file}")
    return _resolve_dict(config)


def get_config() -> Dict[str, Any]:
    """获取原始配置字典"""
    return load_config()


def get_dispatch_config() -> Dict[str, Any]:
    """
    获取事件分发配置

    Returns:
        合并了默认值的 dispatch 配置段
    """
    dispatch_config = dict(DEFAULT_DISPATCH_CONFIG)
    dispatch_config.update(load_config().get('dispatch') or {})
    return dispatch_config


def get_logging_config() -> Dict[str, Any]:
    """获取日志配置"""
    return load_config().get('logging') or {}


def get_hub_config(hub_name: str) -> Dict[str, Any]:
    """
    获取指定Hub的配置

    hubs.<hub_name> 段中的键覆盖全局 dispatch 配置。

    Args:
        hub_name: Hub名称

    Returns:
        Hub配置字典
    """
    config = load_config()
    hub_config = dict(DEFAULT_DISPATCH_CONFIG)
    hub_config.update(config.get('dispatch') or {})
    hub_config.update((config.get('hubs') or {}).get(hub_name) or {})

    logger.debug(f"已加载Hub配置: {hub_name}")
    return hub_config
