"""
日志系统模块

此模块提供框架统一的日志记录功能，支持控制台和文件输出，
并可通过JSON格式记录结构化信息。日志配置取自配置文件的 logging 段。

处理器只挂在框架自身的 hub_event_framework 日志记录器上，不改动宿主应用的根日志记录器。
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

from pythonjsonlogger import jsonlogger

# 默认日志格式
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# 默认日志级别
DEFAULT_LOG_LEVEL = logging.INFO

# 默认日志目录
DEFAULT_LOG_DIR = "logs"

# 框架日志记录器名称，所有模块日志记录器都是它的子记录器
LIBRARY_LOGGER_NAME = "hub_event_framework"

# 全局标记，确保只初始化一次
_logging_configured = False


def _configure_logging(
    log_level=DEFAULT_LOG_LEVEL,
    log_format=DEFAULT_LOG_FORMAT,
    json_format=DEFAULT_JSON_FORMAT,
    log_to_console=True,
    log_to_file=False,
    log_dir=DEFAULT_LOG_DIR,
    log_file_name="hub_events.log",
    log_file_max_size=10 * 1024 * 1024,  # 10MB
    log_file_backup_count=5,
    use_rotating_file=True,
    use_json_formatter=False,
    logger_name=LIBRARY_LOGGER_NAME,
):
    """
    配置日志系统

    Args:
        log_level: 日志级别
        log_format: 日志格式字符串
        json_format: JSON日志格式字符串
        log_to_console: 是否输出到控制台
        log_to_file: 是否输出到文件
        log_dir: 日志文件目录
        log_file_name: 日志文件名
        log_file_max_size: 日志文件最大大小（字节）
        log_file_backup_count: 日志文件备份数量
        use_rotating_file: 是否按大小滚动（否则按天滚动）
        use_json_formatter: 是否使用JSON格式
        logger_name: 要配置的日志记录器名称
    """
    global _logging_configured

    # 如果已经配置过，不重复配置
    if _logging_configured:
        return

    library_logger = logging.getLogger(logger_name)
    library_logger.setLevel(log_level)

    # 只清除框架日志记录器自己的处理器
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)

    if use_json_formatter:
        formatter = jsonlogger.JsonFormatter(json_format)
    else:
        formatter = logging.Formatter(log_format)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        library_logger.addHandler(console_handler)

    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, log_file_name)

        if use_rotating_file:
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=log_file_max_size,
                backupCount=log_file_backup_count,
                encoding="utf-8"
            )
        else:
            file_handler = TimedRotatingFileHandler(
                log_file_path,
                when="midnight",
                backupCount=log_file_backup_count,
                encoding="utf-8"
            )

        file_handler.setFormatter(formatter)
        library_logger.addHandler(file_handler)

    # 已有自己的输出时不再向根日志记录器重复输出
    library_logger.propagate = not library_logger.handlers

    _logging_configured = True


def _initialize_logging():
    """初始化日志系统，基于配置文件进行一次性配置"""
    try:
        # 延迟导入避免循环依赖
        from .config import get_logging_config, to_bool
        logging_config = get_logging_config()

        if logging_config:
            log_level = getattr(logging, str(logging_config.get('level', 'INFO')).upper(), logging.INFO)

            _configure_logging(
                log_level=log_level,
                log_to_file=to_bool(logging_config.get('to_file'), False),
                log_dir=logging_config.get('dir', DEFAULT_LOG_DIR),
                log_file_name=logging_config.get('file', 'hub_events.log'),
                use_json_formatter=to_bool(logging_config.get('use_json'), False),
            )
        else:
            _configure_logging()

    except Exception as e:
        # 配置加载失败，记录错误并使用默认配置
        _configure_logging()
        logging.getLogger("hub_event_framework.config").warning(f"加载日志配置失败，使用默认配置: {e}")


def get_logger(name):
    """
    获取指定名称的日志记录器

    Args:
        name: 日志记录器名称

    Returns:
        配置好的日志记录器
    """
    return logging.getLogger(name)


# 系统启动时进行一次性初始化（get_logger 需先定义，config 模块会导入它）
_initialize_logging()
