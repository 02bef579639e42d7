"""
Hub事件框架使用的常量定义。
"""


class HubConstants:
    """Hub事件路由相关常量"""
    # 保留的事件名称
    ANY_EVENT = "*"  # 每个已识别的方法调用都会触发
    MISSING_EVENT = "!"  # 客户端未绑定的方法调用会触发

    RESERVED_EVENTS = (ANY_EVENT, MISSING_EVENT)

    # 类型化回调支持的最大参数个数
    MAX_ARITY = 7

    # 默认Hub名称
    DEFAULT_HUB_NAME = "defaultHub"


class ErrorMessages:
    """错误消息常量"""
    NULL_PROXY = "proxy 不能为空"
    EMPTY_EVENT_NAME = "eventName 不能为空"
    EMPTY_STATE_NAME = "name 不能为空"
    RESERVED_EVENT_NAME = "eventName '{event_name}' 是保留名称，请使用 on_any / on_missing"
    NULL_CALLBACK = "onData 必须是可调用对象"
    NULL_OBSERVER = "observer 不能为空"
    TOO_MANY_PARAMETERS = "类型化回调最多支持 {max_arity} 个参数，实际为 {arity}"
    CONVERSION_FAILED = "无法将 {value!r} 转换为 {target}"
    HANDLER_FAILED = "事件 '{event_name}' 的 {count} 个处理器执行失败"
