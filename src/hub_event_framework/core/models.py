"""
Hub事件框架的核心数据模型。

此模块定义了客户端收到的一次服务器方法调用 (InvocationMessage)。
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InvocationMessage(BaseModel):
    """
    服务器推送给客户端的一次方法调用。

    传输层负责解析线上格式，这里只描述路由所需的字段。
    """
    # 目标Hub名称，为 None 时不校验
    hub: Optional[str] = None

    # 被调用的客户端方法名，即事件名称
    method: str

    # 按位置排列的原始参数
    args: List[Any] = Field(default_factory=list)

    # 随调用下发的状态变量，分发前合并到代理状态中
    state: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "hub": "chatHub",
                "method": "addMessage",
                "args": ["alice", 3],
                "state": {"room": "lobby"}
            }
        }
    )

    @field_validator("method")
    @classmethod
    def _method_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("method 不能为空")
        return value

    @classmethod
    def create(
        cls,
        method: str,
        *args: Any,
        hub: Optional[str] = None,
        state: Optional[Dict[str, Any]] = None
    ) -> "InvocationMessage":
        """
        创建调用消息的工厂方法。

        Args:
            method: 方法名
            *args: 位置参数
            hub: Hub名称
            state: 状态变量

        Returns:
            调用消息对象
        """
        return cls(hub=hub, method=method, args=list(args), state=state)
