#!/usr/bin/env python3
"""
聊天客户端示例

演示如何在Hub代理上注册类型化处理器、通配处理器和可观察序列。
这里用 receive() 模拟传输层投递的服务器调用。
"""
from pydantic import BaseModel

from hub_event_framework import (
    create_hub_proxy,
    get_logger,
    get_value,
    observe,
    on,
    on_any,
    on_missing,
)

logger = get_logger("hub_event_framework.examples.chat_client")


class ChatMessage(BaseModel):
    """聊天消息"""
    user: str
    text: str


class ChatClient:
    """简单的聊天客户端"""

    def __init__(self, hub_name: str = "chatHub"):
        self.proxy = create_hub_proxy(hub_name)
        self.tokens = []

    def handle_message(self, message: ChatMessage, unread: int) -> None:
        """处理新消息"""
        logger.info(f"{message.user}: {message.text} (未读 {unread})")

    def handle_joined(self, user: str) -> None:
        """处理用户加入"""
        logger.info(f"{user} 加入了 {get_value(self.proxy, 'room', str)}")

    def start(self) -> None:
        """注册所有处理器"""
        self.tokens = [
            on(self.proxy, "addMessage", self.handle_message),
            on(self.proxy, "joined", self.handle_joined),
            on(self.proxy, "ping", lambda: logger.info("pong")),
            on_any(self.proxy, lambda args, method: logger.debug(f"调用 {method}: {args}")),
            on_missing(self.proxy, lambda args, method: logger.warning(f"未处理的方法: {method}")),
            observe(self.proxy, "typing").subscribe(lambda args: logger.info(f"正在输入: {args}")),
        ]

    def stop(self) -> None:
        """注销所有处理器"""
        for token in self.tokens:
            token.dispose()
        self.tokens = []


def main():
    """运行示例"""
    client = ChatClient()
    client.start()

    client.proxy.receive({"hub": "chatHub", "method": "joined", "args": ["alice"], "state": {"room": "lobby"}})
    client.proxy.receive({"method": "addMessage", "args": [{"user": "alice", "text": "hi"}, 2]})
    client.proxy.receive({"method": "addMessage", "args": [{"user": "bob", "text": "hello"}]})
    client.proxy.receive({"method": "typing", "args": ["bob"]})
    client.proxy.receive({"method": "ping"})
    client.proxy.receive({"method": "refreshRoster", "args": []})

    client.stop()


if __name__ == "__main__":
    main()
