"""外部协作者接口 -- 通知（toast）与页面导航

渲染层实现这两个 Protocol；LogNotifier 为写结构化日志的默认实现。
"""

from typing import Protocol

import structlog

from .models.enums import NotificationKind

log = structlog.get_logger()


class Notifier(Protocol):
    """用户通知接口"""

    def notify(self, message: str, kind: NotificationKind) -> None:
        """发送一条瞬时通知"""
        ...


class Navigator(Protocol):
    """页面导航接口"""

    def go_to_task_list(self) -> None:
        """跳转到任务列表"""
        ...


class LogNotifier:
    """将通知写入日志（无界面时使用）"""

    def notify(self, message: str, kind: NotificationKind) -> None:
        if kind == NotificationKind.ERROR:
            log.warning("user_notification", kind=kind.value, message=message)
        else:
            log.info("user_notification", kind=kind.value, message=message)
