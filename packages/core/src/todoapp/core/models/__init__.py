"""todoapp Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .draft import DRAFT_KEYS, Draft
from .enums import (
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    NotificationKind,
    RecurringInterval,
    RejectionReason,
    SubmissionState,
    validate_transition,
)
from .task import Category, Task

__all__ = [
    # 枚举
    "SubmissionState",
    "RecurringInterval",
    "NotificationKind",
    "RejectionReason",
    # 状态机
    "VALID_TRANSITIONS",
    "TERMINAL_STATES",
    "validate_transition",
    # Task
    "Task",
    "Category",
    # Draft
    "Draft",
    "DRAFT_KEYS",
]
