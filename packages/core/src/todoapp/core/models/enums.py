"""枚举定义

包含 SubmissionState 提交状态机、RecurringInterval、NotificationKind 枚举，
以及 VALID_TRANSITIONS 合法流转映射和 TERMINAL_STATES 终态集合。
"""

from enum import StrEnum


class SubmissionState(StrEnum):
    """Add Task 提交状态机"""

    EDITING = "EDITING"
    VALIDATING = "VALIDATING"

    # 校验失败，立即回到 EDITING
    REJECTED = "REJECTED"

    # 终态
    COMMITTED = "COMMITTED"


# 合法状态流转
VALID_TRANSITIONS: dict[SubmissionState, set[SubmissionState]] = {
    SubmissionState.EDITING: {SubmissionState.VALIDATING},
    SubmissionState.VALIDATING: {
        SubmissionState.REJECTED,
        SubmissionState.COMMITTED,
    },
    SubmissionState.REJECTED: {SubmissionState.EDITING},
    # 终态不可再流转
    SubmissionState.COMMITTED: set(),
}

TERMINAL_STATES: set[SubmissionState] = {SubmissionState.COMMITTED}


class RecurringInterval(StrEnum):
    """循环任务间隔"""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class NotificationKind(StrEnum):
    """通知类型（toast 样式由渲染层决定）"""

    SUCCESS = "success"
    ERROR = "error"


class RejectionReason(StrEnum):
    """提交被拒绝的原因"""

    NAME_REQUIRED = "name_required"
    FIELD_TOO_LONG = "field_too_long"


def validate_transition(
    from_state: SubmissionState,
    to_state: SubmissionState,
) -> bool:
    """验证状态流转是否合法

    Args:
        from_state: 当前状态
        to_state: 目标状态

    Returns:
        True 如果流转合法，否则 False
    """
    allowed = VALID_TRANSITIONS.get(from_state, set())
    return to_state in allowed
