"""todoapp core 异常体系

用户可见的校验失败（名称为空、长度超限）不走异常，
由 SubmissionController 以 REJECTED 结果返回。
以下异常均表示调用方错误或存储层冲突。
"""


class TodoAppError(Exception):
    """core 包基础异常"""


class TaskInvariantError(TodoAppError):
    """组装出的 Task 违反不变量

    提交闸门已保证不会出现，出现即为调用方错误。
    """


class InvalidTransitionError(TodoAppError):
    """提交状态机非法流转"""

    def __init__(self, from_state: str, to_state: str) -> None:
        super().__init__(f"Cannot transition from {from_state} to {to_state}")
        self.from_state = from_state
        self.to_state = to_state


class SubmissionClosedError(TodoAppError):
    """提交已完成（COMMITTED 终态），不可再次提交"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Submission already committed task {task_id}")
        self.task_id = task_id


class DuplicateTaskError(TodoAppError):
    """任务 ID 已存在于任务集合中"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task id already exists: {task_id}")
        self.task_id = task_id
