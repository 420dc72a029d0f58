"""提交状态机流转单元测试

测试内容：
1. 合法流转通过
2. 非法流转被拒绝
3. 终态不可再流转
"""

import pytest
from todoapp.core.models.enums import (
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    SubmissionState,
    validate_transition,
)


class TestSubmissionStateTransitions:
    """状态机流转验证"""

    @pytest.mark.parametrize(
        "from_state,to_state",
        [
            (SubmissionState.EDITING, SubmissionState.VALIDATING),
            (SubmissionState.VALIDATING, SubmissionState.REJECTED),
            (SubmissionState.VALIDATING, SubmissionState.COMMITTED),
            (SubmissionState.REJECTED, SubmissionState.EDITING),
        ],
    )
    def test_valid_transition(self, from_state, to_state):
        """合法流转应通过验证"""
        assert validate_transition(from_state, to_state) is True

    @pytest.mark.parametrize(
        "from_state,to_state",
        [
            (SubmissionState.EDITING, SubmissionState.COMMITTED),
            (SubmissionState.EDITING, SubmissionState.REJECTED),
            (SubmissionState.VALIDATING, SubmissionState.EDITING),
            (SubmissionState.REJECTED, SubmissionState.COMMITTED),
            (SubmissionState.EDITING, SubmissionState.EDITING),
        ],
    )
    def test_invalid_transition(self, from_state, to_state):
        """非法流转应被拒绝"""
        assert validate_transition(from_state, to_state) is False

    def test_terminal_states_cannot_transition(self):
        for terminal in TERMINAL_STATES:
            for target in SubmissionState:
                assert validate_transition(terminal, target) is False, (
                    f"终态 {terminal} 不应能流转到 {target}"
                )

    def test_valid_transitions_completeness(self):
        """VALID_TRANSITIONS 覆盖所有状态"""
        for state in SubmissionState:
            assert state in VALID_TRANSITIONS, f"{state} 未在 VALID_TRANSITIONS 中定义"
