"""全局 pytest 配置 -- 共享表单配置 fixture"""

import pytest
from todoapp.core.config import FormSettings


@pytest.fixture
def settings() -> FormSettings:
    """默认表单配置（名称 40 / 描述 350）"""
    return FormSettings()
