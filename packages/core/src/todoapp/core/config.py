"""配置模块 -- 可通过环境变量覆盖

包含数据库路径、日志输出、表单长度上限、默认任务颜色等可配置项。
"""

import os
from pathlib import Path

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

# 任务名称最大长度
TASK_NAME_MAX_LENGTH: int = 40

# 任务描述最大长度
DESCRIPTION_MAX_LENGTH: int = 350

# 主题主色（未选择颜色时的任务颜色）
DEFAULT_TASK_COLOR: str = "#b624ff"

# 日志渲染模式
LOG_FORMATS: tuple[str, ...] = ("dev", "json")


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TODOAPP_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TODOAPP_DB_PATH",
        str(_get_base_dir() / "sqlite" / "todoapp.db"),
    )


def get_log_format() -> str:
    """获取日志渲染模式，非法值记录告警并使用 dev"""
    val = os.environ.get("TODOAPP_LOG_FORMAT", "dev")
    if val not in LOG_FORMATS:
        log.warning("invalid_log_format", value=val, fallback="dev")
        return "dev"
    return val


def get_log_level() -> str:
    """获取日志级别名（默认 INFO）"""
    return os.environ.get("TODOAPP_LOG_LEVEL", "INFO").upper()


class FormSettings(BaseModel):
    """Add Task 表单配置 -- 从环境变量加载

    环境变量:
        TODOAPP_TASK_NAME_MAX_LENGTH: 名称长度上限（默认 40）
        TODOAPP_DESCRIPTION_MAX_LENGTH: 描述长度上限（默认 350）
        TODOAPP_DEFAULT_TASK_COLOR: 默认任务颜色（默认主题主色）
    """

    name_max_length: int = Field(
        default=TASK_NAME_MAX_LENGTH,
        ge=1,
        description="任务名称最大长度",
    )
    description_max_length: int = Field(
        default=DESCRIPTION_MAX_LENGTH,
        ge=1,
        description="任务描述最大长度",
    )
    default_color: str = Field(
        default=DEFAULT_TASK_COLOR,
        min_length=1,
        description="默认任务颜色",
    )


def _read_positive_int(env_var: str, fallback: int) -> int | None:
    """读取正整数环境变量

    非整数或小于 1 的值记录告警并返回 None（沿用默认值）。
    """
    val = os.environ.get(env_var)
    if not val:
        return None
    try:
        parsed = int(val)
    except ValueError:
        parsed = 0
    if parsed < 1:
        log.warning(
            "invalid_int_config",
            env_var=env_var,
            value=val,
            fallback=fallback,
        )
        return None
    return parsed


def load_form_settings() -> FormSettings:
    """从环境变量加载表单配置

    Returns:
        FormSettings 实例
    """
    kwargs: dict = {}

    name_max = _read_positive_int("TODOAPP_TASK_NAME_MAX_LENGTH", TASK_NAME_MAX_LENGTH)
    if name_max is not None:
        kwargs["name_max_length"] = name_max

    desc_max = _read_positive_int("TODOAPP_DESCRIPTION_MAX_LENGTH", DESCRIPTION_MAX_LENGTH)
    if desc_max is not None:
        kwargs["description_max_length"] = desc_max

    if val := os.environ.get("TODOAPP_DEFAULT_TASK_COLOR"):
        kwargs["default_color"] = val

    return FormSettings(**kwargs)
