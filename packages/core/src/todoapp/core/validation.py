"""FieldValidator -- 表单字段长度校验

全部为纯函数：错误状态由当前字段值推导，按需重新计算，不单独保存。
名称与描述的校验相互独立。
"""

from pydantic import BaseModel, Field

from .config import FormSettings
from .models.draft import Draft


class FormErrors(BaseModel):
    """由草稿推导出的内联错误信息"""

    name: str | None = Field(default=None, description="名称错误信息")
    description: str | None = Field(default=None, description="描述错误信息")

    @property
    def has_errors(self) -> bool:
        return self.name is not None or self.description is not None


def validate_length(length: int, max_length: int, label: str = "Value") -> str | None:
    """长度校验

    Args:
        length: 当前长度
        max_length: 允许的最大长度（含）
        label: 错误信息中的字段名

    Returns:
        超限时返回错误信息，否则 None
    """
    if length > max_length:
        return f"{label} should be less than or equal to {max_length} characters"
    return None


def derive_errors(draft: Draft, settings: FormSettings) -> FormErrors:
    """从草稿推导名称、描述两个字段的错误状态"""
    return FormErrors(
        name=validate_length(len(draft.name), settings.name_max_length, "Name"),
        description=validate_length(
            len(draft.description),
            settings.description_max_length,
            "Description",
        ),
    )


def helper_text(value: str, max_length: int, error: str | None) -> str | None:
    """输入框下方提示文字

    空值不显示；有错误时显示错误；否则显示 "当前长度/上限"。
    """
    if value == "":
        return None
    if error is not None:
        return error
    return f"{len(value)}/{max_length}"


def can_create(errors: FormErrors) -> bool:
    """Create 按钮是否可用（任一长度超限即禁用）"""
    return not errors.has_errors
