"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schema.py
@DateTime: 2026-03-02
@Docs: Column descriptors and the table handle.
列描述对象与表句柄。
"""

from dataclasses import dataclass, field
from typing import Any

from schema_rules.rules import Validator
from schema_rules.types import ColumnType

_NAME_SEPARATOR = "_"


def to_display_name(name: str) -> str:
    """Derive a CamelCase presentation name from a raw column name.

    从原始列名推导驼峰形式的展示名。

    Splits on underscores only; each part is lowercased, then its first
    letter uppercased, so ``ID`` becomes ``Id``.
    仅按下划线拆分；每段先转小写再首字母大写，因此 ``ID`` 变为 ``Id``。

    Args:
        name: Raw column name.
            原始列名。

    Returns:
        Presentation name (e.g. ``user_email`` -> ``UserEmail``).
            展示名（如 ``user_email`` -> ``UserEmail``）。

    Examples:
        >>> to_display_name("user_email")
        'UserEmail'
    """
    parts = [p for p in str(name).split(_NAME_SEPARATOR) if p]
    return "".join(p[:1].upper() + p[1:].lower() for p in parts)


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """Read-only column definition.

    只读列定义。

    Attributes:
        name: Raw column name, unique within the table.
            原始列名（表内唯一）。
        type: Declared type tag (ColumnType or its name).
            声明的类型标签（ColumnType 或其名称）。
        nullable: Whether NULL is allowed.
            是否允许 NULL。
        size: Max length for text, precision for numerics.
            文本为最大长度，数值为精度。
        scale: Fractional digit count for numerics.
            数值的小数位数。
        display_name: Presentation name used in messages.
            消息中使用的展示名。
    """

    name: str
    type: ColumnType | str
    nullable: bool = True
    size: int | None = None
    scale: int | None = None
    display_name: str | None = None

    @property
    def label(self) -> str:
        """Return the display name, deriving it when not set.
        返回展示名，未设置时自动推导。
        """
        if self.display_name:
            return self.display_name
        return to_display_name(self.name)


@dataclass(slots=True)
class TableSchema:
    """Table handle: ordered columns plus the validators attached to it.

    表句柄：有序列定义与已附着的校验器。

    Attributes:
        name: Table name.
            表名。
        columns: Column descriptors in declaration order.
            按声明顺序排列的列描述。
        validators: Attached validators.
            已附着的校验器。
    """

    name: str
    columns: list[ColumnDescriptor] = field(default_factory=list)
    validators: list[Validator] = field(default_factory=list)

    def add_validator(self, validator: Validator) -> None:
        """Attach a validator to this table.
        将校验器附着到本表。

        Args:
            validator: Validator to attach.
                要附着的校验器。
        """
        self.validators.append(validator)

    def get_validator(self, column_name: str) -> Validator | None:
        """Return the validator of a column, if any.
        返回指定列的校验器（若存在）。

        Args:
            column_name: Raw column name.
                原始列名。

        Returns:
            The validator or None.
                校验器或 None。
        """
        for validator in self.validators:
            if validator.column.name == column_name:
                return validator
        return None

    @classmethod
    def from_columns(cls, name: str, columns: list[dict[str, Any]]) -> "TableSchema":
        """Build a table handle from plain column dicts.
        从普通列字典构建表句柄。

        Args:
            name: Table name.
                表名。
            columns: Dicts with ColumnDescriptor keyword arguments.
                包含 ColumnDescriptor 关键字参数的字典列表。

        Returns:
            TableSchema: The table handle.
                表句柄。
        """
        return cls(name=name, columns=[ColumnDescriptor(**c) for c in columns])
