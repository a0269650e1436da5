"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: types.py
@DateTime: 2026-03-02
@Docs: Database type tags and category predicates.
数据库类型标签与类别判断。

Type classification is a plain set-membership check against closed,
non-overlapping category sets. Unknown tags never raise; they simply
belong to no category.

类型分类是对封闭且互不重叠的类别集合做成员判断。
未知标签不会抛错，只是不属于任何类别。
"""

from enum import Enum
from typing import Any


class ColumnType(str, Enum):
    """Declared database column type tag.
    声明的数据库列类型标签。
    """

    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    LONGVARCHAR = "LONGVARCHAR"
    CLOB = "CLOB"
    CLOB_EMU = "CLOB_EMU"
    NUMERIC = "NUMERIC"
    DECIMAL = "DECIMAL"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    REAL = "REAL"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    LONGVARBINARY = "LONGVARBINARY"
    BLOB = "BLOB"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    BU_DATE = "BU_DATE"
    BU_TIMESTAMP = "BU_TIMESTAMP"
    BOOLEAN = "BOOLEAN"
    BOOLEAN_EMU = "BOOLEAN_EMU"
    OBJECT = "OBJECT"
    PHP_ARRAY = "PHP_ARRAY"
    ENUM = "ENUM"


INTEGER_TYPES: frozenset[ColumnType] = frozenset(
    {ColumnType.TINYINT, ColumnType.SMALLINT, ColumnType.INTEGER, ColumnType.BIGINT}
)
FLOATING_TYPES: frozenset[ColumnType] = frozenset(
    {ColumnType.FLOAT, ColumnType.DOUBLE, ColumnType.NUMERIC, ColumnType.DECIMAL, ColumnType.REAL}
)
# Date/time tags are not text here, even if some drivers bind them as strings.
# 此处日期/时间标签不视为文本类型。
TEXT_TYPES: frozenset[ColumnType] = frozenset(
    {ColumnType.CHAR, ColumnType.VARCHAR, ColumnType.LONGVARCHAR, ColumnType.CLOB, ColumnType.CLOB_EMU}
)


def coerce_type(tag: Any) -> ColumnType | None:
    """Coerce a raw type tag into a ColumnType.
    将原始类型标签转换为 ColumnType。

    Args:
        tag: A ColumnType or a type name (case-insensitive).
            ColumnType 或类型名称（不区分大小写）。

    Returns:
        ColumnType if recognized, None otherwise.
            可识别则返回 ColumnType，否则返回 None。
    """
    if isinstance(tag, ColumnType):
        return tag
    if not isinstance(tag, str):
        return None
    try:
        return ColumnType(tag.strip().upper())
    except ValueError:
        return None


def is_integer_type(tag: Any) -> bool:
    """Return True for integer-like tags / 整数类标签返回 True。"""
    return coerce_type(tag) in INTEGER_TYPES


def is_floating_type(tag: Any) -> bool:
    """Return True for floating-like tags / 浮点类标签返回 True。"""
    return coerce_type(tag) in FLOATING_TYPES


def is_text_type(tag: Any) -> bool:
    """Return True for text-like tags / 文本类标签返回 True。"""
    return coerce_type(tag) in TEXT_TYPES
