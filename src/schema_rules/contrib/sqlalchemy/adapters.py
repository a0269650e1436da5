"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: adapters.py
@DateTime: 2026-03-03
@Docs: SQLAlchemy schema source helpers.
SQLAlchemy 模式来源辅助函数。
"""

from typing import Any

from schema_rules.deriver import TemplatesLike, derive_validators
from schema_rules.exceptions import SchemaRulesError, SchemaSourceError
from schema_rules.rules import Validator
from schema_rules.schema import ColumnDescriptor, TableSchema
from schema_rules.types import TEXT_TYPES, ColumnType

# Keyed by SQLAlchemy type class name; resolved along the type's MRO so
# dialect subclasses (e.g. mysql.TINYINT, postgresql.DOUBLE_PRECISION) map too.
# 按 SQLAlchemy 类型类名索引；沿 MRO 解析，方言子类同样可映射。
_SA_TYPE_TAGS: dict[str, ColumnType] = {
    "Enum": ColumnType.ENUM,
    "TINYINT": ColumnType.TINYINT,
    "SmallInteger": ColumnType.SMALLINT,
    "BigInteger": ColumnType.BIGINT,
    "Integer": ColumnType.INTEGER,
    "Double": ColumnType.DOUBLE,
    "DOUBLE_PRECISION": ColumnType.DOUBLE,
    "REAL": ColumnType.REAL,
    "Float": ColumnType.FLOAT,
    "NUMERIC": ColumnType.NUMERIC,
    "Numeric": ColumnType.DECIMAL,
    "CLOB": ColumnType.CLOB,
    "Text": ColumnType.LONGVARCHAR,
    "CHAR": ColumnType.CHAR,
    "String": ColumnType.VARCHAR,
    "Boolean": ColumnType.BOOLEAN,
    "DateTime": ColumnType.TIMESTAMP,
    "Date": ColumnType.DATE,
    "Time": ColumnType.TIME,
    "BLOB": ColumnType.BLOB,
    "VARBINARY": ColumnType.VARBINARY,
    "LargeBinary": ColumnType.LONGVARBINARY,
    "JSON": ColumnType.OBJECT,
}


def _require_sqlalchemy() -> Any:
    try:
        import sqlalchemy as sa

        return sa
    except Exception as exc:  # pragma: no cover
        raise SchemaRulesError(
            message="Missing optional dependency: sqlalchemy / 缺少可选依赖: sqlalchemy",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def column_type_tag(sa_type: Any) -> ColumnType | None:
    """Map a SQLAlchemy type instance to a ColumnType.

    将 SQLAlchemy 类型实例映射为 ColumnType。

    Args:
        sa_type: SQLAlchemy type instance (``Column.type``).
            SQLAlchemy 类型实例（``Column.type``）。

    Returns:
        ColumnType if mapped, None otherwise.
            可映射则返回 ColumnType，否则返回 None。
    """
    for klass in type(sa_type).__mro__:
        tag = _SA_TYPE_TAGS.get(klass.__name__)
        if tag is not None:
            return tag
    impl = _impl(sa_type)
    if impl is not sa_type:
        return column_type_tag(impl)
    return None


def _impl(sa_type: Any) -> Any:
    """Return the underlying type of a TypeDecorator, or the type itself."""
    if not any(klass.__name__ == "TypeDecorator" for klass in type(sa_type).__mro__):
        return sa_type
    impl = getattr(sa_type, "impl_instance", None) or getattr(sa_type, "impl", None)
    if impl is None or isinstance(impl, type):
        return sa_type
    return impl


def _as_int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _size_and_scale(sa_type: Any, tag: ColumnType | None) -> tuple[int | None, int | None]:
    impl = _impl(sa_type)
    if tag in TEXT_TYPES:
        return _as_int(getattr(impl, "length", None)), None
    # Float precision is binary for most backends; only fixed-point carries digits.
    # 多数后端的 Float 精度为二进制位；仅定点数携带十进制位数。
    if tag in (ColumnType.NUMERIC, ColumnType.DECIMAL):
        return _as_int(getattr(impl, "precision", None)), _as_int(getattr(impl, "scale", None))
    return None, None


def _resolve_table(model_or_table: Any) -> Any:
    sa = _require_sqlalchemy()
    if isinstance(model_or_table, sa.Table):
        return model_or_table
    table = getattr(model_or_table, "__table__", None)
    if table is None:
        raise SchemaSourceError(
            message="SQLAlchemy model missing __table__ / 模型缺少 __table__",
            details={"model": repr(model_or_table)},
        )
    return table


def get_column_descriptors(model_or_table: Any) -> list[ColumnDescriptor]:
    """Read column descriptors from a SQLAlchemy model or Table.

    从 SQLAlchemy 模型或 Table 读取列描述。

    Args:
        model_or_table: Declarative model class or ``sqlalchemy.Table``.
            声明式模型类或 ``sqlalchemy.Table``。

    Returns:
        list[ColumnDescriptor]: Descriptors in column order.
            按列顺序排列的列描述。

    Raises:
        SchemaSourceError: If no table can be found.
            找不到表时抛出。
    """
    table = _resolve_table(model_or_table)
    descriptors: list[ColumnDescriptor] = []
    for col in list(table.columns):
        tag = column_type_tag(col.type)
        size, scale = _size_and_scale(col.type, tag)
        descriptors.append(
            ColumnDescriptor(
                name=str(col.name),
                type=tag if tag is not None else type(col.type).__name__,
                nullable=bool(getattr(col, "nullable", True)),
                size=size,
                scale=scale,
            )
        )
    return descriptors


def get_table_schema(model_or_table: Any) -> TableSchema:
    """Build a TableSchema from a SQLAlchemy model or Table.
    从 SQLAlchemy 模型或 Table 构建 TableSchema。
    """
    table = _resolve_table(model_or_table)
    return TableSchema(name=str(table.name), columns=get_column_descriptors(table))


def derive_model_validators(model_or_table: Any, templates: TemplatesLike = None) -> list[Validator]:
    """Derive validators for a SQLAlchemy model or Table.

    为 SQLAlchemy 模型或 Table 推导校验器。

    Args:
        model_or_table: Declarative model class or ``sqlalchemy.Table``.
            声明式模型类或 ``sqlalchemy.Table``。
        templates: MessageTemplates, or a mapping of template overrides.
            MessageTemplates，或模板覆盖映射。

    Returns:
        list[Validator]: Derived validators.
            推导出的校验器。
    """
    return derive_validators(get_column_descriptors(model_or_table), templates)
