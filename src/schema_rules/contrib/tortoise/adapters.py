"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: adapters.py
@DateTime: 2026-03-03
@Docs: Tortoise ORM schema source helpers.
Tortoise ORM 模式来源辅助函数。
"""

from typing import Any

from schema_rules.deriver import TemplatesLike, derive_validators
from schema_rules.exceptions import SchemaRulesError, SchemaSourceError
from schema_rules.rules import Validator
from schema_rules.schema import ColumnDescriptor, TableSchema, to_display_name
from schema_rules.types import ColumnType

# Keyed by Tortoise field class name, resolved along the field's MRO
# (enum fields subclass CharField/SmallIntField, so they come first).
# 按 Tortoise 字段类名索引，沿 MRO 解析（枚举字段继承自 CharField/SmallIntField）。
_FIELD_TAGS: dict[str, ColumnType] = {
    "CharEnumFieldInstance": ColumnType.ENUM,
    "IntEnumFieldInstance": ColumnType.ENUM,
    "SmallIntField": ColumnType.SMALLINT,
    "BigIntField": ColumnType.BIGINT,
    "IntField": ColumnType.INTEGER,
    "FloatField": ColumnType.FLOAT,
    "DecimalField": ColumnType.DECIMAL,
    "CharField": ColumnType.VARCHAR,
    "TextField": ColumnType.LONGVARCHAR,
    "UUIDField": ColumnType.CHAR,
    "BooleanField": ColumnType.BOOLEAN,
    "DatetimeField": ColumnType.TIMESTAMP,
    "DateField": ColumnType.DATE,
    "TimeField": ColumnType.TIME,
    "BinaryField": ColumnType.BLOB,
    "JSONField": ColumnType.OBJECT,
}


def _require_tortoise() -> Any:
    try:
        import tortoise

        return tortoise
    except Exception as exc:  # pragma: no cover
        raise SchemaRulesError(
            message="Missing optional dependency: tortoise-orm / 缺少可选依赖: tortoise-orm",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def field_type_tag(field: Any) -> ColumnType | None:
    """Map a Tortoise field instance to a ColumnType.

    将 Tortoise 字段实例映射为 ColumnType。

    Args:
        field: Tortoise field instance.
            Tortoise 字段实例。

    Returns:
        ColumnType if mapped, None otherwise.
            可映射则返回 ColumnType，否则返回 None。
    """
    for klass in type(field).__mro__:
        tag = _FIELD_TAGS.get(klass.__name__)
        if tag is not None:
            return tag
    return None


def _as_int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _field_names(meta: Any) -> list[str]:
    fields_map = getattr(meta, "fields_map", None)
    if not isinstance(fields_map, dict):
        raise SchemaSourceError(message="Tortoise model fields_map missing / 缺少 fields_map")
    projection = getattr(meta, "fields_db_projection", None)
    # Projection only lists fields backed by a db column (no relations).
    # 投影仅包含有数据库列的字段（不含关系字段）。
    if isinstance(projection, dict) and projection:
        return list(projection.keys())
    return [name for name, field in fields_map.items() if not _is_relation(field)]


def _is_relation(field: Any) -> bool:
    return any(klass.__name__ == "RelationalField" for klass in type(field).__mro__)


def get_column_descriptors(model: Any) -> list[ColumnDescriptor]:
    """Read column descriptors from a Tortoise model.

    从 Tortoise 模型读取列描述。

    Args:
        model: Tortoise model class.
            Tortoise 模型类。

    Returns:
        list[ColumnDescriptor]: Descriptors in field order.
            按字段顺序排列的列描述。

    Raises:
        SchemaSourceError: If the model has no ``_meta``.
            模型缺少 ``_meta`` 时抛出。
    """
    _require_tortoise()
    meta = getattr(model, "_meta", None)
    if meta is None:
        raise SchemaSourceError(
            message="Tortoise model missing _meta / 模型缺少 _meta",
            details={"model": repr(model)},
        )
    fields_map = meta.fields_map
    projection = getattr(meta, "fields_db_projection", None) or {}

    descriptors: list[ColumnDescriptor] = []
    for name in _field_names(meta):
        field = fields_map.get(name)
        if field is None:
            continue
        tag = field_type_tag(field)
        if tag == ColumnType.DECIMAL:
            size, scale = _as_int(getattr(field, "max_digits", None)), _as_int(getattr(field, "decimal_places", None))
        else:
            size, scale = _as_int(getattr(field, "max_length", None)), None
        primary_key = bool(getattr(field, "pk", False))
        descriptors.append(
            ColumnDescriptor(
                name=str(projection.get(name) or name),
                type=tag if tag is not None else type(field).__name__,
                nullable=bool(getattr(field, "null", False)) and not primary_key,
                size=size,
                scale=scale,
                display_name=to_display_name(name),
            )
        )
    return descriptors


def get_table_schema(model: Any) -> TableSchema:
    """Build a TableSchema from a Tortoise model.
    从 Tortoise 模型构建 TableSchema。
    """
    descriptors = get_column_descriptors(model)
    table = getattr(model._meta, "db_table", None) or model.__name__.lower()
    return TableSchema(name=str(table), columns=descriptors)


def derive_model_validators(model: Any, templates: TemplatesLike = None) -> list[Validator]:
    """Derive validators for a Tortoise model.

    为 Tortoise 模型推导校验器。

    Args:
        model: Tortoise model class.
            Tortoise 模型类。
        templates: MessageTemplates, or a mapping of template overrides.
            MessageTemplates，或模板覆盖映射。

    Returns:
        list[Validator]: Derived validators.
            推导出的校验器。
    """
    return derive_validators(get_column_descriptors(model), templates)
