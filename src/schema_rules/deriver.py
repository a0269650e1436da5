"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: deriver.py
@DateTime: 2026-03-02
@Docs: Derive column validators from a table schema.
从表结构推导列校验器。

Per column, rules are derived in a fixed order:
每列按固定顺序推导规则：
        1) required      - column is NOT NULL / 列不可为空
        2) maxLength     - text column with a positive size / 文本列且长度为正
        3) match         - integer OR floating precision pattern / 整数或浮点精度正则
        4) match         - column name contains "email" / 列名包含 "email"

A validator is emitted only when at least one rule applies. Malformed
sizes, scales and type tags never raise: they degrade to "unbounded" or
"no numeric rule".
仅当至少一条规则适用时才产出校验器。异常的 size/scale/类型标签不会抛错，
而是退化为“无上限”或“无数值规则”。
"""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from schema_rules.config import MessageTemplates, render_message, resolve_templates
from schema_rules.patterns import EMAIL_PATTERN, float_pattern, integer_digits, integer_pattern, non_zero_or_blank
from schema_rules.rules import Rule, RuleKind, Validator
from schema_rules.schema import ColumnDescriptor, TableSchema
from schema_rules.types import coerce_type, is_floating_type, is_integer_type, is_text_type

logger = structlog.get_logger(__name__)

TemplatesLike = MessageTemplates | Mapping[str, Any] | None


def _as_templates(templates: TemplatesLike) -> MessageTemplates:
    if isinstance(templates, MessageTemplates):
        return templates
    if templates is None:
        return MessageTemplates()
    return resolve_templates(templates)


def derive_column_rules(column: ColumnDescriptor, templates: MessageTemplates) -> list[Rule]:
    """Derive the ordered rules of one column.

    推导单列的有序规则。

    Args:
        column: Column descriptor.
            列描述。
        templates: Message templates.
            消息模板。

    Returns:
        list[Rule]: Rules in derivation order (may be empty).
            按推导顺序排列的规则（可能为空）。
    """
    label = column.label
    rules: list[Rule] = []

    if not column.nullable:
        rules.append(
            Rule(kind=RuleKind.REQUIRED, message=render_message(templates.required_message, colname=label))
        )

    size = non_zero_or_blank(column.size)
    if is_text_type(column.type) and size is not None:
        rules.append(
            Rule(
                kind=RuleKind.MAX_LENGTH,
                value=size,
                message=render_message(templates.max_length_message, colname=label, value=size),
            )
        )

    if is_integer_type(column.type):
        rules.append(
            Rule(
                kind=RuleKind.MATCH,
                value=integer_pattern(size),
                message=render_message(templates.match_integer_message, colname=label),
            )
        )
    elif is_floating_type(column.type):
        rules.append(
            Rule(
                kind=RuleKind.MATCH,
                value=float_pattern(integer_digits(column.size, column.scale), non_zero_or_blank(column.scale)),
                message=render_message(templates.match_float_message, colname=label),
            )
        )
    elif coerce_type(column.type) is None:
        logger.debug("unmapped_column_type", column=column.name, type=str(column.type))

    if "email" in str(column.name).lower():
        rules.append(
            Rule(
                kind=RuleKind.MATCH,
                value=EMAIL_PATTERN,
                message=render_message(templates.match_email_message, colname=label),
            )
        )

    return rules


def derive_validators(columns: Iterable[ColumnDescriptor], templates: TemplatesLike = None) -> list[Validator]:
    """Derive validators for a sequence of columns.

    为一组列推导校验器。

    Columns are processed independently; output follows input order and
    skips columns without rules. Inputs are never mutated.
    各列独立处理；输出顺序与输入一致，并跳过无规则的列。不会修改输入。

    Args:
        columns: Column descriptors of one table.
            单表的列描述。
        templates: MessageTemplates, or a mapping of template overrides.
            MessageTemplates，或模板覆盖映射。

    Returns:
        list[Validator]: One validator per column with at least one rule.
            每个至少有一条规则的列对应一个校验器。

    Raises:
        ConfigError: If a template override mapping has unknown keys.
            模板覆盖映射含未知键时抛出。
    """
    resolved = _as_templates(templates)
    validators: list[Validator] = []
    for column in columns:
        rules = derive_column_rules(column, resolved)
        if not rules:
            continue
        validators.append(Validator(column=column, rules=rules))
        logger.debug("validator_derived", column=column.name, rules=[r.kind.value for r in rules])
    return validators


def apply_to_table(table: TableSchema, templates: TemplatesLike = None) -> list[Validator]:
    """Derive validators for a table and attach them to it.

    为表推导校验器并附着到表上。

    Args:
        table: Table handle.
            表句柄。
        templates: MessageTemplates, or a mapping of template overrides.
            MessageTemplates，或模板覆盖映射。

    Returns:
        list[Validator]: The attached validators.
            已附着的校验器。
    """
    validators = derive_validators(table.columns, templates)
    for validator in validators:
        table.add_validator(validator)
    logger.info(
        "table_validators_applied",
        table=table.name,
        columns=len(table.columns),
        validators=len(validators),
    )
    return validators


class RuleDeriver:
    """Rule deriver bound to one set of message templates.

    绑定一组消息模板的规则推导器。

    Examples:
        >>> from schema_rules import ColumnDescriptor, RuleDeriver
        >>> deriver = RuleDeriver({"required_message": "${colname} missing"})
        >>> [v.rules[0].message for v in deriver.derive([ColumnDescriptor("title", "VARCHAR", nullable=False)])]
        ['Title missing']
    """

    def __init__(self, templates: TemplatesLike = None) -> None:
        self.templates = _as_templates(templates)

    def derive(self, columns: Iterable[ColumnDescriptor]) -> list[Validator]:
        return derive_validators(columns, self.templates)

    def modify_table(self, table: TableSchema) -> list[Validator]:
        return apply_to_table(table, self.templates)
