"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-02
@Docs: Package exports for schema_rules.
schema_rules 包导出定义。
"""

from schema_rules.config import DEFAULT_TEMPLATES, TEMPLATE_KEYS, MessageTemplates, render_message, resolve_templates
from schema_rules.deriver import RuleDeriver, apply_to_table, derive_column_rules, derive_validators
from schema_rules.exceptions import ConfigError, SchemaRulesError, SchemaSourceError
from schema_rules.patterns import EMAIL_PATTERN, float_pattern, integer_pattern, non_zero_or_blank
from schema_rules.rules import Rule, RuleKind, Validator
from schema_rules.schema import ColumnDescriptor, TableSchema, to_display_name
from schema_rules.types import (
    FLOATING_TYPES,
    INTEGER_TYPES,
    TEXT_TYPES,
    ColumnType,
    coerce_type,
    is_floating_type,
    is_integer_type,
    is_text_type,
)

__all__ = [
    "RuleDeriver",
    "derive_validators",
    "derive_column_rules",
    "apply_to_table",
    "ColumnDescriptor",
    "TableSchema",
    "to_display_name",
    "Rule",
    "RuleKind",
    "Validator",
    "MessageTemplates",
    "DEFAULT_TEMPLATES",
    "TEMPLATE_KEYS",
    "resolve_templates",
    "render_message",
    "SchemaRulesError",
    "ConfigError",
    "SchemaSourceError",
    "ColumnType",
    "INTEGER_TYPES",
    "FLOATING_TYPES",
    "TEXT_TYPES",
    "coerce_type",
    "is_integer_type",
    "is_floating_type",
    "is_text_type",
    "EMAIL_PATTERN",
    "integer_pattern",
    "float_pattern",
    "non_zero_or_blank",
]
