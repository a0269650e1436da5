"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-03
@Docs: Tortoise ORM contrib adapters.
Tortoise ORM 贡献适配层。
"""

from schema_rules.contrib.tortoise.adapters import (
    derive_model_validators,
    field_type_tag,
    get_column_descriptors,
    get_table_schema,
)

__all__ = ["derive_model_validators", "field_type_tag", "get_column_descriptors", "get_table_schema"]
