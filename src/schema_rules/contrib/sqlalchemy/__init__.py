"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-03
@Docs: SQLAlchemy contrib adapters.
SQLAlchemy 贡献适配层。
"""

from schema_rules.contrib.sqlalchemy.adapters import (
    column_type_tag,
    derive_model_validators,
    get_column_descriptors,
    get_table_schema,
)

__all__ = ["column_type_tag", "derive_model_validators", "get_column_descriptors", "get_table_schema"]
