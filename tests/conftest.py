"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-03-04
@Docs: Shared test fixtures for the schema-rules test suite.
测试套件的公共 fixtures。
"""

import os
import re
from unittest.mock import patch

import pytest

from schema_rules.config import MessageTemplates
from schema_rules.schema import ColumnDescriptor, TableSchema
from schema_rules.types import ColumnType


@pytest.fixture(autouse=True)
def clean_template_env():
    """Hide SCHEMA_RULES_* env vars from every test.
    对每个测试屏蔽 SCHEMA_RULES_* 环境变量。
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("SCHEMA_RULES_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def templates() -> MessageTemplates:
    """Default message templates / 默认消息模板。"""
    return MessageTemplates()


@pytest.fixture
def users_table() -> TableSchema:
    """A small users table / 小型用户表。"""
    return TableSchema(
        name="users",
        columns=[
            ColumnDescriptor("id", ColumnType.INTEGER, nullable=False, size=11),
            ColumnDescriptor("user_name", ColumnType.VARCHAR, nullable=False, size=64),
            ColumnDescriptor("contact_email", ColumnType.VARCHAR, nullable=True, size=255),
            ColumnDescriptor("balance", ColumnType.DECIMAL, nullable=True, size=10, scale=2),
            ColumnDescriptor("created_at", ColumnType.TIMESTAMP, nullable=True),
            ColumnDescriptor("bio", ColumnType.LONGVARCHAR, nullable=True),
        ],
    )


def matches(pattern: str, text: str) -> bool:
    """Whole-string match helper / 全串匹配辅助函数。"""
    return re.fullmatch(pattern, text) is not None
