"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-03-02
@Docs: Schema rules error hierarchy.
模式规则异常体系。
"""

from typing import Any


class SchemaRulesError(Exception):
    """
    Schema Rules Errors.
    模式规则异常。

    Errors raised around rule derivation (configuration, schema sources).
    规则推导周边（配置、模式来源）抛出的异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "schema_rules_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class ConfigError(SchemaRulesError):
    """
    Message template configuration error.
    消息模板配置错误。
    """


class SchemaSourceError(SchemaRulesError):
    """
    Schema source error (model or table cannot be read).
    模式来源错误（无法读取模型或表）。
    """
