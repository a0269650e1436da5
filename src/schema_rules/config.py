"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-03-02
@Docs: Message template configuration.
消息模板配置。

Message templates carry two placeholder tokens:
消息模板包含两个占位符：
        - ``${colname}``: replaced by the column display name (all templates).
            替换为列展示名（所有模板）。
        - ``${value}``: replaced by the column size (max_length_message only).
            替换为列长度（仅 max_length_message）。

Environment variables / 环境变量:
        - SCHEMA_RULES_REQUIRED_MESSAGE
        - SCHEMA_RULES_MAX_LENGTH_MESSAGE
        - SCHEMA_RULES_MATCH_INTEGER_MESSAGE
        - SCHEMA_RULES_MATCH_FLOAT_MESSAGE
        - SCHEMA_RULES_MATCH_EMAIL_MESSAGE

Examples:
        >>> from schema_rules.config import resolve_templates
        >>> t = resolve_templates({"required_message": "${colname} missing"})
        >>> t.required_message
        '${colname} missing'
"""

import os
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from schema_rules.exceptions import ConfigError

COLNAME_TOKEN = "${colname}"
VALUE_TOKEN = "${value}"

DEFAULT_TEMPLATES: dict[str, str] = {
    "required_message": "${colname} is required",
    "max_length_message": "${colname} cannot be larger than ${value} chars",
    "match_integer_message": "${colname} must be an integer number",
    "match_float_message": "${colname} must be a floating number",
    "match_email_message": "${colname} must be a valid email address",
}
TEMPLATE_KEYS: tuple[str, ...] = tuple(DEFAULT_TEMPLATES)


class MessageTemplates(BaseModel):
    """The five named message templates.

    五个具名消息模板。

    Attributes:
        required_message: Message for ``required`` rules.
            ``required`` 规则消息。
        max_length_message: Message for ``maxLength`` rules (uses ``${value}``).
            ``maxLength`` 规则消息（使用 ``${value}``）。
        match_integer_message: Message for integer ``match`` rules.
            整数 ``match`` 规则消息。
        match_float_message: Message for floating ``match`` rules.
            浮点 ``match`` 规则消息。
        match_email_message: Message for email ``match`` rules.
            邮箱 ``match`` 规则消息。
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    required_message: str = DEFAULT_TEMPLATES["required_message"]
    max_length_message: str = DEFAULT_TEMPLATES["max_length_message"]
    match_integer_message: str = DEFAULT_TEMPLATES["match_integer_message"]
    match_float_message: str = DEFAULT_TEMPLATES["match_float_message"]
    match_email_message: str = DEFAULT_TEMPLATES["match_email_message"]


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def resolve_templates(
    overrides: Mapping[str, Any] | None = None,
    *,
    env_prefix: str = "SCHEMA_RULES",
) -> MessageTemplates:
    """Resolve message templates from overrides and environment variables.

    从覆盖参数和环境变量解析消息模板。

    Resolution order per key / 每个键的解析优先级:
        1) `overrides` parameter (blank values are ignored)
           overrides 参数（空白值忽略）
        2) env: `{env_prefix}_{KEY}` (e.g. `SCHEMA_RULES_REQUIRED_MESSAGE`)
           环境变量：`{env_prefix}_{KEY}`
        3) defaults / 默认值

    Args:
        overrides: Template overrides keyed by template name.
            按模板名覆盖的模板。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 SCHEMA_RULES）。

    Returns:
        MessageTemplates: Resolved templates.
            解析后的模板。

    Raises:
        ConfigError: If an override key is not a known template name.
            覆盖键不是已知模板名时抛出。
    """
    given = dict(overrides or {})
    unknown = sorted(k for k in given if k not in DEFAULT_TEMPLATES)
    if unknown:
        raise ConfigError(
            message=f"Unknown message template(s): {', '.join(unknown)} / 未知消息模板: {', '.join(unknown)}",
            details={"unknown": unknown, "allowed": list(TEMPLATE_KEYS)},
            error_code="unknown_template",
        )

    resolved: dict[str, str] = {}
    for key in TEMPLATE_KEYS:
        value = given.get(key)
        if value is not None and str(value).strip():
            resolved[key] = str(value)
            continue
        env_value = _env_get(f"{env_prefix}_{key.upper()}")
        if env_value is not None:
            resolved[key] = env_value
    return MessageTemplates(**resolved)


def render_message(template: str, *, colname: str, value: Any | None = None) -> str:
    """Substitute ``${colname}`` (and ``${value}`` when given) in a template.

    替换模板中的 ``${colname}``（以及给定时的 ``${value}``）。

    Args:
        template: Message template.
            消息模板。
        colname: Column display name.
            列展示名。
        value: Optional value for ``${value}``.
            ``${value}`` 的可选取值。

    Returns:
        str: Rendered message.
            渲染后的消息。
    """
    tokens = {COLNAME_TOKEN: colname}
    if value is not None:
        tokens[VALUE_TOKEN] = str(value)
    # Single pass: substituted text is never rescanned.
    # 单次替换：已替换的文本不会被再次扫描。
    pattern = re.compile("|".join(re.escape(t) for t in tokens))
    return pattern.sub(lambda m: tokens[m.group(0)], template)
