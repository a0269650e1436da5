"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-03-02
@Docs: Numeric precision and email pattern builders.
数值精度与邮箱正则构建器。

A digit budget is either a positive int or None ("unbounded"). Unbounded
renders as an empty bound (``{1,}``), never as ``{1,0}``.
位数预算为正整数或 None（“无上限”）。无上限渲染为空上界（``{1,}``），
绝不渲染为 ``{1,0}``。
"""

import math
from numbers import Real
from typing import Any

INTEGER_TEMPLATE = r"^-?[0-9]{1,%s}$"
FLOAT_TEMPLATE = r"^-?(?:[0-9]{1,%s}|[0-9]{0,%s}\.[0-9]{1,%s})$"

# The domain part also accepts a leading dot or dash; kept as enforced.
# 域名部分允许以点或横线开头；按实际生效行为保留。
EMAIL_PATTERN = r"^(?:[a-zA-Z0-9_-])+(?:[\.a-zA-Z0-9_-])*@(?:[.a-zA-Z0-9_-])+(?:\.[a-zA-Z0-9]+)+$"


def non_zero_or_blank(value: Any) -> int | None:
    """Return a positive digit budget, or None for unbounded.

    返回正的位数预算；无上限时返回 None。

    Zero, negative, absent, non-finite and non-numeric values are all unbounded.
    Fractions are truncated before the sign check, so 0.5 is unbounded too.
    零、负数、缺失、非有限及非数值均视为无上限；小数先截断再判断，0.5 亦为无上限。

    Args:
        value: Raw size/scale value.
            原始 size/scale 值。

    Returns:
        int | None: The budget, or None.
            位数预算或 None。
    """
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        return None
    digits = int(value)
    return digits if digits > 0 else None


def _bound(digits: int | None) -> str:
    return "" if digits is None else str(digits)


def integer_digits(size: Any, scale: Any) -> int | None:
    """Integer digit budget of a decimal column (size - scale).
    小数列的整数位预算（size - scale）。
    """
    return non_zero_or_blank((non_zero_or_blank(size) or 0) - (non_zero_or_blank(scale) or 0))


def integer_pattern(digits: int | None) -> str:
    """Build the integer match pattern.

    构建整数匹配正则。

    Args:
        digits: Max digit count, or None for unbounded.
            最大位数；None 表示无上限。

    Returns:
        str: Anchored pattern with optional leading minus.
            带可选负号的锚定正则。

    Examples:
        >>> integer_pattern(5)
        '^-?[0-9]{1,5}$'
        >>> integer_pattern(None)
        '^-?[0-9]{1,}$'
    """
    return INTEGER_TEMPLATE % _bound(digits)


def float_pattern(int_digits: int | None, scale: int | None) -> str:
    """Build the floating-point match pattern.

    构建浮点数匹配正则。

    The pattern accepts either an all-integer form or a decimal form with
    up to ``int_digits`` digits before the point and up to ``scale`` after.
    正则接受纯整数形式，或小数点前至多 ``int_digits`` 位、小数点后至多
    ``scale`` 位的小数形式。

    Args:
        int_digits: Integer digit budget, or None for unbounded.
            整数位预算；None 表示无上限。
        scale: Fractional digit budget, or None for unbounded.
            小数位预算；None 表示无上限。

    Returns:
        str: Anchored alternation pattern.
            锚定的多选正则。

    Examples:
        >>> float_pattern(4, 2)
        '^-?(?:[0-9]{1,4}|[0-9]{0,4}\\\\.[0-9]{1,2})$'
    """
    bound = _bound(int_digits)
    return FLOAT_TEMPLATE % (bound, bound, _bound(scale))
