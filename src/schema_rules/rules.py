"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rules.py
@DateTime: 2026-03-02
@Docs: Rule and validator descriptors.
规则与校验器描述对象。

These are plain data sinks: the deriver fills them, downstream consumers
(code generators, runtime validation engines) read them.
这些只是数据容器：由推导器填充，由下游消费者读取。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schema_rules.schema import ColumnDescriptor


class RuleKind(str, Enum):
    """Rule kind / 规则类型。"""

    REQUIRED = "required"
    MAX_LENGTH = "maxLength"
    MATCH = "match"


@dataclass(frozen=True, slots=True)
class Rule:
    """One atomic validation check.

    单个原子校验规则。

    Attributes:
        kind: Rule kind.
            规则类型。
        message: Fully rendered error message.
            已渲染的错误消息。
        value: Max length (int) for maxLength, regex (str) for match, None otherwise.
            maxLength 为长度整数，match 为正则字符串，否则为 None。
    """

    kind: RuleKind
    message: str
    value: int | str | None = None


@dataclass(slots=True)
class Validator:
    """Ordered bundle of rules attached to one column.

    附着于单列的有序规则集合。

    Attributes:
        column: The validated column.
            被校验的列。
        rules: Rules in derivation order.
            按推导顺序排列的规则。
    """

    column: "ColumnDescriptor"
    rules: list[Rule] = field(default_factory=list)

    def rule_kinds(self) -> list[RuleKind]:
        """Return rule kinds in derivation order / 按推导顺序返回规则类型。"""
        return [rule.kind for rule in self.rules]

    def find(self, kind: RuleKind | str) -> list[Rule]:
        """Return rules of one kind, in order / 按顺序返回指定类型的规则。"""
        key = RuleKind(kind)
        return [rule for rule in self.rules if rule.kind is key]
