"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: show_rules.py
@DateTime: 2026-03-05
@Docs: Print the validators derived from the Device model.
打印 Device 模型推导出的校验器。

Run / 运行:
    python -m examples.sqlalchemy_app.show_rules
"""

from schema_rules.contrib.sqlalchemy import get_table_schema
from schema_rules.deriver import RuleDeriver

from .models import Device


def main() -> None:
    table = get_table_schema(Device)
    RuleDeriver({"required_message": "${colname} must not be empty"}).modify_table(table)
    for validator in table.validators:
        print(validator.column.name)
        for rule in validator.rules:
            value = "" if rule.value is None else f" [{rule.value}]"
            print(f"  {rule.kind.value}{value}: {rule.message}")


if __name__ == "__main__":
    main()
