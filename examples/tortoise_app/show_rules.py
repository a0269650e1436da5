"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: show_rules.py
@DateTime: 2026-03-05
@Docs: Print the validators derived from the Tortoise Device model.
打印 Tortoise Device 模型推导出的校验器。

Run / 运行:
    python -m examples.tortoise_app.show_rules
"""

from schema_rules.contrib.tortoise import derive_model_validators

from .models import Device


def main() -> None:
    for validator in derive_model_validators(Device):
        kinds = ", ".join(kind.value for kind in validator.rule_kinds())
        print(f"{validator.column.name}: {kinds}")


if __name__ == "__main__":
    main()
