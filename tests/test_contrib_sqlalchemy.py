"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_contrib_sqlalchemy.py
@DateTime: 2026-03-04
@Docs: Tests for SQLAlchemy contrib adapters.
SQLAlchemy 适配层测试。
"""

import pytest

pytest.importorskip("sqlalchemy")
from sqlalchemy import (
    CHAR,
    CLOB,
    NUMERIC,
    REAL,
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Double,
    Enum,
    Float,
    Integer,
    LargeBinary,
    MetaData,
    Numeric,
    SmallInteger,
    String,
    Table,
    Text,
    TypeDecorator,
)
from sqlalchemy.dialects.postgresql import DOUBLE_PRECISION
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from schema_rules.contrib.sqlalchemy import (
    column_type_tag,
    derive_model_validators,
    get_column_descriptors,
    get_table_schema,
)
from schema_rules.deriver import apply_to_table
from schema_rules.exceptions import SchemaSourceError
from schema_rules.patterns import EMAIL_PATTERN
from schema_rules.rules import RuleKind
from schema_rules.types import ColumnType
from tests.conftest import matches


class Base(DeclarativeBase):
    """Declarative base / 声明式基类。"""


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    credit: Mapped[float | None] = mapped_column(Numeric(6, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=True)


class TrimmedString(TypeDecorator):
    impl = String
    cache_ok = True


class TestColumnTypeTag:
    """Tests for column_type_tag.
    column_type_tag 测试。
    """

    @pytest.mark.parametrize(
        ("sa_type", "expected"),
        [
            (Integer(), ColumnType.INTEGER),
            (SmallInteger(), ColumnType.SMALLINT),
            (BigInteger(), ColumnType.BIGINT),
            (Float(), ColumnType.FLOAT),
            (Numeric(10, 2), ColumnType.DECIMAL),
            (String(10), ColumnType.VARCHAR),
            (Text(), ColumnType.LONGVARCHAR),
            (Boolean(), ColumnType.BOOLEAN),
            (DateTime(), ColumnType.TIMESTAMP),
            (Double(), ColumnType.DOUBLE),
            (DOUBLE_PRECISION(), ColumnType.DOUBLE),
            (REAL(), ColumnType.REAL),
            (NUMERIC(8, 3), ColumnType.NUMERIC),
            (CHAR(3), ColumnType.CHAR),
            (CLOB(), ColumnType.CLOB),
            (Enum("draft", "published", name="status"), ColumnType.ENUM),
            (LargeBinary(), ColumnType.LONGVARBINARY),
        ],
    )
    def test_mapping(self, sa_type: object, expected: ColumnType) -> None:
        assert column_type_tag(sa_type) is expected

    def test_type_decorator_uses_impl(self) -> None:
        assert column_type_tag(TrimmedString(20)) is ColumnType.VARCHAR

    def test_unmapped(self) -> None:
        assert column_type_tag(object()) is None


class TestGetColumnDescriptors:
    """Tests for get_column_descriptors.
    get_column_descriptors 测试。
    """

    def test_model_columns(self) -> None:
        cols = {c.name: c for c in get_column_descriptors(Customer)}
        assert list(cols) == ["id", "name", "email", "credit", "notes", "active"]
        assert cols["id"].nullable is False
        assert cols["name"].size == 100
        assert cols["credit"].type is ColumnType.DECIMAL
        assert (cols["credit"].size, cols["credit"].scale) == (6, 2)
        assert cols["notes"].size is None

    def test_plain_table(self) -> None:
        table = Table("t", MetaData(), Column("code", String(4), nullable=False))
        (col,) = get_column_descriptors(table)
        assert (col.name, col.type, col.nullable, col.size) == ("code", ColumnType.VARCHAR, False, 4)

    def test_fixed_width_and_numeric_sizes(self) -> None:
        """CHAR keeps its length, NUMERIC its precision/scale / CHAR 保留长度，NUMERIC 保留精度与小数位。"""
        table = Table("t", MetaData(), Column("code", CHAR(3)), Column("rate", NUMERIC(8, 3)))
        code, rate = get_column_descriptors(table)
        assert (code.type, code.size) == (ColumnType.CHAR, 3)
        assert (rate.type, rate.size, rate.scale) == (ColumnType.NUMERIC, 8, 3)

    def test_float_precision_not_a_digit_budget(self) -> None:
        """Float precision is ignored, giving the unbounded float pattern / Float 精度不作为位数预算。"""
        table = Table("t", MetaData(), Column("ratio", Float(precision=10)))
        (col,) = get_column_descriptors(table)
        assert (col.type, col.size, col.scale) == (ColumnType.FLOAT, None, None)
        (validator,) = derive_model_validators(table)
        assert validator.rules[0].value == r"^-?(?:[0-9]{1,}|[0-9]{0,}\.[0-9]{1,})$"

    def test_type_decorator_size(self) -> None:
        table = Table("t", MetaData(), Column("slug", TrimmedString(20)))
        assert get_column_descriptors(table)[0].size == 20

    def test_missing_table_raises(self) -> None:
        with pytest.raises(SchemaSourceError):
            get_column_descriptors(object())


class TestDeriveModelValidators:
    """Tests for derive_model_validators.
    derive_model_validators 测试。
    """

    def test_customer(self) -> None:
        validators = {v.column.name: v for v in derive_model_validators(Customer)}
        assert list(validators) == ["id", "name", "email", "credit"]
        assert validators["id"].rule_kinds() == [RuleKind.REQUIRED, RuleKind.MATCH]
        assert validators["name"].rules[1].value == 100
        assert validators["email"].rule_kinds() == [RuleKind.MAX_LENGTH, RuleKind.MATCH]
        assert validators["email"].rules[1].value == EMAIL_PATTERN
        credit = validators["credit"].rules[0].value
        assert isinstance(credit, str)
        assert matches(credit, "1234.56")
        assert not matches(credit, "12345.6")

    def test_get_table_schema(self) -> None:
        table = get_table_schema(Customer)
        assert table.name == "customers"
        apply_to_table(table, {"required_message": "${colname}!"})
        name_validator = table.get_validator("name")
        assert name_validator is not None
        assert name_validator.rules[0].message == "Name!"
