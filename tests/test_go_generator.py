"""Tests for the Go struct emitter."""

from dbstruct.codegen.core.config import GeneratorConfig, Tag
from dbstruct.codegen.core.naming import NamingCase
from dbstruct.codegen.core.schema import Column, GeneratedUnit
from dbstruct.codegen.languages.go.generator import GoGenerator


def field_lines(code):
    """Lines between ``struct {`` and the closing brace."""
    lines = code.splitlines()
    start = next(i for i, line in enumerate(lines) if line.endswith("struct {"))
    end = lines.index("}", start)
    return lines[start + 1 : end]


class TestGenerateSingleTable:
    """Test suite for GoGenerator.generate_single_table."""

    def test_per_file_struct(self, base_config, orders_columns):
        unit = GoGenerator(base_config).generate_single_table("orders", orders_columns)

        assert unit.name == "Orders"
        assert unit.table == "orders"
        assert unit.imports == frozenset({"time"})
        assert unit.code == (
            "package model\n"
            "\n"
            'import "time"\n'
            "\n"
            "type Orders struct {\n"
            'Id int `json:"id"`\n'
            'UserName string `json:"user_name"`\n'
            'CreatedAt time.Time `json:"created_at"`\n'
            "}\n"
        )

    def test_single_file_unit_has_no_package_clause(self, base_config, orders_columns):
        config = base_config.with_single_file()
        unit = GoGenerator(config).generate_single_table("orders", orders_columns)

        assert "package" not in unit.code
        assert "import" not in unit.code
        assert unit.code.startswith("type Orders struct {\n")
        assert unit.imports == frozenset({"time"})

    def test_tag_value_uses_raw_column_name(self, base_config):
        columns = [Column(name="user_name", type="varchar", nullable="NO", table="users")]
        unit = GoGenerator(base_config).generate_single_table("users", columns)

        (line,) = field_lines(unit.code)
        assert line.startswith("UserName string ")
        assert line.count('json:"') == 1
        assert 'json:"user_name"' in line

    def test_tags_in_configured_order_with_own_case(self, base_config):
        config = (
            base_config.append_tag(Tag("db", NamingCase.SNAKE_TO_CAMEL))
            .append_tag(Tag("xml", NamingCase.SNAKE_TO_PASCAL))
            .with_orm_tag()
        )
        columns = [Column(name="user_name", type="varchar", nullable="NO", table="users")]

        (line,) = field_lines(GoGenerator(config).generate_single_table("users", columns).code)

        assert line == 'UserName string `db:"userName" xml:"UserName" json:"user_name" orm:"user_name"`'

    def test_no_tags(self, base_config, orders_columns):
        config = base_config.with_json_tag(False)
        lines = field_lines(GoGenerator(config).generate_single_table("orders", orders_columns).code)

        assert lines == ["Id int", "UserName string", "CreatedAt time.Time"]

    def test_unchanged_names(self, tmp_path):
        config = GeneratorConfig(dsn="x", run_gofmt=False)
        columns = [Column(name="user_id", type="int", nullable="NO", table="order_items")]

        unit = GoGenerator(config).generate_single_table("order_items", columns)

        assert unit.name == "order_items"
        assert "type order_items struct {\nuser_id int\n}\n" in unit.code
        assert unit.imports == frozenset()
        assert "import" not in unit.code

    def test_camel_field_names(self, base_config):
        config = base_config.with_field_name_fmt(NamingCase.SNAKE_TO_CAMEL)
        columns = [Column(name="created_at", type="date", nullable="NO", table="t")]

        (line,) = field_lines(GoGenerator(config).generate_single_table("t", columns).code)

        assert line == 'createdAt time.Time `json:"created_at"`'

    def test_table_name_func(self, base_config, orders_columns):
        config = base_config.with_table_name_func("TableName")
        code = GoGenerator(config).generate_single_table("orders", orders_columns).code

        assert code.endswith(
            "}\n"
            "\n"
            "func (o *Orders) TableName() string {\n"
            '\treturn "orders"\n'
            "}\n"
        )

    def test_table_name_func_needs_flag(self, base_config, orders_columns):
        config = base_config.with_table_name_func("TableName", enabled=False)
        code = GoGenerator(config).generate_single_table("orders", orders_columns).code

        assert "func" not in code

    def test_table_name_func_needs_name(self, base_config, orders_columns):
        config = base_config.with_table_name_func("")
        code = GoGenerator(config).generate_single_table("orders", orders_columns).code

        assert "func" not in code

    def test_comments(self, base_config, orders_columns):
        config = base_config.with_comments()
        lines = field_lines(GoGenerator(config).generate_single_table("orders", orders_columns).code)

        assert lines[1] == "// buyer login"
        assert lines[2].startswith("UserName string")

    def test_comments_off_by_default(self, base_config, orders_columns):
        code = GoGenerator(base_config).generate_single_table("orders", orders_columns).code
        assert "//" not in code

    def test_unknown_type_becomes_string(self, base_config):
        columns = [Column(name="doc", type="json", nullable="YES", table="t")]
        (line,) = field_lines(GoGenerator(base_config).generate_single_table("t", columns).code)

        assert line.startswith("Doc string ")

    def test_type_override(self, base_config):
        config = base_config.with_type_override("json", "json.RawMessage")
        columns = [Column(name="doc", type="json", nullable="YES", table="t")]

        (line,) = field_lines(GoGenerator(config).generate_single_table("t", columns).code)

        assert line.startswith("Doc json.RawMessage ")

    def test_emit_returns_name_and_body(self, base_config, orders_columns):
        name, body = GoGenerator(base_config).emit("orders", orders_columns)

        assert name == "Orders"
        assert body.startswith("package model\n")


class TestRenderFile:
    """Test suite for GoGenerator.render_file."""

    def test_one_package_clause_and_merged_imports(self, base_config):
        generator = GoGenerator(base_config.with_single_file())
        units = [
            GeneratedUnit("A", "a", "type A struct {\n}\n", frozenset({"time"})),
            GeneratedUnit("B", "b", "type B struct {\n}\n", frozenset({"time", "encoding/json"})),
        ]

        assert generator.render_file(units) == (
            "package model\n"
            "\n"
            "import (\n"
            '\t"encoding/json"\n'
            '\t"time"\n'
            ")\n"
            "\n"
            "type A struct {\n"
            "}\n"
            "\n"
            "type B struct {\n"
            "}\n"
        )

    def test_without_imports(self, base_config):
        generator = GoGenerator(base_config.with_package_name("entity"))
        units = [GeneratedUnit("A", "a", "type A struct {\n}\n")]

        assert generator.render_file(units) == "package entity\n\ntype A struct {\n}\n"


class TestValidateTables:
    """Test suite for GoGenerator.validate_tables."""

    def test_clean_tables(self, base_config, orders_columns):
        assert GoGenerator(base_config).validate_tables({"orders": orders_columns}) == []

    def test_reports_unexported_tagged_fields(self, base_config, orders_columns):
        config = base_config.with_field_name_fmt(NamingCase.UNCHANGED)
        warnings = GoGenerator(config).validate_tables({"orders": orders_columns})

        assert len(warnings) == 3
        assert "Orders.user_name is unexported" in warnings[1]

    def test_reports_invalid_names(self, base_config):
        columns = [Column(name="2fa", type="int", nullable="NO", table="type")]
        config = base_config.with_struct_name_fmt(NamingCase.UNCHANGED)

        warnings = GoGenerator(config).validate_tables({"type": columns, "empty": []})

        assert any("invalid Go type name 'type'" in w for w in warnings)
        assert any("invalid Go field name '2fa'" in w for w in warnings)
        assert any("empty has no columns" in w for w in warnings)

    def test_reports_bad_package(self, base_config):
        warnings = GoGenerator(base_config.with_package_name("my-models")).validate_tables({})
        assert warnings and all(w.startswith("Invalid Go package name") for w in warnings)
