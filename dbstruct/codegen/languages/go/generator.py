"""
Go code generator implementation.

Renders one Go struct per table, with optional struct tags and an
optional method returning the table name.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from ...core.config import GeneratorConfig, Tag
from ...core.generator import CodeGenerator
from ...core.naming import format_name
from ...core.schema import Column, GeneratedUnit
from ...core.templates import TemplateEngine
from .naming import is_exported, is_valid_go_identifier, validate_go_package_name
from .types import GoType, GoTypeMapper

# Built-in templates. The engine runs with trim_blocks/lstrip_blocks, so a
# line holding only a block tag renders nothing.
GO_STRUCT_TEMPLATE = """\
{% if package_name %}
package {{ package_name }}

{% if imports %}
{{ imports }}

{% endif %}
{% endif %}
type {{ struct_name }} struct {
{% for field in fields %}
{% if field.comment %}
{{ field.comment|comment }}
{% endif %}
{{ field.name }} {{ field.type }}{{ field.tag }}
{% endfor %}
}
{% if table_name_func %}

func ({{ receiver }} *{{ struct_name }}) {{ table_name_func }}() string {
{{ indent }}return "{{ table_name }}"
}
{% endif %}
"""

GO_FILE_TEMPLATE = """\
package {{ package_name }}

{% if imports %}
{{ imports }}

{% endif %}
{{ body }}
"""


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with struct tags."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        self.package_name = self.config.package_name
        self.tags = self.config.effective_tags()
        self.type_mapper = GoTypeMapper(self.config.type_overrides)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def register_templates(self, engine: TemplateEngine):
        engine.add_template("struct.go.j2", GO_STRUCT_TEMPLATE)
        engine.add_template("file.go.j2", GO_FILE_TEMPLATE)

    def generate_single_table(self, table: str, columns: List[Column]) -> GeneratedUnit:
        """Generate the Go struct for one table."""
        struct_name = format_name(table, self.config.struct_name_fmt)

        fields = []
        go_types = []
        for column in columns:
            field_data, go_type = self._generate_field_data(column)
            fields.append(field_data)
            go_types.append(go_type)

        imports = frozenset(self.type_mapper.get_all_imports(go_types))

        # A single combined file gets one package header from render_file
        per_file = not self.config.single_file

        context = {
            "package_name": self.package_name if per_file else "",
            "imports": self._render_imports(imports) if per_file else "",
            "struct_name": struct_name,
            "fields": fields,
            "table_name_func": self.config.table_name_func
            if self.config.emits_table_name_func
            else "",
            "receiver": struct_name[:1].lower() or "t",
            "table_name": table,
            "indent": "\t",
        }

        code = self.render_template("struct.go.j2", context)
        return GeneratedUnit(name=struct_name, table=table, code=code, imports=imports)

    def _generate_field_data(self, column: Column) -> tuple[Dict[str, Any], GoType]:
        """Build the template data for one struct field."""
        go_type = self.type_mapper.map_type(column.type)

        field_data = {
            "name": format_name(column.name, self.config.field_name_fmt),
            "type": go_type.name,
            "tag": self._render_tags(column),
            "comment": column.comment if self.config.add_comments else "",
        }
        return field_data, go_type

    def _render_tags(self, column: Column) -> str:
        """Render the struct tag for a column, e.g. `` `json:"id" orm:"id"` ``."""
        if not self.tags:
            return ""

        # Tag values come from the raw column name, not the field name
        clauses = [self._render_tag_clause(tag, column.name) for tag in self.tags]
        return " `" + " ".join(clauses) + "`"

    @staticmethod
    def _render_tag_clause(tag: Tag, column_name: str) -> str:
        return f'{tag.name}:"{format_name(column_name, tag.case)}"'

    def render_file(self, units: Iterable[GeneratedUnit]) -> str:
        """Combine units into one Go file with a single package clause."""
        units = list(units)
        imports = frozenset().union(*(unit.imports for unit in units))

        context = {
            "package_name": self.package_name,
            "imports": self._render_imports(imports),
            "body": "\n".join(unit.code for unit in units),
        }
        return self.render_template("file.go.j2", context).rstrip("\n") + "\n"

    def _render_imports(self, imports: Iterable[str]) -> str:
        return "\n".join(self.get_import_statements(imports))

    def get_import_statements(self, imports: Iterable[str]) -> List[str]:
        """Format import paths as a Go import clause."""
        imports = sorted(imports)
        if not imports:
            return []

        if len(imports) == 1:
            return [f'import "{imports[0]}"']

        lines = ["import ("]
        for imp in imports:
            lines.append(f'\t"{imp}"')
        lines.append(")")
        return lines

    def validate_tables(self, tables: Mapping[str, List[Column]]) -> List[str]:
        """
        Report names that would not compile or would not serialize.

        Names are never changed; the warnings only point at them.
        """
        warnings = [f"Invalid Go package name: {error}" for error in validate_go_package_name(self.package_name)]

        for table, columns in tables.items():
            struct_name = format_name(table, self.config.struct_name_fmt)
            if not is_valid_go_identifier(struct_name):
                warnings.append(f"Table {table} produces invalid Go type name '{struct_name}'")

            if not columns:
                warnings.append(f"Table {table} has no columns - will generate empty struct")

            for column in columns:
                field_name = format_name(column.name, self.config.field_name_fmt)
                if not is_valid_go_identifier(field_name):
                    warnings.append(f"Column {table}.{column.name} produces invalid Go field name '{field_name}'")
                elif self.tags and not is_exported(field_name):
                    warnings.append(
                        f"Field {struct_name}.{field_name} is unexported; encoders will ignore its tags"
                    )

        return warnings
