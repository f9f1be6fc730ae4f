"""
Go type system for struct generation.

Maps MySQL catalog data types (information_schema.COLUMNS.DATA_TYPE) to
Go types. The lookup is an exact, case-sensitive match; anything not in
the table becomes a string so unknown column types never stop a run.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Set

DEFAULT_GO_TYPE = "string"

TIME_TYPE = "time.Time"

GO_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "int": "int",
        "integer": "int",
        # Narrow and unsigned widths all widen to int64 so no value overflows
        "tinyint": "int64",
        "smallint": "int64",
        "mediumint": "int64",
        "bigint": "int64",
        "int unsigned": "int64",
        "integer unsigned": "int64",
        "tinyint unsigned": "int64",
        "smallint unsigned": "int64",
        "mediumint unsigned": "int64",
        "bigint unsigned": "int64",
        "bit": "int64",
        "float": "float64",
        "double": "float64",
        "decimal": "float64",
        "binary": "string",
        "varbinary": "string",
        "enum": "string",
        "set": "string",
        "varchar": "string",
        "char": "string",
        "tinytext": "string",
        "mediumtext": "string",
        "text": "string",
        "longtext": "string",
        "blob": "string",
        "tinyblob": "string",
        "mediumblob": "string",
        "longblob": "string",
        "bool": "bool",
        "date": TIME_TYPE,
        "datetime": TIME_TYPE,
        "timestamp": TIME_TYPE,
        "time": TIME_TYPE,
    }
)

# Go packages a type needs imported
TYPE_IMPORTS: Mapping[str, str] = MappingProxyType({TIME_TYPE: "time"})


def map_type(db_type: str) -> str:
    """Return the Go type for a catalog data type, ``string`` if unknown."""
    return GO_TYPE_MAP.get(db_type, DEFAULT_GO_TYPE)


@dataclass(frozen=True)
class GoType:
    """A mapped Go type and the imports it requires."""

    name: str
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)


class GoTypeMapper:
    """
    Maps catalog types to Go types.

    ``type_overrides`` take precedence over the built-in table and are
    matched the same way (exact, case-sensitive).
    """

    def __init__(self, type_overrides: Optional[Mapping[str, str]] = None):
        self.type_overrides = dict(type_overrides or {})

    def map_type(self, db_type: str) -> GoType:
        name = self.type_overrides.get(db_type) or map_type(db_type)
        package = TYPE_IMPORTS.get(name)
        return GoType(name=name, imports_needed=frozenset({package}) if package else frozenset())

    def get_all_imports(self, go_types: Iterable[GoType]) -> Set[str]:
        """Collect every import needed by the given types."""
        imports: Set[str] = set()
        for go_type in go_types:
            imports.update(go_type.imports_needed)
        return imports
