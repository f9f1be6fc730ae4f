"""
Data structures passed between the catalog reader and the generators.
"""

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Column:
    """One row of information_schema.COLUMNS."""

    name: str
    type: str
    nullable: str
    table: str
    comment: str = ""

    @property
    def is_nullable(self) -> bool:
        return self.nullable.upper() == "YES"


@dataclass(frozen=True)
class GeneratedUnit:
    """
    Generated source for a single table.

    ``code`` holds the type definition (with its own package header in
    per-file mode); ``imports`` lists the import paths it relies on so the
    single-file writer can merge them.
    """

    name: str
    table: str
    code: str
    imports: FrozenSet[str] = field(default_factory=frozenset)
