"""dbstruct: generate Go structs from a MySQL schema catalog."""

from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    NamingCase,
    QueryError,
    SchemaReader,
    Tag,
    WriteError,
    __version__,
    format_name,
    generate_models,
    load_config,
)

__all__ = [
    "ConfigError",
    "GenerationResult",
    "GeneratorConfig",
    "NamingCase",
    "QueryError",
    "SchemaReader",
    "Tag",
    "WriteError",
    "__version__",
    "format_name",
    "generate_models",
    "load_config",
]
