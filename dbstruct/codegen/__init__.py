"""
dbstruct code generation module

Generates Go structs from database catalog metadata.
"""

from pathlib import Path
from typing import Callable, Dict, Optional

from sqlalchemy.engine import Engine

from ..catalog import QueryError, SchemaReader, create_catalog_engine
from ..logging_config import get_logger
from .core.config import ConfigError, GeneratorConfig, Tag, load_config
from .core.generator import CodeGenerator, GenerationResult, GeneratorError
from .core.naming import NamingCase, format_name
from .core.schema import Column, GeneratedUnit
from .languages.go.generator import GoGenerator
from .output import OutputManager, WriteError

logger = get_logger(__name__)

CollisionHook = Callable[[str, str, str], None]


def generate_units(
    generator: CodeGenerator,
    tables: Dict[str, list],
    on_collision: Optional[CollisionHook] = None,
    result: Optional[GenerationResult] = None,
) -> GenerationResult:
    """
    Generate one unit per table.

    Units are keyed by type name. When two tables format to the same type
    name the later table replaces the earlier one; the collision is logged,
    added to the result warnings and passed to ``on_collision`` as
    ``(type_name, previous_table, table)``.
    """
    result = result or GenerationResult()

    for table, columns in tables.items():
        unit = generator.generate_single_table(table, columns)

        previous = result.units.get(unit.name)
        if previous is not None:
            message = (
                f"Type name '{unit.name}' from table {table} overwrites the one "
                f"generated for table {previous.table}"
            )
            logger.warning(message)
            result.warnings.append(message)
            if on_collision is not None:
                on_collision(unit.name, previous.table, table)

        result.units[unit.name] = unit

    return result


def generate_models(
    config: GeneratorConfig,
    engine: Optional[Engine] = None,
    on_collision: Optional[CollisionHook] = None,
    cwd: Optional[Path] = None,
) -> GenerationResult:
    """
    Read the catalog and write Go structs for every table.

    Args:
        config: Generation settings
        engine: Engine to query; created from ``config.dsn`` when omitted
        on_collision: Called when two tables map to the same type name
        cwd: Base directory for the default output path

    Returns:
        GenerationResult with generated units, written and failed paths

    Raises:
        ConfigError: If the DSN is missing
        QueryError: If the catalog cannot be read
        WriteError: If output cannot be written (per-table write failures
            are recorded on the result instead)
    """
    config.validate()

    owns_engine = engine is None
    if owns_engine:
        engine = create_catalog_engine(config.dsn)

    try:
        tables = SchemaReader(engine).list_tables(config.tables)
    finally:
        if owns_engine:
            engine.dispose()

    generator = GoGenerator(config)
    result = GenerationResult(warnings=generator.validate_tables(tables))
    for warning in result.warnings:
        logger.warning(warning)

    generate_units(generator, tables, on_collision, result)
    logger.info("Generated %d struct(s) from %d table(s)", len(result.units), len(tables))

    OutputManager(generator, config, cwd=cwd).write(result.units, result)

    if result.failed:
        logger.warning(
            "%d of %d file(s) could not be written",
            len(result.failed),
            len(result.failed) + len(result.written),
        )

    return result


# Version info
__version__ = "0.1.0"

__all__ = [
    "CodeGenerator",
    "Column",
    "ConfigError",
    "GeneratedUnit",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "GoGenerator",
    "NamingCase",
    "OutputManager",
    "QueryError",
    "SchemaReader",
    "Tag",
    "WriteError",
    "format_name",
    "generate_models",
    "generate_units",
    "load_config",
]
