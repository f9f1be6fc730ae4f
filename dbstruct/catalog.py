"""Catalog reader for MySQL-compatible databases.

Reads column metadata from ``information_schema.COLUMNS`` for the
database the connection points at and groups it by table.
"""

from typing import Dict, List, Sequence

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from .codegen.core.schema import Column
from .logging_config import get_logger

logger = get_logger(__name__)

COLUMNS_QUERY = """\
SELECT COLUMN_NAME, DATA_TYPE, IS_NULLABLE, TABLE_NAME, COLUMN_COMMENT
FROM information_schema.COLUMNS
WHERE table_schema = DATABASE(){table_filter}
ORDER BY TABLE_NAME ASC"""

TABLE_FILTER = " AND TABLE_NAME IN :tables"


class QueryError(Exception):
    """Raised when the catalog cannot be reached or queried."""

    pass


def create_catalog_engine(dsn: str) -> Engine:
    """Create a SQLAlchemy engine for a DSN.

    Args:
        dsn: SQLAlchemy URL, e.g. ``mysql+pymysql://user:pw@host/db``.

    Raises:
        QueryError: If the URL is malformed or its driver is missing.
    """
    try:
        return create_engine(dsn)
    except (ArgumentError, ImportError) as e:
        logger.error("Cannot create engine for DSN: %s", e)
        raise QueryError(f"Cannot create database engine: {e}") from e


def build_columns_query(allow_list: Sequence[str] = ()):
    """Build the catalog query, restricted to ``allow_list`` when non-empty.

    Table names are bound as an expanding parameter, never pasted into
    the SQL text.
    """
    if not allow_list:
        return text(COLUMNS_QUERY.format(table_filter=""))

    return text(COLUMNS_QUERY.format(table_filter=TABLE_FILTER)).bindparams(
        bindparam("tables", expanding=True)
    )


class SchemaReader:
    """Lists the tables and columns visible through one engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def list_tables(self, allow_list: Sequence[str] = ()) -> Dict[str, List[Column]]:
        """Return columns grouped by table name.

        Tables come back in ascending name order; columns keep the order
        the catalog returned them in.

        Args:
            allow_list: Table names to restrict to (empty means all).

        Returns:
            Mapping of table name to its columns.

        Raises:
            QueryError: If the connection or query fails.
        """
        allow_list = list(allow_list)
        statement = build_columns_query(allow_list)
        params = {"tables": allow_list} if allow_list else {}

        logger.debug("Reading catalog (tables=%s)", allow_list or "all")

        try:
            with self.engine.connect() as connection:
                rows = connection.execute(statement, params).fetchall()
        except SQLAlchemyError as e:
            logger.error("Catalog query failed: %s", e)
            raise QueryError(f"Failed to read table metadata: {e}") from e

        tables: Dict[str, List[Column]] = {}
        for name, data_type, nullable, table, comment in rows:
            column = Column(
                name=name,
                type=data_type,
                nullable=nullable,
                table=table,
                comment=comment or "",
            )
            tables.setdefault(table, []).append(column)

        logger.info("Read %d column(s) across %d table(s)", len(rows), len(tables))

        missing = [name for name in allow_list if name not in tables]
        if missing:
            logger.warning("Requested tables not found: %s", ", ".join(missing))

        return tables
