# src/itemstream/plugins/adapters/sql_adapter.py
"""SQL table source adapter.

Reads rows from a database table in a stable order using SQLAlchemy Core.
Restarts are cheap: advance() re-issues the query with an OFFSET instead
of fetching and discarding rows.
"""

import logging
from typing import Any

from sqlalchemy import Column, Connection, CursorResult, MetaData, Table, func, select
from sqlalchemy.engine import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError

from itemstream.contracts import (
    CloseError,
    EndOfInput,
    OpenError,
    SourceError,
    StreamStateError,
)
from itemstream.plugins.base import BaseSourceAdapter
from itemstream.plugins.config_base import PluginConfig

logger = logging.getLogger(__name__)


class SQLAdapterConfig(PluginConfig):
    """Configuration for the SQL table adapter."""

    url: str
    table: str
    order_by: str


class SQLTableSourceAdapter(BaseSourceAdapter):
    """Read rows of a table as dicts, ordered by a column.

    Config options:
        url: SQLAlchemy connection URL (required)
        table: Table name (required)
        order_by: Column defining the read order (required). Must give a
            stable order across runs or resumed reads will not line up.
    """

    name = "sql"
    plugin_version = "1.0.0"

    def __init__(self, config: dict[str, Any]) -> None:
        super().__init__(config)
        cfg = SQLAdapterConfig.from_dict(config)
        self._url = cfg.url
        self._table_name = cfg.table
        self._order_by = cfg.order_by
        self._engine: Engine | None = None
        self._conn: Connection | None = None
        self._table: Table | None = None
        self._order_column: Column[Any] | None = None
        self._result: CursorResult[Any] | None = None
        self._position = 0

    def open(self) -> None:
        """Connect, reflect the table and start the ordered query.

        Raises:
            OpenError: If the database, table or order column is unavailable.
        """
        try:
            self._engine = create_engine(self._url, echo=False)
            self._table = Table(
                self._table_name, MetaData(), autoload_with=self._engine
            )
            if self._order_by not in self._table.c:
                raise OpenError(
                    f"Column {self._order_by!r} not found in table {self._table_name!r}"
                )
            self._order_column = self._table.c[self._order_by]
            self._conn = self._engine.connect()
            self._execute_from(0)
        except SQLAlchemyError as e:
            self._release()
            raise OpenError(f"Cannot read table {self._table_name!r}: {e}") from e
        except OpenError:
            self._release()
            raise

    def next_item(self) -> dict[str, Any]:
        result = self._require_result()
        try:
            row = result.fetchone()
        except SQLAlchemyError as e:
            raise SourceError(
                f"Failed fetching row {self._position + 1} of {self._table_name!r}: {e}"
            ) from e
        if row is None:
            raise EndOfInput()
        self._position += 1
        return dict(row._mapping)

    def advance(self, count: int) -> None:
        """Re-issue the query starting ``count`` rows further on.

        Raises:
            EndOfInput: If fewer than ``count`` rows remain.
            SourceError: If the database query fails.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._require_result()
        assert self._conn is not None and self._table is not None
        target = self._position + count
        try:
            total = self._conn.execute(
                select(func.count()).select_from(self._table)
            ).scalar_one()
            if target > total:
                self._execute_from(total)
                raise EndOfInput()
            self._execute_from(target)
        except SQLAlchemyError as e:
            raise SourceError(
                f"Failed positioning {self._table_name!r} at row {target}: {e}"
            ) from e

    def close(self) -> None:
        try:
            self._release()
        except SQLAlchemyError as e:
            raise CloseError(f"Failed closing {self._table_name!r}: {e}") from e

    def _execute_from(self, offset: int) -> None:
        assert self._conn is not None and self._table is not None
        assert self._order_column is not None
        if self._result is not None:
            self._result.close()
        query = select(self._table).order_by(self._order_column)
        if offset:
            query = query.offset(offset)
        self._result = self._conn.execute(query)
        self._position = offset
        logger.debug("Reading %s from offset %d", self._table_name, offset)

    def _require_result(self) -> CursorResult[Any]:
        if self._result is None:
            raise StreamStateError(f"SQL adapter for {self._table_name!r} is not open")
        return self._result

    def _release(self) -> None:
        result, self._result = self._result, None
        conn, self._conn = self._conn, None
        engine, self._engine = self._engine, None
        self._table = None
        self._order_column = None
        self._position = 0
        if result is not None:
            result.close()
        if conn is not None:
            conn.close()
        if engine is not None:
            engine.dispose()
