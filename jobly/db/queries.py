from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from jobly.database import engine


logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    pass


class DatabaseQueryError(RuntimeError):
    pass


@dataclass(frozen=True)
class ExecuteResult:
    rowcount: int
    lastrowid: Any = None


_POSITIONAL_PARAM_RE = re.compile(r"\$(\d+)")


def _compile_positional_params(sql: str, values: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite `$1, $2, ...` placeholders into bound parameters.

    `$n` refers to `values[n - 1]`, so fragments built with `jobly.helpers.sql`
    can be embedded in hand-written statements and executed on any backend
    SQLAlchemy supports. Values are always bound, never formatted into SQL.
    """

    params: dict[str, Any] = {}

    def repl(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise DatabaseQueryError(f"Missing SQL parameter: ${index}")
        name = f"p{index}"
        params[name] = values[index - 1]
        return f":{name}"

    compiled_sql = _POSITIONAL_PARAM_RE.sub(repl, sql)
    return compiled_sql, params


def query(sql: str, values: Sequence[Any] | None = None) -> list[dict[str, Any]]:
    """Run a SELECT query and return rows as dicts."""

    compiled_sql, params = _compile_positional_params(sql, list(values or []))
    try:
        with engine.connect() as conn:
            result = conn.execute(text(compiled_sql), params)
            return [dict(row) for row in result.mappings()]
    except OperationalError as exc:
        logger.warning("database unavailable: %s", type(exc).__name__)
        raise DatabaseConnectionError("Database unavailable") from exc
    except SQLAlchemyError as exc:
        logger.warning("query failed: %s", type(exc).__name__)
        raise DatabaseQueryError("Database query failed") from exc


def query_one(sql: str, values: Sequence[Any] | None = None) -> dict[str, Any] | None:
    rows = query(sql, values)
    return rows[0] if rows else None


def execute(sql: str, values: Sequence[Any] | None = None) -> ExecuteResult:
    """Run a write statement in its own transaction."""

    compiled_sql, params = _compile_positional_params(sql, list(values or []))
    try:
        with engine.begin() as conn:
            result = conn.execute(text(compiled_sql), params)
            return ExecuteResult(rowcount=result.rowcount, lastrowid=getattr(result, "lastrowid", None))
    except OperationalError as exc:
        logger.warning("database unavailable: %s", type(exc).__name__)
        raise DatabaseConnectionError("Database unavailable") from exc
    except SQLAlchemyError as exc:
        logger.warning("statement failed: %s", type(exc).__name__)
        raise DatabaseQueryError("Database statement failed") from exc
