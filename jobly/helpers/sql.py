"""Builders for parameterized SQL fragments.

Fragments use `$n` positional placeholders and carry their values separately;
nothing here touches the database. A caller embeds ``fragment.clause`` in a
hand-written statement and passes ``fragment.values`` (plus any trailing
parameters of its own) to `jobly.db.queries`.
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from jobly.errors import BadRequestError
from jobly.schemas.company import CompanyFilter
from jobly.schemas.job import JobFilter


class SqlFragment(NamedTuple):
    clause: str
    values: list[Any]


_NO_VALUE = object()


class ClauseBuilder:
    """Ordered list of SQL terms, each optionally bound to one value.

    A term's template may contain a single ``{}``, which is replaced by the
    next positional placeholder when the term has a value. Placeholder
    numbering follows the order terms are added.
    """

    def __init__(self, *terms: str) -> None:
        self._terms: list[str] = list(terms)
        self._values: list[Any] = []

    def add(self, template: str, value: Any = _NO_VALUE) -> "ClauseBuilder":
        if value is _NO_VALUE:
            self._terms.append(template)
        else:
            self._values.append(value)
            self._terms.append(template.replace("{}", f"${len(self._values)}", 1))
        return self

    def build(self, separator: str) -> SqlFragment:
        return SqlFragment(separator.join(self._terms), list(self._values))


def quote_identifier(name: str) -> str:
    """Quote a column name; names that arrive already quoted are kept as-is."""

    if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
        return name
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(data: Mapping[str, Any], field_map: Mapping[str, str]) -> SqlFragment:
    """Build the SET clause for updating only the supplied fields.

    `field_map` maps payload keys to column names; unmapped keys are used as
    column names directly.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        SqlFragment(clause='"first_name"=$1, "age"=$2', values=['Aliya', 32])

    The row identifier of the surrounding UPDATE goes at ``$len(values) + 1``.

    Raises BadRequestError when `data` is empty.
    """

    if not data:
        raise BadRequestError("No data")

    builder = ClauseBuilder()
    for key, value in data.items():
        column = quote_identifier(field_map.get(key, key))
        builder.add(column + "={}", value)
    return builder.build(", ")


def sql_for_job_filter(criteria: JobFilter) -> SqlFragment:
    """Build a WHERE clause for the optional job search criteria.

    `has_equity=False` keeps jobs whose equity is set at all (`IS NOT NULL`),
    it does not select zero-equity jobs.
    """

    builder = ClauseBuilder("WHERE 1=1")
    if criteria.title:
        builder.add("LOWER(title) LIKE LOWER({})", f"%{criteria.title}%")
    if criteria.min_salary is not None:
        builder.add("salary >= {}", criteria.min_salary)
    if criteria.has_equity is True:
        builder.add("equity > 0")
    elif criteria.has_equity is False:
        builder.add("equity IS NOT NULL")
    return builder.build(" AND ")


def sql_for_company_filter(criteria: CompanyFilter) -> SqlFragment:
    if (
        criteria.min_employees is not None
        and criteria.max_employees is not None
        and criteria.min_employees > criteria.max_employees
    ):
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    builder = ClauseBuilder("WHERE 1=1")
    if criteria.name:
        builder.add("LOWER(name) LIKE LOWER({})", f"%{criteria.name}%")
    if criteria.min_employees is not None:
        builder.add("num_employees >= {}", criteria.min_employees)
    if criteria.max_employees is not None:
        builder.add("num_employees <= {}", criteria.max_employees)
    return builder.build(" AND ")
