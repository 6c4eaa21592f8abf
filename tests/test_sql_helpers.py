from __future__ import annotations

import pytest

from jobly.errors import BadRequestError
from jobly.helpers.sql import (
    ClauseBuilder,
    quote_identifier,
    sql_for_company_filter,
    sql_for_job_filter,
    sql_for_partial_update,
)
from jobly.schemas.company import CompanyFilter
from jobly.schemas.job import JobFilter


def test_partial_update_maps_and_numbers_columns() -> None:
    result = sql_for_partial_update({"firstName": "John", "age": 30}, {"firstName": "first_name"})
    assert result.clause == '"first_name"=$1, "age"=$2'
    assert result.values == ["John", 30]


def test_partial_update_without_mappings_uses_keys() -> None:
    clause, values = sql_for_partial_update({"firstName": "John", "age": 30}, {})
    assert clause == '"firstName"=$1, "age"=$2'
    assert values == ["John", 30]


def test_partial_update_single_field() -> None:
    clause, values = sql_for_partial_update({"title": "Job 1"}, {"salary": "salary"})
    assert clause == '"title"=$1'
    assert values == ["Job 1"]


def test_partial_update_handles_reserved_words() -> None:
    clause, values = sql_for_partial_update({"order": "ASC"}, {"order": '"order"'})
    assert clause == '"order"=$1'
    assert values == ["ASC"]


def test_partial_update_keeps_insertion_order() -> None:
    data = {"zeta": 1, "alpha": None, "mid": [1, 2]}
    clause, values = sql_for_partial_update(data, {})
    assert clause == '"zeta"=$1, "alpha"=$2, "mid"=$3'
    assert values == [1, None, [1, 2]]


def test_partial_update_one_term_per_key() -> None:
    data = {f"col{i}": i for i in range(12)}
    clause, values = sql_for_partial_update(data, {})
    terms = clause.split(", ")
    assert len(terms) == len(data)
    assert terms[-1] == '"col11"=$12'
    assert values == list(range(12))


@pytest.mark.parametrize("field_map", [{}, {"firstName": "first_name"}])
def test_partial_update_rejects_empty_payload(field_map) -> None:
    with pytest.raises(BadRequestError):
        sql_for_partial_update({}, field_map)


def test_quote_identifier_escapes_embedded_quotes() -> None:
    assert quote_identifier("title") == '"title"'
    assert quote_identifier('"order"') == '"order"'
    assert quote_identifier('we"ird') == '"we""ird"'


def test_clause_builder_numbers_only_bound_terms() -> None:
    builder = ClauseBuilder("WHERE 1=1")
    builder.add("a = {}", 1).add("b > 0").add("c = {}", "x")
    assert builder.build(" AND ") == ("WHERE 1=1 AND a = $1 AND b > 0 AND c = $2", [1, "x"])


def test_job_filter_without_criteria() -> None:
    assert sql_for_job_filter(JobFilter()) == ("WHERE 1=1", [])


def test_job_filter_title_is_case_insensitive_substring() -> None:
    clause, values = sql_for_job_filter(JobFilter(title="engineer"))
    assert clause == "WHERE 1=1 AND LOWER(title) LIKE LOWER($1)"
    assert values == ["%engineer%"]


def test_job_filter_min_salary_only() -> None:
    clause, values = sql_for_job_filter(JobFilter(min_salary=60000))
    assert clause == "WHERE 1=1 AND salary >= $1"
    assert values == [60000]


def test_job_filter_zero_min_salary_is_a_constraint() -> None:
    assert sql_for_job_filter(JobFilter(min_salary=0)) == ("WHERE 1=1 AND salary >= $1", [0])


def test_job_filter_has_equity_adds_no_parameter() -> None:
    clause, values = sql_for_job_filter(JobFilter(has_equity=True))
    assert clause == "WHERE 1=1 AND equity > 0"
    assert values == []


def test_job_filter_has_equity_false_requires_non_null_equity() -> None:
    assert sql_for_job_filter(JobFilter(has_equity=False)) == ("WHERE 1=1 AND equity IS NOT NULL", [])


def test_job_filter_combines_all_criteria() -> None:
    clause, values = sql_for_job_filter(JobFilter(title="Job", min_salary=50000, has_equity=True))
    assert clause == "WHERE 1=1 AND LOWER(title) LIKE LOWER($1) AND salary >= $2 AND equity > 0"
    assert values == ["%Job%", 50000]


def test_company_filter_all_criteria() -> None:
    clause, values = sql_for_company_filter(CompanyFilter(name="net", min_employees=10, max_employees=500))
    assert clause == (
        "WHERE 1=1 AND LOWER(name) LIKE LOWER($1) AND num_employees >= $2 AND num_employees <= $3"
    )
    assert values == ["%net%", 10, 500]


def test_company_filter_rejects_inverted_range() -> None:
    with pytest.raises(BadRequestError):
        sql_for_company_filter(CompanyFilter(min_employees=10, max_employees=5))
