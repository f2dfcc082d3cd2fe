"""Tests for the job listing query builder."""

from jobboard.models.job import sql_for_job_filters

BASE = 'SELECT id, title, salary, equity, company_handle AS "companyHandle" FROM jobs'


def test_no_filters():
    assert sql_for_job_filters() == (f"{BASE} ORDER BY id", [])
    assert sql_for_job_filters({}) == (f"{BASE} ORDER BY id", [])


def test_min_salary():
    sql, values = sql_for_job_filters({"minSalary": 3})
    assert sql == f"{BASE} WHERE salary >= $1 ORDER BY id"
    assert values == [3]


def test_min_salary_zero_is_still_a_filter():
    sql, values = sql_for_job_filters({"minSalary": 0})
    assert "salary >= $1" in sql
    assert values == [0]


def test_has_equity_true():
    sql, values = sql_for_job_filters({"hasEquity": True})
    assert sql == f"{BASE} WHERE equity > 0 ORDER BY id"
    assert values == []


def test_has_equity_false_adds_nothing():
    assert sql_for_job_filters({"hasEquity": False}) == (f"{BASE} ORDER BY id", [])


def test_title_is_lowercased_substring():
    sql, values = sql_for_job_filters({"title": "EnGi"})
    assert sql == f"{BASE} WHERE LOWER(title) LIKE $1 ORDER BY id"
    assert values == ["%engi%"]


def test_all_filters_are_anded_and_numbered_in_order():
    sql, values = sql_for_job_filters({"minSalary": 1, "hasEquity": True, "title": "1"})
    assert sql == (
        f"{BASE} WHERE salary >= $1 AND equity > 0 AND LOWER(title) LIKE $2 ORDER BY id"
    )
    assert values == [1, "%1%"]


def test_title_without_equity_takes_first_placeholder():
    sql, values = sql_for_job_filters({"hasEquity": True, "title": "dev"})
    assert "LOWER(title) LIKE $1" in sql
    assert values == ["%dev%"]
