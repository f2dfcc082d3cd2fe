"""
Job model - data access for the jobs table.

Rows come back keyed by application field names (companyHandle, not
company_handle) so routes can hand them straight to the response schemas.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from jobboard.core.errors import BadRequestError, NotFoundError
from jobboard.core.logging import get_logger
from jobboard.db.postgres import execute_raw_sql
from jobboard.utils.sql import sql_for_partial_update

logger = get_logger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Application field name -> column name, identity for anything not listed
JOB_JS_TO_SQL = MappingProxyType({"companyHandle": "company_handle"})


def sql_for_job_filters(filters: Optional[Mapping[str, Any]] = None) -> Tuple[str, List[Any]]:
    """
    Build the SELECT for listing jobs, narrowed by any of:
        minSalary  -> salary >= minSalary
        hasEquity  -> equity > 0 (only when True; False means no constraint)
        title      -> case-insensitive substring of title

    Present criteria are ANDed. Keys are assumed already validated.
    """
    filters = filters or {}
    predicates: List[Tuple[str, Any]] = []

    if filters.get("minSalary") is not None:
        predicates.append(("salary >= {}", filters["minSalary"]))
    if filters.get("hasEquity") is True:
        predicates.append(("equity > 0", None))
    if filters.get("title") is not None:
        predicates.append(("LOWER(title) LIKE {}", f"%{filters['title'].lower()}%"))

    clauses = []
    values = []
    for clause, value in predicates:
        if "{}" in clause:
            values.append(value)
            clause = clause.format(f"${len(values)}")
        clauses.append(clause)

    sql = f"SELECT {JOB_COLUMNS} FROM jobs"
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY id"
    return sql, values


def _job_from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    # NUMERIC comes back as Decimal (postgres) or float (sqlite)
    job = dict(row)
    if job.get("equity") is not None:
        job["equity"] = str(job["equity"])
    return job


class Job:
    """Related functions for jobs."""

    @staticmethod
    def create(data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job from {title, salary, equity, companyHandle}.

        Raises BadRequestError if the company does not exist.
        """
        handle = data["companyHandle"]
        if not execute_raw_sql("SELECT handle FROM companies WHERE handle = $1", [handle]):
            raise BadRequestError(f"No company: {handle}")

        try:
            rows = execute_raw_sql(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}
                """,
                [data["title"], data.get("salary"), data.get("equity"), handle]
            )
        except IntegrityError as e:
            # Company deleted between the check above and the insert
            raise BadRequestError(f"Invalid job for company {handle}: {e.orig}") from e

        job = _job_from_row(rows[0])
        logger.info("Created job %s for company %s", job["id"], handle)
        return job

    @staticmethod
    def find_all(filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """All jobs matching the optional filters, ordered by id."""
        sql, values = sql_for_job_filters(filters)
        return [_job_from_row(row) for row in execute_raw_sql(sql, values)]

    @staticmethod
    def get(job_id: int) -> Dict[str, Any]:
        """
        Job by id, with its company as
        {handle, name, description, numEmployees, logoUrl}.
        """
        rows = execute_raw_sql(
            """
            SELECT j.id, j.title, j.salary, j.equity, j.company_handle AS "companyHandle",
                   c.handle, c.name, c.description, c.num_employees AS "numEmployees",
                   c.logo_url AS "logoUrl"
            FROM jobs j JOIN companies c ON j.company_handle = c.handle
            WHERE j.id = $1
            """,
            [job_id]
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        r = rows[0]
        job = _job_from_row({k: r[k] for k in ("id", "title", "salary", "equity", "companyHandle")})
        job["company"] = {k: r[k] for k in ("handle", "name", "description", "numEmployees", "logoUrl")}
        return job

    @staticmethod
    def update(job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update; only fields present in data change.

        Raises BadRequestError for empty data, NotFoundError for unknown id.
        """
        set_cols, values = sql_for_partial_update(data, JOB_JS_TO_SQL)
        id_idx = f"${len(values) + 1}"

        rows = execute_raw_sql(
            f"UPDATE jobs SET {set_cols} WHERE id = {id_idx} RETURNING {JOB_COLUMNS}",
            [*values, job_id]
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info("Updated job %s fields %s", job_id, ", ".join(data))
        return _job_from_row(rows[0])

    @staticmethod
    def remove(job_id: int) -> None:
        """Delete a job; raises NotFoundError for unknown id."""
        rows = execute_raw_sql("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("Removed job %s", job_id)
