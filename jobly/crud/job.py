"""
CRUD operations for Job model.

Listing and updates go through the SQL builders in jobly.helpers.sql;
single-row reads and writes use the ORM.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from jobly.core.database import execute_positional
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_job_filter, sql_for_partial_update
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.schemas.job import JobCreateRequest

JOB_COLUMNS = "id, title, salary, equity, company_handle"


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: company_handle does not name a company
    """
    if db.get(Company, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title.

    Args:
        db: Database session
        filters: Optional search criteria (title, minSalary, hasEquity)

    Returns:
        List of job rows as dicts keyed by column name
    """
    where, values = sql_for_job_filter(filters)
    result = execute_positional(
        db,
        f"""SELECT {JOB_COLUMNS}
            FROM jobs
            {where}
            ORDER BY title, id""",
        values,
    )
    return [dict(row) for row in result.mappings()]


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID, with its company loaded.

    Raises:
        NotFoundError: no such job
    """
    job = db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a job.

    Only title, salary and equity may change; callers validate that.

    Returns:
        Updated job row as a dict

    Raises:
        BadRequestError: data is empty
        NotFoundError: no such job
    """
    set_cols, values = sql_for_partial_update(data, {})
    id_idx = len(values) + 1

    row = execute_positional(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = ${id_idx}
            RETURNING {JOB_COLUMNS}""",
        [*values, job_id],
    ).mappings().first()

    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    job = dict(row)
    db.commit()
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: no such job
    """
    job = get(db, job_id)
    db.delete(job)
    db.commit()
