import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.crud import job as job_crud
from jobly.schemas.job import (
    JobCreateRequest,
    JobDetailEnvelope,
    JobDetailResponse,
    JobEnvelope,
    JobListEnvelope,
    JobResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(request: JobCreateRequest, db: Session = Depends(get_db)):
    """
    Create a job posting for an existing company.

    Returns {job: {id, title, salary, equity, company_handle}}
    """
    new_job = job_crud.create(db, request)
    logger.info(f"Created job {new_job.id}: {new_job.title} at {new_job.company_handle}")
    return {"job": JobResponse.model_validate(new_job)}


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    min_salary: Optional[str] = Query(None, alias="minSalary"),
    has_equity: Optional[str] = Query(None, alias="hasEquity", description="'true' to list only jobs with equity"),
    db: Session = Depends(get_db)
):
    """
    List jobs, optionally filtered by title, minimum salary and equity.
    """
    filters = {
        "title": title,
        "minSalary": min_salary,
        "hasEquity": has_equity,
    }
    jobs = job_crud.find_all(db, filters)
    return {"jobs": [JobResponse.model_validate(j) for j in jobs]}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Job by ID, including the company that posted it."""
    job = job_crud.get(db, job_id)
    return {"job": JobDetailResponse.model_validate(job)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(job_id: int, request: JobUpdateRequest, db: Session = Depends(get_db)):
    """
    Partially update a job. id and company_handle cannot change.
    """
    data = request.model_dump(mode="json", exclude_unset=True)
    job = job_crud.update(db, job_id, data)
    logger.info(f"Updated job {job_id}: {sorted(data)}")
    return {"job": JobResponse.model_validate(job)}


@router.delete("/{job_id}")
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID.
    """
    job_crud.remove(db, job_id)
    logger.info(f"Deleted job {job_id}")
    return {"deleted": str(job_id)}
