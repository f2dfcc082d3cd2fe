"""
Job Routes

POST /jobs - Create job posting (admin only)
GET /jobs - List jobs, filtered by minSalary / hasEquity / title
GET /jobs/{job_id} - Get job details with its company
PATCH /jobs/{job_id} - Partially update a job (admin only)
DELETE /jobs/{job_id} - Delete job (admin only)
"""

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from jobboard.api.errors import validation_messages
from jobboard.core.auth import ensure_admin
from jobboard.core.errors import BadRequestError
from jobboard.models.job import Job
from jobboard.schemas.schemas import (
    JobNew, JobUpdate, JobSearch, JobEnvelope, JobDetailEnvelope,
    JobListResponse, DeletedResponse
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def job_search_filters(request: Request) -> dict:
    """
    Validate the raw query string against JobSearch.

    Done by hand so that unknown keys (?hello=1) are a 400, not ignored.
    """
    try:
        search = JobSearch.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise BadRequestError(validation_messages(e.errors())) from e
    return search.model_dump(by_alias=True, exclude_none=True)


@router.post("", response_model=JobEnvelope, status_code=201)
async def create_job(job: JobNew, admin: dict = Depends(ensure_admin)):
    """Create a new job posting. Admins only."""
    created = Job.create(job.model_dump(by_alias=True))
    return {"job": created}


@router.get("", response_model=JobListResponse)
async def list_jobs(filters: dict = Depends(job_search_filters)):
    """List all jobs, optionally filtered. Open to anonymous callers."""
    return {"jobs": Job.find_all(filters)}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
async def get_job(job_id: int):
    """Get details of a specific job, including its company."""
    return {"job": Job.get(job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(job_id: int, update: JobUpdate, admin: dict = Depends(ensure_admin)):
    """Update only the fields sent. Admins only; id and company cannot change."""
    job = Job.update(job_id, update.model_dump(by_alias=True, exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(job_id: int, admin: dict = Depends(ensure_admin)):
    """Delete a job posting. Admins only."""
    Job.remove(job_id)
    return {"deleted": job_id}
