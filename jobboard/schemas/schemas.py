"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Wire names are camelCase (companyHandle); Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List

# Decimal string between 0 and 1 inclusive: "0", "0.25", "1", "1.0"
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"

# Upper bound of the INTEGER salary column
MAX_SALARY = 2147483647


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrictCamelModel(CamelModel):
    """Request schema: only the camelCase wire names are accepted."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False, extra="forbid")


# ============================================================
# JOB REQUEST SCHEMAS
# ============================================================

class JobNew(StrictCamelModel):
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_SALARY, strict=True)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(StrictCamelModel):
    """Partial update; id and companyHandle are not editable."""
    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_SALARY, strict=True)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)


class JobSearch(StrictCamelModel):
    """Query string filters for GET /jobs."""
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None
    title: Optional[str] = Field(None, min_length=1)


# ============================================================
# JOB RESPONSE SCHEMAS
# ============================================================

class CompanySummary(CamelModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class JobResponse(CamelModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str


class JobDetailResponse(JobResponse):
    company: CompanySummary


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListResponse(BaseModel):
    jobs: List[JobResponse]


class DeletedResponse(BaseModel):
    deleted: int


# ============================================================
# COMMON
# ============================================================

class ErrorBody(BaseModel):
    message: Any
    status: int


class ErrorResponse(BaseModel):
    error: ErrorBody
