from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal

from jobly.schemas.company import CompanyResponse


class JobCreateRequest(BaseModel):
    """
    Schema for creating a new job.

    salary and equity must be present but may be null.
    """
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(..., ge=0, strict=True)
    equity: Optional[Decimal] = Field(..., ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    id and company_handle are fixed once a job exists.
    """
    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, strict=True)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    class Config:
        extra = "forbid"


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobDetailResponse(BaseModel):
    """Job together with the company that posted it"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str
    company: CompanyResponse

    class Config:
        from_attributes = True


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]
