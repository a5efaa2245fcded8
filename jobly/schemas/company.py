from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal


class CompanyCreateRequest(BaseModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0, strict=True)
    logo_url: Optional[str] = Field(None, alias="logoUrl", pattern=r"^https?://")

    class Config:
        populate_by_name = True
        extra = "forbid"


class CompanyUpdateRequest(BaseModel):
    """Schema for a partial company update; handle cannot change"""
    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0, strict=True)
    logo_url: Optional[str] = Field(None, alias="logoUrl", pattern=r"^https?://")

    class Config:
        extra = "forbid"


class CompanyResponse(BaseModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        from_attributes = True
        populate_by_name = True


class CompanyJob(BaseModel):
    """Job as listed inside a company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

    class Config:
        from_attributes = True


class CompanyDetailResponse(CompanyResponse):
    """Company together with its jobs"""
    jobs: List[CompanyJob] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]
