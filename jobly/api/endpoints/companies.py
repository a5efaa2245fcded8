import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.crud import company as company_crud
from jobly.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyDetailResponse,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=CompanyEnvelope)
def create_company(request: CompanyCreateRequest, db: Session = Depends(get_db)):
    """
    Create a company.

    Returns {company: {handle, name, description, numEmployees, logoUrl}}
    """
    new_company = company_crud.create(db, request)
    logger.info(f"Created company {new_company.handle}")
    return {"company": CompanyResponse.model_validate(new_company)}


@router.get("", response_model=CompanyListEnvelope)
def list_companies(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    min_employees: Optional[str] = Query(None, alias="minEmployees"),
    max_employees: Optional[str] = Query(None, alias="maxEmployees"),
    db: Session = Depends(get_db)
):
    """
    List companies, optionally filtered.

    Numeric filters arrive as raw strings so a non-number is reported as
    400 with a readable message instead of a validation error.
    """
    filters = {
        "name": name,
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
    }
    companies = company_crud.find_all(db, filters)
    return {"companies": [CompanyResponse.model_validate(c) for c in companies]}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Company by handle, including its jobs."""
    company = company_crud.get(db, handle)
    return {"company": CompanyDetailResponse.model_validate(company)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(handle: str, request: CompanyUpdateRequest, db: Session = Depends(get_db)):
    """
    Partially update a company.

    Only fields present in the body change; handle is immutable.
    """
    data = request.model_dump(mode="json", exclude_unset=True, by_alias=True)
    company = company_crud.update(db, handle, data)
    logger.info(f"Updated company {handle}: {sorted(data)}")
    return {"company": CompanyResponse.model_validate(company)}


@router.delete("/{handle}")
def delete_company(handle: str, db: Session = Depends(get_db)):
    company_crud.remove(db, handle)
    logger.info(f"Deleted company {handle}")
    return {"deleted": handle}
