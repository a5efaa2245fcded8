"""
CRUD operations for Company model.
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import execute_positional
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_company_filter, sql_for_partial_update
from jobly.models.company import Company
from jobly.schemas.company import CompanyCreateRequest

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"

# JSON field name -> column name, for partial updates
FIELD_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreateRequest) -> Company:
    """
    Create a new company.

    Args:
        db: Database session
        company_data: Validated company creation data

    Returns:
        Created Company instance

    Raises:
        BadRequestError: handle or name already in use
    """
    if db.get(Company, company_data.handle) is not None:
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    db_company = Company(
        handle=company_data.handle,
        name=company_data.name,
        description=company_data.description,
        num_employees=company_data.num_employees,
        logo_url=company_data.logo_url,
    )

    db.add(db_company)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {company_data.name}")
    db.refresh(db_company)

    return db_company


def find_all(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List companies ordered by name.

    Args:
        db: Database session
        filters: Optional search criteria (name, minEmployees, maxEmployees)

    Returns:
        List of company rows as dicts keyed by column name
    """
    where, values = sql_for_company_filter(filters)
    result = execute_positional(
        db,
        f"""SELECT {COMPANY_COLUMNS}
            FROM companies
            {where}
            ORDER BY name""",
        values,
    )
    return [dict(row) for row in result.mappings()]


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company by handle, with its jobs loaded.

    Raises:
        NotFoundError: no such company
    """
    company = db.get(Company, handle)
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a company.

    Args:
        db: Database session
        handle: Company to update
        data: Fields to change, keyed by JSON field name
            (name, description, numEmployees, logoUrl)

    Returns:
        Updated company row as a dict

    Raises:
        BadRequestError: data is empty or the new name is taken
        NotFoundError: no such company
    """
    set_cols, values = sql_for_partial_update(data, FIELD_MAP)
    handle_idx = len(values) + 1

    try:
        row = execute_positional(
            db,
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = ${handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        ).mappings().first()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")

    if row is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    db.commit()
    return company


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the cascade, its jobs.

    Raises:
        NotFoundError: no such company
    """
    company = get(db, handle)
    db.delete(company)
    db.commit()
