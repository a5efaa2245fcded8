import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.crud import user as user_crud
from jobly.schemas.user import (
    UserCreateRequest,
    UserDetailEnvelope,
    UserDetailResponse,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=UserEnvelope)
def create_user(request: UserCreateRequest, db: Session = Depends(get_db)):
    """
    Register a user.

    Returns {user: {username, firstName, lastName, email, isAdmin}}
    """
    new_user = user_crud.register(db, request)
    logger.info(f"Registered user {new_user.username}")
    return {"user": UserResponse.model_validate(new_user)}


@router.get("", response_model=UserListEnvelope)
def list_users(db: Session = Depends(get_db)):
    users = user_crud.find_all(db)
    return {"users": [UserResponse.model_validate(u) for u in users]}


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(username: str, db: Session = Depends(get_db)):
    """User by username, with the ids of jobs they applied to."""
    user = user_crud.get(db, username)
    detail = UserResponse.model_validate(user).model_dump()
    return {"user": UserDetailResponse(**detail, jobs=user_crud.applied_job_ids(user))}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(username: str, request: UserUpdateRequest, db: Session = Depends(get_db)):
    """Partially update a user; username is immutable."""
    data = request.model_dump(mode="json", exclude_unset=True, by_alias=True)
    user = user_crud.update(db, username, data)
    logger.info(f"Updated user {username}: {sorted(data)}")
    return {"user": UserResponse.model_validate(user)}


@router.delete("/{username}")
def delete_user(username: str, db: Session = Depends(get_db)):
    user_crud.remove(db, username)
    logger.info(f"Deleted user {username}")
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}")
def apply_to_job(username: str, job_id: int, db: Session = Depends(get_db)):
    """
    Apply a user to a job.

    Returns {applied: job_id}
    """
    user_crud.apply_to_job(db, username, job_id)
    logger.info(f"User {username} applied to job {job_id}")
    return {"applied": job_id}
