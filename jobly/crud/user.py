"""
CRUD operations for User model and job applications.
"""

from typing import Any, Dict, List, Mapping
from sqlalchemy.orm import Session

from jobly.core.database import execute_positional
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.job import Job
from jobly.models.user import Application, User
from jobly.schemas.user import UserCreateRequest

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def register(db: Session, user_data: UserCreateRequest) -> User:
    """
    Create a new user.

    Raises:
        BadRequestError: username already taken
    """
    if db.get(User, user_data.username) is not None:
        raise BadRequestError(f"Duplicate username: {user_data.username}")

    db_user = User(
        username=user_data.username,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=user_data.is_admin,
    )

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return db_user


def find_all(db: Session) -> List[User]:
    """List all users ordered by username."""
    return db.query(User).order_by(User.username).all()


def get(db: Session, username: str) -> User:
    """
    Retrieve a user by username.

    Raises:
        NotFoundError: no such user
    """
    user = db.get(User, username)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    return user


def applied_job_ids(user: User) -> List[int]:
    """Ids of the jobs a user has applied to, ascending."""
    return [application.job_id for application in user.applications]


def update(db: Session, username: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a user.

    Args:
        db: Database session
        username: User to update
        data: Fields to change, keyed by JSON field name
            (firstName, lastName, email, isAdmin)

    Raises:
        BadRequestError: data is empty
        NotFoundError: no such user
    """
    set_cols, values = sql_for_partial_update(data, FIELD_MAP)
    username_idx = len(values) + 1

    row = execute_positional(
        db,
        f"""UPDATE users
            SET {set_cols}
            WHERE username = ${username_idx}
            RETURNING {USER_COLUMNS}""",
        [*values, username],
    ).mappings().first()

    if row is None:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    user = dict(row)
    db.commit()
    return user


def remove(db: Session, username: str) -> None:
    """
    Delete a user and their applications.

    Raises:
        NotFoundError: no such user
    """
    user = get(db, username)
    db.delete(user)
    db.commit()


def apply_to_job(db: Session, username: str, job_id: int) -> Application:
    """
    Record that a user applied to a job.

    Raises:
        NotFoundError: no such user or no such job
        BadRequestError: user already applied to this job
    """
    user = get(db, username)
    if db.get(Job, job_id) is None:
        raise NotFoundError(f"No job: {job_id}")
    if db.get(Application, (username, job_id)) is not None:
        raise BadRequestError(f"{username} already applied to job {job_id}")

    application = Application(username=user.username, job_id=job_id)
    db.add(application)
    db.commit()

    return application
