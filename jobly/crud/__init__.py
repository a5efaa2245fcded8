"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer sits between the API routes and the database. Missing rows
raise NotFoundError and invalid input raises BadRequestError, so routes
never have to check for None.
"""

from jobly.crud import company, job, user

__all__ = ["company", "job", "user"]
