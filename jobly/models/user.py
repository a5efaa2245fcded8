"""
User accounts and their job applications.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from jobly.core.database import Base


class User(Base):
    """
    User account, keyed by username.
    """
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)

    applications = relationship(
        "Application",
        cascade="all, delete-orphan",
        order_by="Application.job_id",
    )

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"


class Application(Base):
    """
    A user's application to a job. One row per (user, job) pair.
    """
    __tablename__ = "applications"

    username = Column(
        String(25),
        ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    job_id = Column(
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    )

    job = relationship("Job", back_populates="applications")
