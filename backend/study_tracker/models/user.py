"""
Study Tracker - User Model
SQLAlchemy model for account ownership and authentication
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from study_tracker.core.database import Base
from study_tracker.utils.dates import utcnow

if TYPE_CHECKING:
    from study_tracker.models.curriculum import Subject


class User(Base):
    """Account that owns every other record, directly or through a parent."""
    
    __tablename__ = "users"
    
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    
    # Relationships
    subjects: Mapped[list["Subject"]] = relationship(
        "Subject",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
