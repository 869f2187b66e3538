from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field

from app.core.ids import generate_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def id_field():
    return Field(
        default_factory=generate_object_id,
        sa_column=Column(String(24), primary_key=True)
    )


def created_at_field():
    return Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )


def university_fk_field():
    # back-reference to the owning university, indexed for per-university listing
    return Field(foreign_key="universities.id", index=True, max_length=24)
