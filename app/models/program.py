from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

from app.models.base import created_at_field, id_field, university_fk_field


class Program(SQLModel, table=True):
    __tablename__ = "programs"

    id: str = id_field()
    university_id: str = university_fk_field()

    title: str
    campus: str
    department: str
    duration: str
    fees: str
    description: Optional[str] = Field(default=None)

    created_at: datetime = created_at_field()
