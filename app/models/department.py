from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

from app.models.base import created_at_field, id_field, university_fk_field


class Department(SQLModel, table=True):
    __tablename__ = "departments"

    id: str = id_field()
    university_id: str = university_fk_field()

    name: str
    # campus label for display/filtering, not a reference
    campus: str
    description: Optional[str] = Field(default=None)

    created_at: datetime = created_at_field()
