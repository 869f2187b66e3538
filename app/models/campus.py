from sqlmodel import SQLModel
from datetime import datetime

from app.models.base import created_at_field, id_field, university_fk_field


class Campus(SQLModel, table=True):
    __tablename__ = "campuses"

    id: str = id_field()
    university_id: str = university_fk_field()

    name: str
    address: str
    contact: str

    created_at: datetime = created_at_field()
