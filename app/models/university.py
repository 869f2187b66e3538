from sqlmodel import SQLModel, Field, Column
from sqlalchemy import String, Text
from datetime import datetime
from typing import Optional

from app.models.base import created_at_field, id_field


class University(SQLModel, table=True):
    __tablename__ = "universities"

    id: str = id_field()

    name: str = Field(sa_column=Column(String, nullable=False))
    contact_person: str = Field(sa_column=Column(String, nullable=False))
    email: str = Field(sa_column=Column(String, nullable=False, unique=True))
    password_hash: str = Field(sa_column=Column(String, nullable=False))
    address: str = Field(sa_column=Column(Text, nullable=False))

    website: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = created_at_field()
