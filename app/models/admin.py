from sqlmodel import SQLModel, Field, Column
from sqlalchemy import String
from datetime import datetime

from app.models.base import created_at_field, id_field


# ------------------------------------------------------------
# 1. ADMIN ENTRY (generic name/description records, CRUD at /api/admins)
# ------------------------------------------------------------
class AdminEntry(SQLModel, table=True):
    __tablename__ = "admins"

    id: str = id_field()
    name: str
    description: str

    created_at: datetime = created_at_field()


# ------------------------------------------------------------
# 2. ADMIN ACCOUNT (signup/login credentials)
# ------------------------------------------------------------
class AdminAccount(SQLModel, table=True):
    __tablename__ = "admin_accounts"

    id: str = id_field()
    full_name: str = Field(sa_column=Column(String, nullable=False))
    email: str = Field(sa_column=Column(String, nullable=False, unique=True))
    password_hash: str = Field(sa_column=Column(String, nullable=False))

    created_at: datetime = created_at_field()
