from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON, Integer, String, Text
from datetime import date, datetime
from typing import List, Optional

from app.models.base import created_at_field, id_field


class Student(SQLModel, table=True):
    __tablename__ = "students"

    id: str = id_field()

    # Signup fields
    email: str = Field(
        sa_column=Column(String, nullable=False, unique=True)
    )
    password_hash: str = Field(
        sa_column=Column(String, nullable=False)
    )
    full_name: str = Field(
        sa_column=Column(String, nullable=False)
    )

    # Filled later through the profile form
    dob: Optional[date] = Field(default=None)
    gender: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    nationality: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    address: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    contact_number: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))

    # Application targets (free text, not foreign keys)
    applied_university: Optional[str] = Field(
        default=None, sa_column=Column(String, nullable=True, index=True)
    )
    applied_campus: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    applied_program: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))

    # Academic history
    matric_board: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    matric_year: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    matric_marks: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    matric_subjects: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    inter_board: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    inter_year: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    inter_marks: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    inter_subjects: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    bachelor_uni: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    bachelor_year: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    bachelor_marks: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    bachelor_major: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    master_uni: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    master_year: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    master_marks: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    master_major: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Paths of uploaded documents, relative to the public directory
    id_document_path: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    matric_transcript_path: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    inter_transcript_path: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    bachelor_transcript_path: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))
    master_transcript_path: Optional[str] = Field(default=None, sa_column=Column(String, nullable=True))

    created_at: datetime = created_at_field()
