# app/schemas/student.py
from datetime import date, datetime
from typing import List, Optional

from pydantic import EmailStr, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.schemas.base import CamelModel, required

SUBJECT_FIELDS = ("matric_subjects", "inter_subjects", "bachelor_major", "master_major")
BLANK_AS_NONE_FIELDS = ("dob", "matric_year", "inter_year", "bachelor_year", "master_year")

# form keys arrive camelCased, JSON callers may use the field names
_SKIP_WHEN_BLANK = set(SUBJECT_FIELDS) | {to_camel(f) for f in SUBJECT_FIELDS}
_NONE_WHEN_BLANK = set(BLANK_AS_NONE_FIELDS) | {to_camel(f) for f in BLANK_AS_NONE_FIELDS}


def split_subjects(value: str) -> List[str]:
    """'Math, Physics,Chem' -> ['Math', 'Physics', 'Chem']"""
    return [part.strip() for part in value.split(",")]


# ------------------------------------------------------------
# STUDENT SIGNUP (Public)
# ------------------------------------------------------------
class StudentSignup(CamelModel):
    name: str = required()
    email: EmailStr
    password: str = required()


class StudentAuthResponse(CamelModel):
    message: str
    student_id: str
    full_name: str


# ------------------------------------------------------------
# PROFILE UPDATE (text part of the multipart form)
# Only the keys present in the form are written back.
# ------------------------------------------------------------
class StudentProfileUpdate(CamelModel):
    dob: Optional[date] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None

    applied_university: Optional[str] = None
    applied_campus: Optional[str] = None
    applied_program: Optional[str] = None

    matric_board: Optional[str] = None
    matric_year: Optional[int] = None
    matric_marks: Optional[str] = None
    matric_subjects: Optional[List[str]] = None

    inter_board: Optional[str] = None
    inter_year: Optional[int] = None
    inter_marks: Optional[str] = None
    inter_subjects: Optional[List[str]] = None

    bachelor_uni: Optional[str] = None
    bachelor_year: Optional[int] = None
    bachelor_marks: Optional[str] = None
    bachelor_major: Optional[List[str]] = None

    master_uni: Optional[str] = None
    master_year: Optional[int] = None
    master_marks: Optional[str] = None
    master_major: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_blank_values(cls, data):
        # a blank subject list leaves the stored list alone; a blank year or
        # date clears it; any other blank text is written as sent
        if not isinstance(data, dict):
            return data

        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str) and value.strip() == "":
                if key in _SKIP_WHEN_BLANK:
                    continue
                if key in _NONE_WHEN_BLANK:
                    value = None
            cleaned[key] = value
        return cleaned

    @field_validator(*SUBJECT_FIELDS, mode="before")
    @classmethod
    def split_comma_separated(cls, v):
        if isinstance(v, str):
            return split_subjects(v)
        return v


# ------------------------------------------------------------
# FULL STUDENT READ RESPONSE (no credentials)
# ------------------------------------------------------------
class StudentRead(CamelModel):
    id: str
    email: str
    full_name: str

    dob: Optional[date] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None

    applied_university: Optional[str] = None
    applied_campus: Optional[str] = None
    applied_program: Optional[str] = None

    matric_board: Optional[str] = None
    matric_year: Optional[int] = None
    matric_marks: Optional[str] = None
    matric_subjects: Optional[List[str]] = None

    inter_board: Optional[str] = None
    inter_year: Optional[int] = None
    inter_marks: Optional[str] = None
    inter_subjects: Optional[List[str]] = None

    bachelor_uni: Optional[str] = None
    bachelor_year: Optional[int] = None
    bachelor_marks: Optional[str] = None
    bachelor_major: Optional[List[str]] = None

    master_uni: Optional[str] = None
    master_year: Optional[int] = None
    master_marks: Optional[str] = None
    master_major: Optional[List[str]] = None

    id_document_path: Optional[str] = None
    matric_transcript_path: Optional[str] = None
    inter_transcript_path: Optional[str] = None
    bachelor_transcript_path: Optional[str] = None
    master_transcript_path: Optional[str] = None

    created_at: datetime


class StudentProfileResponse(CamelModel):
    message: str
    student: StudentRead
