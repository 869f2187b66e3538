from datetime import datetime

from pydantic import EmailStr

from app.schemas.base import CamelModel, required


class FacultyUpdate(CamelModel):
    name: str = required()
    designation: str = required()
    campus: str = required()
    department: str = required()
    email: EmailStr


class FacultyCreate(FacultyUpdate):
    university_id: str = required()


class FacultyRead(CamelModel):
    id: str
    university_id: str
    name: str
    designation: str
    campus: str
    department: str
    email: str
    created_at: datetime


class FacultyResponse(CamelModel):
    message: str
    faculty: FacultyRead
