from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from app.schemas.base import CamelModel, required


class UniversityRegister(CamelModel):
    name: str = required()
    contact_person: str = required()
    email: EmailStr
    password: str = required()
    address: str = required()
    website: Optional[str] = None
    description: Optional[str] = None


class UniversityAuthResponse(CamelModel):
    message: str
    university_id: str
    name: str


# password hash never leaves the service
class UniversityRead(CamelModel):
    id: str
    name: str
    contact_person: str
    email: str
    address: str
    website: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime


class UniversityStats(CamelModel):
    campuses: int
    programs: int
    applicants: int
