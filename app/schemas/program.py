from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel, required


class ProgramUpdate(CamelModel):
    title: str = required()
    campus: str = required()
    department: str = required()
    duration: str = required()
    fees: str = required()
    description: Optional[str] = None


class ProgramCreate(ProgramUpdate):
    university_id: str = required()


class ProgramRead(CamelModel):
    id: str
    university_id: str
    title: str
    campus: str
    department: str
    duration: str
    fees: str
    description: Optional[str] = None
    created_at: datetime


class ProgramResponse(CamelModel):
    message: str
    program: ProgramRead
