from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel, required


class DepartmentUpdate(CamelModel):
    name: str = required()
    campus: str = required()
    description: Optional[str] = None


class DepartmentCreate(DepartmentUpdate):
    university_id: str = required()


class DepartmentRead(CamelModel):
    id: str
    university_id: str
    name: str
    campus: str
    description: Optional[str] = None
    created_at: datetime


class DepartmentResponse(CamelModel):
    message: str
    department: DepartmentRead
