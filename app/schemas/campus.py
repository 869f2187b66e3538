from datetime import datetime

from app.schemas.base import CamelModel, required


class CampusUpdate(CamelModel):
    name: str = required()
    address: str = required()
    contact: str = required()


class CampusCreate(CampusUpdate):
    university_id: str = required()


class CampusRead(CamelModel):
    id: str
    university_id: str
    name: str
    address: str
    contact: str
    created_at: datetime


class CampusResponse(CamelModel):
    message: str
    campus: CampusRead
