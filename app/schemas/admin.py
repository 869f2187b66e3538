from datetime import datetime

from pydantic import EmailStr

from app.schemas.base import CamelModel, required


# ---------------------------------------------------------
# ADMIN ENTRY
# ---------------------------------------------------------
class AdminEntryWrite(CamelModel):
    name: str = required()
    description: str = required()


class AdminEntryRead(CamelModel):
    id: str
    name: str
    description: str
    created_at: datetime


class AdminEntryResponse(CamelModel):
    message: str
    admin: AdminEntryRead


# ---------------------------------------------------------
# ADMIN ACCOUNT (signup / login)
# ---------------------------------------------------------
class AdminSignup(CamelModel):
    name: str = required()
    email: EmailStr
    password: str = required()


class AdminAuthResponse(CamelModel):
    message: str
    admin_id: str
    full_name: str
