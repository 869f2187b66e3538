# app/api/endpoints/admins.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.schemas.admin import (
    AdminAuthResponse,
    AdminEntryRead,
    AdminEntryResponse,
    AdminEntryWrite,
    AdminSignup,
)
from app.schemas.base import LoginRequest
from app.services.admin_service import (
    admin_entries,
    authenticate_admin,
    list_admin_entries,
    signup_admin,
)

router = APIRouter(prefix="/api/admins", tags=["Admins"])


# -------------------------------------------------------------------
# ADMIN ACCOUNTS
# -------------------------------------------------------------------
@router.post("/signup", response_model=AdminAuthResponse)
async def admin_signup(
    data: AdminSignup,
    session: AsyncSession = Depends(get_db_session),
):
    admin = await signup_admin(session, data)
    return AdminAuthResponse(
        message="Admin signup successful",
        admin_id=admin.id,
        full_name=admin.full_name,
    )


@router.post("/login", response_model=AdminAuthResponse)
async def admin_login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
):
    admin = await authenticate_admin(session, data.email, data.password)
    return AdminAuthResponse(
        message="Login successful",
        admin_id=admin.id,
        full_name=admin.full_name,
    )


# -------------------------------------------------------------------
# ADMIN ENTRIES (CRUD)
# -------------------------------------------------------------------
@router.post("", response_model=AdminEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_admin(
    data: AdminEntryWrite,
    session: AsyncSession = Depends(get_db_session),
):
    admin = await admin_entries.create(session, data.model_dump())
    return AdminEntryResponse(message="Admin added successfully", admin=AdminEntryRead.model_validate(admin))


@router.get("", response_model=List[AdminEntryRead])
async def all_admins(session: AsyncSession = Depends(get_db_session)):
    return [AdminEntryRead.model_validate(a) for a in await list_admin_entries(session)]


@router.get("/{admin_id}", response_model=AdminEntryRead)
async def get_admin(
    admin_id: str,
    session: AsyncSession = Depends(get_db_session),
):
    return AdminEntryRead.model_validate(await admin_entries.get(session, admin_id))


@router.put("/{admin_id}", response_model=AdminEntryResponse)
async def update_admin(
    admin_id: str,
    data: AdminEntryWrite,
    session: AsyncSession = Depends(get_db_session),
):
    admin = await admin_entries.update(session, admin_id, data)
    return AdminEntryResponse(message="Admin updated successfully", admin=AdminEntryRead.model_validate(admin))


@router.delete("/{admin_id}", response_model=AdminEntryResponse)
async def delete_admin(
    admin_id: str,
    session: AsyncSession = Depends(get_db_session),
):
    admin = await admin_entries.delete(session, admin_id)
    return AdminEntryResponse(message="Admin deleted successfully", admin=AdminEntryRead.model_validate(admin))
