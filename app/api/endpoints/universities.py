# app/api/endpoints/universities.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_database, get_db_session
from app.core.database import Database
from app.schemas.base import LoginRequest
from app.schemas.university import (
    UniversityAuthResponse,
    UniversityRead,
    UniversityRegister,
    UniversityStats,
)
from app.services.university_service import (
    authenticate_university,
    get_stats,
    get_university,
    list_universities,
    register_university,
)

router = APIRouter(prefix="/api/universities", tags=["Universities"])


# -------------------------------------------------------------------
# REGISTER
# -------------------------------------------------------------------
@router.post("/register", response_model=UniversityAuthResponse)
async def university_register(
    data: UniversityRegister,
    session: AsyncSession = Depends(get_db_session),
):
    university = await register_university(session, data)
    return UniversityAuthResponse(
        message="University registration successful",
        university_id=university.id,
        name=university.name,
    )


# -------------------------------------------------------------------
# LOGIN
# -------------------------------------------------------------------
@router.post("/login", response_model=UniversityAuthResponse)
async def university_login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
):
    university = await authenticate_university(session, data.email, data.password)
    return UniversityAuthResponse(
        message="Login successful",
        university_id=university.id,
        name=university.name,
    )


# -------------------------------------------------------------------
# READ
# -------------------------------------------------------------------
@router.get("", response_model=List[UniversityRead])
async def all_universities(session: AsyncSession = Depends(get_db_session)):
    return [UniversityRead.model_validate(u) for u in await list_universities(session)]


@router.get("/{university_id}", response_model=UniversityRead)
async def university_profile(
    university_id: str,
    session: AsyncSession = Depends(get_db_session),
):
    return UniversityRead.model_validate(await get_university(session, university_id))


# -------------------------------------------------------------------
# DASHBOARD STATS
# -------------------------------------------------------------------
@router.get("/{university_id}/stats", response_model=UniversityStats)
async def university_stats(
    university_id: str,
    db: Database = Depends(get_database),
):
    return await get_stats(db, university_id)
