# app/services/university_service.py

import asyncio

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.database import Database
from app.core.ids import ensure_object_id
from app.models.student import Student
from app.models.university import University
from app.schemas.university import UniversityRegister, UniversityStats
from app.services.auth_service import authenticate_account, create_account
from app.services.catalog_service import campuses, programs
from app.services.crud_service import CRUDService

universities = CRUDService(University, "university")


async def register_university(session: AsyncSession, data: UniversityRegister) -> University:
    fields = data.model_dump(exclude={"password"})
    return await create_account(universities, session, data.password, **fields)


async def authenticate_university(session: AsyncSession, email: str, password: str) -> University:
    return await authenticate_account(universities, session, email, password)


async def get_university(session: AsyncSession, university_id: str) -> University:
    return await universities.get(session, university_id)


async def list_universities(session: AsyncSession) -> list[University]:
    return await universities.find_many(session)


# ------------------------------------------------------------
# DASHBOARD STATS
# ------------------------------------------------------------
async def get_stats(db: Database, university_id: str) -> UniversityStats:
    """
    Counts run concurrently, each on its own session since one
    AsyncSession cannot serve overlapping queries.
    """
    university_id = ensure_object_id(university_id, "university")

    async def _count(service: CRUDService, **filters) -> int:
        async with db.session() as session:
            return await service.count(session, **filters)

    async def _count_applicants() -> int:
        # appliedUniversity is free text, so the id may arrive in any case
        query = (
            select(func.count())
            .select_from(Student)
            .where(func.lower(Student.applied_university) == university_id)
        )
        async with db.session() as session:
            result = await session.execute(query)
            return result.scalar_one()

    campus_count, program_count, applicant_count = await asyncio.gather(
        _count(campuses, university_id=university_id),
        _count(programs, university_id=university_id),
        _count_applicants(),
    )

    return UniversityStats(
        campuses=campus_count,
        programs=program_count,
        applicants=applicant_count,
    )
