# app/services/catalog_service.py
# Campuses, departments, faculty and programs: records owned by a university.

from typing import Sequence

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.core.ids import ensure_object_id
from app.models.campus import Campus
from app.models.department import Department
from app.models.faculty import Faculty
from app.models.program import Program
from app.models.university import University
from app.services.crud_service import CRUDService, ModelT


class UniversityOwnedService(CRUDService[ModelT]):

    async def create(self, session: AsyncSession, data: BaseModel | dict) -> ModelT:
        if isinstance(data, BaseModel):
            data = data.model_dump()

        university_id = ensure_object_id(data.get("university_id"), "university")
        if not await session.get(University, university_id):
            raise NotFound("University not found")

        return await super().create(session, {**data, "university_id": university_id})

    async def list_for_university(self, session: AsyncSession, university_id: str) -> Sequence[ModelT]:
        university_id = ensure_object_id(university_id, "university")
        return await self.find_many(session, university_id=university_id)


campuses = UniversityOwnedService(Campus, "campus")
departments = UniversityOwnedService(Department, "department")
faculty = UniversityOwnedService(Faculty, "faculty", not_found="Faculty member not found")
programs = UniversityOwnedService(Program, "program")
