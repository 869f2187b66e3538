# app/api/endpoints/catalog.py
#
# Campus / Department / Faculty / Program routes. The four resources share
# one shape, so each router is built from the same template:
#
#   POST   /api/universities/<segment>          create (201)
#   GET    /api/universities/<segment>/{id}     read one
#   PUT    /api/universities/<segment>/{id}     full replace
#   DELETE /api/universities/<segment>/{id}     delete
#   GET    /api/universities/{id}/<segment>     list for one university

from typing import List, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.schemas.campus import CampusCreate, CampusRead, CampusResponse, CampusUpdate
from app.schemas.department import (
    DepartmentCreate,
    DepartmentRead,
    DepartmentResponse,
    DepartmentUpdate,
)
from app.schemas.faculty import FacultyCreate, FacultyRead, FacultyResponse, FacultyUpdate
from app.schemas.program import ProgramCreate, ProgramRead, ProgramResponse, ProgramUpdate
from app.services.catalog_service import (
    UniversityOwnedService,
    campuses,
    departments,
    faculty,
    programs,
)


def build_router(
    service: UniversityOwnedService,
    segment: str,
    key: str,
    title: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    """
    ``key`` is the response envelope key ("campus"), ``title`` the message
    subject ("Campus" -> "Campus added successfully").
    """
    router = APIRouter(prefix="/api/universities", tags=[title])

    def envelope(action: str, obj):
        return response_schema(**{
            "message": f"{title} {action} successfully",
            key: read_schema.model_validate(obj),
        })

    @router.post(f"/{segment}", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        session: AsyncSession = Depends(get_db_session),
    ):
        return envelope("added", await service.create(session, payload))

    @router.get("/{university_id}/" + segment, response_model=List[read_schema])
    async def list_items(
        university_id: str,
        session: AsyncSession = Depends(get_db_session),
    ):
        items = await service.list_for_university(session, university_id)
        return [read_schema.model_validate(i) for i in items]

    @router.get(f"/{segment}/{{item_id}}", response_model=read_schema)
    async def get_item(
        item_id: str,
        session: AsyncSession = Depends(get_db_session),
    ):
        return read_schema.model_validate(await service.get(session, item_id))

    @router.put(f"/{segment}/{{item_id}}", response_model=response_schema)
    async def update_item(
        item_id: str,
        payload: update_schema,
        session: AsyncSession = Depends(get_db_session),
    ):
        return envelope("updated", await service.update(session, item_id, payload))

    @router.delete(f"/{segment}/{{item_id}}", response_model=response_schema)
    async def delete_item(
        item_id: str,
        session: AsyncSession = Depends(get_db_session),
    ):
        return envelope("deleted", await service.delete(session, item_id))

    return router


campus_router = build_router(
    campuses, "campuses", "campus", "Campus",
    CampusCreate, CampusUpdate, CampusRead, CampusResponse,
)
department_router = build_router(
    departments, "departments", "department", "Department",
    DepartmentCreate, DepartmentUpdate, DepartmentRead, DepartmentResponse,
)
faculty_router = build_router(
    faculty, "faculty", "faculty", "Faculty member",
    FacultyCreate, FacultyUpdate, FacultyRead, FacultyResponse,
)
program_router = build_router(
    programs, "programs", "program", "Program",
    ProgramCreate, ProgramUpdate, ProgramRead, ProgramResponse,
)

routers = [campus_router, department_router, faculty_router, program_router]
