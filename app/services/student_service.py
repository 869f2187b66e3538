# app/services/student_service.py

from typing import Mapping

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidArgument
from app.core.ids import ensure_object_id
from app.core.storage import FileStore
from app.models.student import Student
from app.schemas.student import StudentProfileUpdate, StudentSignup
from app.services.auth_service import authenticate_account, create_account
from app.services.crud_service import CRUDService

students = CRUDService(Student, "student")

# form field name -> column holding the stored path
DOCUMENT_FIELDS = {
    "idDocument": "id_document_path",
    "matricTranscript": "matric_transcript_path",
    "interTranscript": "inter_transcript_path",
    "bachelorTranscript": "bachelor_transcript_path",
    "masterTranscript": "master_transcript_path",
}


# ------------------------------------------------------------
# SIGNUP / LOGIN
# ------------------------------------------------------------
async def signup_student(session: AsyncSession, data: StudentSignup) -> Student:
    """Signup stores only email, full name and the password hash."""
    return await create_account(
        students,
        session,
        data.password,
        email=data.email,
        full_name=data.name,
    )


async def authenticate_student(session: AsyncSession, email: str, password: str) -> Student:
    return await authenticate_account(students, session, email, password)


# ------------------------------------------------------------
# PROFILE UPDATE (partial merge + documents)
# ------------------------------------------------------------
async def update_profile(
    session: AsyncSession,
    student_id: str | None,
    profile: StudentProfileUpdate,
    files: Mapping[str, UploadFile],
    store: FileStore,
) -> Student:
    if not student_id:
        raise InvalidArgument("Student ID is required")
    student_id = ensure_object_id(student_id, "student")

    # resolve the student before writing anything to disk
    await students.get(session, student_id)

    update_data = profile.model_dump(exclude_unset=True)

    for field_name, column in DOCUMENT_FIELDS.items():
        upload = files.get(field_name)
        if upload is not None:
            update_data[column] = await store.save(upload)

    return await students.update(session, student_id, update_data)


async def get_student(session: AsyncSession, student_id: str) -> Student:
    return await students.get(session, student_id)


async def list_students(session: AsyncSession) -> list[Student]:
    return await students.find_many(session)
