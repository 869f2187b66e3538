# app/api/endpoints/students.py

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from app.api.deps import get_db_session, get_store
from app.core.storage import FileStore
from app.schemas.base import LoginRequest
from app.schemas.student import (
    StudentAuthResponse,
    StudentProfileResponse,
    StudentProfileUpdate,
    StudentRead,
    StudentSignup,
)
from app.services.student_service import (
    DOCUMENT_FIELDS,
    authenticate_student,
    get_student,
    list_students,
    signup_student,
    update_profile,
)

router = APIRouter(
    prefix="/api/students",
    tags=["Students"]
)


# ------------------------------------------------------------
# STUDENT SIGNUP (PUBLIC)
# ------------------------------------------------------------
@router.post("/signup", response_model=StudentAuthResponse)
async def student_signup(
    data: StudentSignup,
    session: AsyncSession = Depends(get_db_session),
):
    student = await signup_student(session, data)
    return StudentAuthResponse(
        message="Signup successful",
        student_id=student.id,
        full_name=student.full_name,
    )


# ------------------------------------------------------------
# STUDENT LOGIN
# ------------------------------------------------------------
@router.post("/login", response_model=StudentAuthResponse)
async def student_login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
):
    student = await authenticate_student(session, data.email, data.password)
    return StudentAuthResponse(
        message="Login successful",
        student_id=student.id,
        full_name=student.full_name,
    )


# ------------------------------------------------------------
# PROFILE UPDATE (multipart: text fields + up to five documents)
# ------------------------------------------------------------
@router.post("/updateProfile", response_model=StudentProfileResponse)
async def student_update_profile(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    store: FileStore = Depends(get_store),
):
    """
    Only the fields present in the form are written. Comma separated
    subject lists become arrays; attached documents replace the stored
    path of the matching document, missing ones keep the old path.
    """
    form = await request.form()

    text_fields = {}
    files = {}
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            # browsers send an empty part when no file was picked
            if key in DOCUMENT_FIELDS and value.filename:
                files[key] = value
        else:
            text_fields[key] = value

    student_id = text_fields.pop("studentId", None)
    profile = StudentProfileUpdate.model_validate(text_fields)

    student = await update_profile(session, student_id, profile, files, store)
    return StudentProfileResponse(
        message="Profile saved successfully",
        student=StudentRead.model_validate(student),
    )


# ------------------------------------------------------------
# READ
# ------------------------------------------------------------
@router.get("/profile/{student_id}", response_model=StudentRead)
async def student_profile(
    student_id: str,
    session: AsyncSession = Depends(get_db_session),
):
    return StudentRead.model_validate(await get_student(session, student_id))


@router.get("", response_model=List[StudentRead])
async def all_students(session: AsyncSession = Depends(get_db_session)):
    return [StudentRead.model_validate(s) for s in await list_students(session)]
