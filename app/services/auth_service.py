# app/services/auth_service.py

from typing import Any

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound, Unauthorized
from app.core.security import hash_password, verify_password
from app.services.crud_service import CRUDService


# ============================================================================
# CREATE ACCOUNT
# Single insert; the unique email column turns a duplicate into Conflict.
# ============================================================================
async def create_account(
    service: CRUDService,
    session: AsyncSession,
    password: str,
    **fields: Any,
):
    fields["email"] = fields["email"].strip().lower()
    return await service.create(
        session,
        {**fields, "password_hash": hash_password(password)},
    )


# ============================================================================
# AUTHENTICATE (student / university / admin account)
# ============================================================================
async def authenticate_account(
    service: CRUDService,
    session: AsyncSession,
    email: str,
    password: str,
):
    account = await service.find_one(session, email=email.strip().lower())
    if not account:
        raise NotFound(service.not_found)

    if not verify_password(password, account.password_hash):
        logger.warning(f"Failed {service.label} login for {email}")
        raise Unauthorized("Invalid credentials")

    return account
