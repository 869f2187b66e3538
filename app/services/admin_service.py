# app/services/admin_service.py

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.admin import AdminAccount, AdminEntry
from app.schemas.admin import AdminSignup
from app.services.auth_service import authenticate_account, create_account
from app.services.crud_service import CRUDService

admin_entries = CRUDService(AdminEntry, "admin")
admin_accounts = CRUDService(AdminAccount, "admin")


async def list_admin_entries(session: AsyncSession) -> list[AdminEntry]:
    # newest first
    return await admin_entries.find_many(session, order_by=AdminEntry.created_at.desc())


async def signup_admin(session: AsyncSession, data: AdminSignup) -> AdminAccount:
    return await create_account(
        admin_accounts,
        session,
        data.password,
        email=data.email,
        full_name=data.name,
    )


async def authenticate_admin(session: AsyncSession, email: str, password: str) -> AdminAccount:
    return await authenticate_account(admin_accounts, session, email, password)


# ============================================================================
# DEFAULT ADMIN (startup seeding)
# ============================================================================
async def ensure_default_admin(session: AsyncSession) -> AdminAccount | None:
    if not settings.DEFAULT_ADMIN_EMAIL or not settings.DEFAULT_ADMIN_PASSWORD:
        logger.warning("Default admin credentials not configured. Skipping seeding.")
        return None

    existing = await admin_accounts.find_one(session, email=settings.DEFAULT_ADMIN_EMAIL.strip().lower())
    if existing:
        logger.info("Default admin already exists. Skipping.")
        return existing

    logger.info(f"Seeding default admin: {settings.DEFAULT_ADMIN_EMAIL}")
    return await create_account(
        admin_accounts,
        session,
        settings.DEFAULT_ADMIN_PASSWORD,
        email=settings.DEFAULT_ADMIN_EMAIL,
        full_name=settings.DEFAULT_ADMIN_NAME or "Portal Admin",
    )
