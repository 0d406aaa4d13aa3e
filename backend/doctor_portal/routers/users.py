from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctor_portal.auth import Principal, admin_only, authenticated, guarded
from doctor_portal.config import Settings, app_settings
from doctor_portal.database import get_db
from doctor_portal.schemas.results import UpdateResult
from doctor_portal.schemas.user import AdminStatus, UpsertUserResponse, UserProfile
from doctor_portal.services.user_service import user_service

router = APIRouter()


@router.get("/user")
async def list_users(
    db: AsyncSession = Depends(get_db),
    current_user: Principal = Depends(guarded(authenticated)),
):
    return await user_service.list_users(db)


@router.get("/admin/{email}", response_model=AdminStatus)
async def admin_status(email: str, db: AsyncSession = Depends(get_db)):
    return AdminStatus(admin=await user_service.is_admin(db, email))


@router.put("/user/admin/{email}", response_model=UpdateResult)
async def make_admin(
    email: str,
    db: AsyncSession = Depends(get_db),
    current_user: Principal = Depends(guarded(authenticated, admin_only)),
):
    return await user_service.promote_to_admin(db, email)


@router.put("/user/{email}", response_model=UpsertUserResponse)
async def upsert_user(
    email: str,
    profile: Optional[UserProfile] = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(app_settings),
):
    """Register or log in: store the profile and hand back a fresh token."""
    fields = profile.profile_fields() if profile else {}
    result, token = await user_service.upsert_user(db, email, fields, settings)
    return UpsertUserResponse(result=result, token=token)
