from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from doctor_portal.auth import create_token
from doctor_portal.config import Settings
from doctor_portal.database import conflict_insert
from doctor_portal.logging_config import get_logger
from doctor_portal.models.user import ADMIN_ROLE, User
from doctor_portal.schemas.results import UpdateResult

logger = get_logger(__name__)


class UserService:
    async def find_user(self, db: AsyncSession, email: str) -> Optional[User]:
        """The user keyed by ``email``, or None when there is no such record."""
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def is_admin(self, db: AsyncSession, email: str) -> bool:
        user = await self.find_user(db, email)
        return user is not None and user.is_admin

    async def list_users(self, db: AsyncSession) -> list[dict]:
        result = await db.execute(select(User).order_by(User.id))
        return [u.to_document() for u in result.scalars().all()]

    async def upsert_user(
        self,
        db: AsyncSession,
        email: str,
        profile: Dict[str, Any],
        settings: Settings,
    ) -> Tuple[UpdateResult, str]:
        """
        Insert the user or merge ``profile`` into the existing record, then
        mint a fresh token for ``email``. Used for both sign-up and login;
        identity is established upstream, so no password is checked.
        """
        stmt = (
            conflict_insert(db, User)
            .values(email=email, profile=profile)
            .on_conflict_do_nothing(index_elements=["email"])
            .returning(User.id)
        )
        inserted_id = (await db.execute(stmt)).scalar_one_or_none()

        if inserted_id is not None:
            result = UpdateResult(upserted_id=str(inserted_id), upserted_count=1)
        else:
            user = await self.find_user(db, email)
            current = dict(user.profile or {})
            merged = {**current, **profile}
            if merged != current:
                user.profile = merged
            result = UpdateResult(matched_count=1, modified_count=int(merged != current))
        await db.commit()

        token = create_token(email, settings)
        logger.info("user_upserted", email=email, created=inserted_id is not None)
        return result, token

    async def promote_to_admin(self, db: AsyncSession, email: str) -> UpdateResult:
        """Give ``email`` the admin role. Repeating it changes nothing."""
        user = await self.find_user(db, email)
        if user is None:
            logger.info("admin_promotion_skipped", email=email, reason="unknown user")
            return UpdateResult()

        modified = user.role != ADMIN_ROLE
        user.role = ADMIN_ROLE
        await db.commit()
        logger.info("admin_promoted", email=email, modified=modified)
        return UpdateResult(matched_count=1, modified_count=int(modified))


user_service = UserService()
