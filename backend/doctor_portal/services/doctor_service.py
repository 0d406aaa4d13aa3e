from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete

from doctor_portal.logging_config import get_logger
from doctor_portal.models.doctor import Doctor
from doctor_portal.schemas.doctor import DoctorCreate
from doctor_portal.schemas.results import DeleteResult, InsertResult

logger = get_logger(__name__)


class DoctorService:
    async def list_doctors(self, db: AsyncSession) -> list[dict]:
        result = await db.execute(select(Doctor).order_by(Doctor.id))
        return [d.to_document() for d in result.scalars().all()]

    async def create_doctor(self, db: AsyncSession, data: DoctorCreate) -> InsertResult:
        doctor = Doctor(email=data.email, profile=data.profile())
        db.add(doctor)
        await db.commit()
        logger.info("doctor_created", email=data.email, doctor_id=doctor.id)
        return InsertResult(inserted_id=str(doctor.id))

    async def delete_doctor(self, db: AsyncSession, email: str) -> DeleteResult:
        """Remove every doctor record registered under ``email``."""
        result = await db.execute(delete(Doctor).where(Doctor.email == email))
        await db.commit()
        logger.info("doctor_deleted", email=email, deleted=result.rowcount)
        return DeleteResult(deleted_count=result.rowcount)


doctor_service = DoctorService()
