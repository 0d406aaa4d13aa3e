from sqlalchemy import Column, Integer, String, JSON, DateTime
from sqlalchemy.sql import func
from doctor_portal.database import Base


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(200), nullable=False, index=True)
    profile = Column(JSON, default=dict)  # name, specialty, img, ...
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_document(self) -> dict:
        return {"_id": str(self.id), **(self.profile or {}), "email": self.email}
