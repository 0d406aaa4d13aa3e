from sqlalchemy import Column, Integer, String, JSON, DateTime
from sqlalchemy.sql import func
from doctor_portal.database import Base

ADMIN_ROLE = "admin"
PATIENT_ROLE = "patient"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(200), unique=True, nullable=False, index=True)
    role = Column(String(20), nullable=True)  # "patient" | "admin" | None
    profile = Column(JSON, default=dict)  # free-form fields sent on upsert
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    def to_document(self) -> dict:
        doc = {"_id": str(self.id), **(self.profile or {}), "email": self.email}
        if self.role:
            doc["role"] = self.role
        return doc
