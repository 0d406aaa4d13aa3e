from sqlalchemy import Column, Integer, String, JSON, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from doctor_portal.database import Base


class Booking(Base):
    __tablename__ = "booking"
    __table_args__ = (
        UniqueConstraint("treatment", "date", "patient", name="uq_booking_treatment_date_patient"),
    )

    id = Column(Integer, primary_key=True, index=True)
    treatment = Column(String(200), nullable=False, index=True)  # Service.name
    date = Column(String(50), nullable=False, index=True)
    patient = Column(String(200), nullable=False, index=True)  # User.email
    slot = Column(String(100), nullable=False)
    details = Column(JSON, default=dict)  # extra client fields (patientName, phone, ...)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_document(self) -> dict:
        return {
            "_id": str(self.id),
            **(self.details or {}),
            "treatment": self.treatment,
            "date": self.date,
            "patient": self.patient,
            "slot": self.slot,
        }
