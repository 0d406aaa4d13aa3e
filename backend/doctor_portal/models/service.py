from sqlalchemy import Column, Integer, String, JSON
from doctor_portal.database import Base


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False, index=True)
    slots = Column(JSON, default=list)  # ordered slot labels, e.g. "08.00 AM - 08.30 AM"

    def to_document(self) -> dict:
        return {"_id": str(self.id), "name": self.name, "slots": list(self.slots or [])}
