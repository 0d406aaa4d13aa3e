from pydantic import BaseModel
from typing import Any, Dict


class BookingCreate(BaseModel):
    treatment: str
    date: str
    patient: str
    slot: str

    class Config:
        extra = "allow"

    def details(self) -> Dict[str, Any]:
        data = dict(self.model_extra or {})
        data.pop("_id", None)
        return data
