from pydantic import BaseModel
from typing import Any, Dict


class DoctorCreate(BaseModel):
    email: str

    class Config:
        extra = "allow"

    def profile(self) -> Dict[str, Any]:
        data = dict(self.model_extra or {})
        data.pop("_id", None)
        return data
