"""Write-result payloads, shaped like the document-store results clients already read."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class WriteResult(BaseModel):
    acknowledged: bool = True

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class InsertResult(WriteResult):
    inserted_id: str


class UpdateResult(WriteResult):
    matched_count: int = 0
    modified_count: int = 0
    upserted_id: Optional[str] = None
    upserted_count: int = 0


class DeleteResult(WriteResult):
    deleted_count: int = 0
