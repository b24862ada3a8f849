import uuid
from typing import Annotated

from pydantic import BaseModel, Field

ByteValue = Annotated[int, Field(ge=0, le=255)]


class SafeMetadataSchema(BaseModel):
    size: int = Field(ge=0)
    version: int = Field(ge=1)


class SafeMetadataPatch(BaseModel):
    version: int = Field(ge=1)
    # Ignored: size always follows the stored blob.
    size: int | None = Field(default=None, ge=0)


class CreateSafeRequest(BaseModel):
    id: uuid.UUID | None = None
    encrypted_blob: list[ByteValue]
    metadata: SafeMetadataSchema | None = None


class EditSafeRequest(BaseModel):
    id: uuid.UUID | None = None
    encrypted_blob: list[ByteValue] | None = None
    metadata: SafeMetadataPatch | None = None


class CreateSafeResponse(BaseModel):
    id: uuid.UUID
    created_at: str
    metadata: SafeMetadataSchema


class EditSafeResponse(BaseModel):
    id: uuid.UUID
    updated_at: str
    metadata: SafeMetadataSchema


class GetSafeResponse(BaseModel):
    id: uuid.UUID
    encrypted_blob: list[int]
    created_at: str
    updated_at: str
    metadata: SafeMetadataSchema


class SafeListResponse(BaseModel):
    safes: list[GetSafeResponse]
    count: int
