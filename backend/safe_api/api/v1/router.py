from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Response

from safe_api.api.v1.dependencies import provide_storage
from safe_api.api.v1.schemas.safe import (
    CreateSafeRequest,
    CreateSafeResponse,
    EditSafeRequest,
    EditSafeResponse,
    GetSafeResponse,
    SafeListResponse,
    SafeMetadataSchema,
)
from safe_api.domain.errors import InvalidDataError
from safe_api.domain.models import Safe, SafeMetadata, SafePatch
from safe_api.infra.ports.storage import SafeStoragePort
from safe_api.utils.ids import parse_safe_id

router = APIRouter(prefix="/safes", tags=["safes"])


def _millis(value: datetime) -> str:
    return str(int(value.timestamp() * 1000))


def _metadata(safe: Safe) -> SafeMetadataSchema:
    return SafeMetadataSchema(size=safe.metadata.size, version=safe.metadata.version)


def _to_detail(safe: Safe) -> GetSafeResponse:
    return GetSafeResponse(
        id=safe.id,
        encrypted_blob=list(safe.encrypted_blob),
        created_at=_millis(safe.created_at),
        updated_at=_millis(safe.updated_at),
        metadata=_metadata(safe),
    )


@router.post("", response_model=CreateSafeResponse, status_code=201)
async def create_safe(body: CreateSafeRequest, storage: SafeStoragePort = Depends(provide_storage)):
    # Client-sent metadata is not trusted; size and version are derived.
    created = storage.create_safe(Safe.new(body.id, bytes(body.encrypted_blob)))
    return CreateSafeResponse(
        id=created.id,
        created_at=_millis(created.created_at),
        metadata=_metadata(created),
    )


@router.get("", response_model=SafeListResponse)
async def list_safes(storage: SafeStoragePort = Depends(provide_storage)):
    items = [_to_detail(safe) for safe in storage.list_safes()]
    return SafeListResponse(safes=items, count=len(items))


@router.get("/{safeId}", response_model=GetSafeResponse)
async def get_safe(safeId: str, storage: SafeStoragePort = Depends(provide_storage)):
    return _to_detail(storage.get_safe(safeId))


@router.put("/{safeId}", response_model=EditSafeResponse)
async def edit_safe(safeId: str, body: EditSafeRequest, storage: SafeStoragePort = Depends(provide_storage)):
    if body.id is not None:
        try:
            path_id = parse_safe_id(safeId)
        except ValueError as exc:
            raise InvalidDataError(f"Malformed safe id: {safeId!r}") from exc
        if path_id != body.id:
            raise InvalidDataError("Body id does not match the path id")

    patch = SafePatch(
        encrypted_blob=bytes(body.encrypted_blob) if body.encrypted_blob is not None else None,
        metadata=SafeMetadata(size=0, version=body.metadata.version) if body.metadata is not None else None,
    )
    updated = storage.edit_safe(safeId, patch)
    return EditSafeResponse(
        id=updated.id,
        updated_at=_millis(updated.updated_at),
        metadata=_metadata(updated),
    )


@router.delete("/{safeId}", status_code=204)
async def delete_safe(safeId: str, storage: SafeStoragePort = Depends(provide_storage)):
    storage.delete_safe(safeId)
    return Response(status_code=204)
