from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from safe_api.utils.ids import new_safe_id

INITIAL_VERSION = 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SafeMetadata:
    size: int
    version: int = INITIAL_VERSION


@dataclass
class SafePatch:
    """Fields to replace on an existing safe. ``None`` keeps the stored value."""

    encrypted_blob: bytes | None = None
    metadata: SafeMetadata | None = None


@dataclass
class Safe:
    id: uuid.UUID
    encrypted_blob: bytes
    created_at: datetime
    updated_at: datetime
    metadata: SafeMetadata

    @classmethod
    def new(cls, id: uuid.UUID | None, encrypted_blob: bytes) -> Safe:
        # Emptiness is checked by the storage layer, not here.
        blob = bytes(encrypted_blob)
        now = _utcnow()
        return cls(
            id=id if id is not None else new_safe_id(),
            encrypted_blob=blob,
            created_at=now,
            updated_at=now,
            metadata=SafeMetadata(size=len(blob), version=INITIAL_VERSION),
        )

    def update(self, encrypted_blob: bytes | None = None, metadata: SafeMetadata | None = None) -> None:
        if encrypted_blob is not None:
            self.encrypted_blob = bytes(encrypted_blob)
        version = metadata.version if metadata is not None else self.metadata.version
        # size always follows the blob, whatever the caller sent
        self.metadata = SafeMetadata(size=len(self.encrypted_blob), version=version)
        self.updated_at = max(_utcnow(), self.updated_at)

    def snapshot(self) -> Safe:
        """Return a detached copy safe to hand outside the store."""
        return replace(self)
