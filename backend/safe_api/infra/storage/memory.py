from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from safe_api.domain.errors import InternalError, InvalidDataError, NotFoundError, SafeError
from safe_api.domain.models import Safe, SafeMetadata, SafePatch
from safe_api.infra.ports.storage import SafeStoragePort
from safe_api.infra.storage.locks import ReadWriteLock
from safe_api.utils.ids import parse_safe_id

logger = logging.getLogger(__name__)


class InMemorySafeStorage(SafeStoragePort):
    """Process-local storage backed by a dict guarded by a readers-writer lock."""

    def __init__(self) -> None:
        self._safes: dict[uuid.UUID, Safe] = {}
        self._lock = ReadWriteLock()

    @staticmethod
    def _parse_id(safe_id: str) -> uuid.UUID:
        try:
            return parse_safe_id(safe_id)
        except ValueError as exc:
            raise InvalidDataError(f"Malformed safe id: {safe_id!r}") from exc

    @staticmethod
    def _check_version(version: int) -> None:
        if isinstance(version, bool) or not isinstance(version, int) or version < 1:
            raise InvalidDataError(f"metadata.version must be a positive integer, got {version!r}")

    @contextmanager
    def _guard(self, exclusive: bool) -> Iterator[None]:
        # Lock failures and unexpected errors inside the critical section
        # surface as InternalError; the lock is always released.
        hold = self._lock.write if exclusive else self._lock.read
        try:
            with hold():
                yield
        except SafeError:
            raise
        except Exception as exc:
            raise InternalError(f"In-memory storage failure: {exc}") from exc

    def create_safe(self, safe: Safe) -> Safe:
        if not safe.encrypted_blob:
            raise InvalidDataError("encrypted_blob must not be empty")
        self._check_version(safe.metadata.version)
        try:
            out_of_order = safe.created_at > safe.updated_at
        except TypeError as exc:
            raise InvalidDataError("created_at and updated_at are not comparable") from exc
        if out_of_order:
            raise InvalidDataError("created_at must not be later than updated_at")

        blob = bytes(safe.encrypted_blob)
        record = replace(
            safe,
            encrypted_blob=blob,
            metadata=SafeMetadata(size=len(blob), version=safe.metadata.version),
        )

        with self._guard(exclusive=True):
            if record.id in self._safes:
                raise InvalidDataError(f"Safe {record.id} already exists")
            self._safes[record.id] = record

        logger.info("Safe %s created (%d bytes)", record.id, record.metadata.size)
        return record.snapshot()

    def get_safe(self, safe_id: str) -> Safe:
        key = self._parse_id(safe_id)
        with self._guard(exclusive=False):
            found = self._safes.get(key)
            if found is None:
                raise NotFoundError(f"Safe {key} not found")
            return found.snapshot()

    def edit_safe(self, safe_id: str, patch: SafePatch) -> Safe:
        key = self._parse_id(safe_id)
        if patch.encrypted_blob is not None and not patch.encrypted_blob:
            raise InvalidDataError("encrypted_blob must not be empty")
        if patch.metadata is not None:
            self._check_version(patch.metadata.version)

        with self._guard(exclusive=True):
            existing = self._safes.get(key)
            if existing is None:
                raise NotFoundError(f"Safe {key} not found")
            updated = existing.snapshot()
            updated.update(patch.encrypted_blob, patch.metadata)
            self._safes[key] = updated

        logger.info("Safe %s updated (version=%d)", key, updated.metadata.version)
        return updated.snapshot()

    def delete_safe(self, safe_id: str) -> None:
        key = self._parse_id(safe_id)
        with self._guard(exclusive=True):
            if self._safes.pop(key, None) is None:
                raise NotFoundError(f"Safe {key} not found")

        logger.info("Safe %s deleted", key)

    def list_safes(self) -> list[Safe]:
        with self._guard(exclusive=False):
            return [safe.snapshot() for safe in self._safes.values()]

    def count(self) -> int:
        with self._guard(exclusive=False):
            return len(self._safes)

    def clear(self) -> None:
        with self._guard(exclusive=True):
            removed = len(self._safes)
            self._safes.clear()
        logger.debug("Cleared %d safes", removed)
