from __future__ import annotations

from abc import ABC, abstractmethod

from safe_api.domain.models import Safe, SafePatch


class SafeStoragePort(ABC):
    """Contract every safe storage backend fulfils.

    Identifiers are accepted as strings; backends parse them and raise
    ``InvalidDataError`` when they are malformed. Returned safes are copies.
    """

    @abstractmethod
    def create_safe(self, safe: Safe) -> Safe:
        """Persist a new safe. Duplicate ids are rejected, create is not an upsert."""

    @abstractmethod
    def get_safe(self, safe_id: str) -> Safe:
        """Return the safe stored under ``safe_id``."""

    @abstractmethod
    def edit_safe(self, safe_id: str, patch: SafePatch) -> Safe:
        """Replace the provided fields of an existing safe and return the result."""

    @abstractmethod
    def delete_safe(self, safe_id: str) -> None:
        """Remove a safe permanently."""

    @abstractmethod
    def list_safes(self) -> list[Safe]:
        """Return every stored safe, in no guaranteed order."""
