from __future__ import annotations

from safe_api.core.config import Settings
from safe_api.infra.ports.storage import SafeStoragePort
from safe_api.infra.storage.memory import InMemorySafeStorage


def create_in_memory_storage() -> SafeStoragePort:
    """Return a fresh, empty in-memory backend typed as the storage port."""
    return InMemorySafeStorage()


def build_storage(settings: Settings) -> SafeStoragePort:
    if settings.storage_backend == "memory":
        return create_in_memory_storage()
    raise RuntimeError(
        f"Unsupported SAFE_STORAGE_BACKEND={settings.storage_backend!r}. Supported backends: memory"
    )
