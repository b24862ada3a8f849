from __future__ import annotations

from functools import lru_cache

from safe_api.core.config import get_settings
from safe_api.infra.ports.storage import SafeStoragePort
from safe_api.infra.storage.factory import build_storage


@lru_cache(maxsize=1)
def get_storage() -> SafeStoragePort:
    return build_storage(get_settings())


async def provide_storage() -> SafeStoragePort:
    return get_storage()
