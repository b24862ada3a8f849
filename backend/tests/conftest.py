import os
import sys
from pathlib import Path

import pytest

# Keep tests deterministic and local-only.
os.environ["SAFE_SKIP_DOTENV"] = "1"
os.environ["SAFE_STORAGE_BACKEND"] = "memory"
os.environ["SAFE_CORS_ORIGINS"] = "http://localhost:3000"
os.environ["SAFE_LOG_LEVEL"] = "WARNING"

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def fresh_app_storage():
    from safe_api.api.v1.dependencies import get_storage

    get_storage.cache_clear()
    yield
    get_storage.cache_clear()
