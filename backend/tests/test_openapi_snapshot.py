import json
from pathlib import Path

from safe_api.main import app


def test_openapi_contains_required_paths_snapshot():
    snapshot_path = Path(__file__).parent / "snapshots" / "openapi_required_paths.json"
    expected = json.loads(snapshot_path.read_text(encoding="utf-8"))

    schema = app.openapi()
    actual_paths = schema.get("paths", {})

    for required_path in expected["requiredPaths"]:
        assert required_path in actual_paths

    assert set(actual_paths["/safes"]) == {"get", "post"}
    assert set(actual_paths["/safes/{safeId}"]) == {"get", "put", "delete"}
