import uuid
from datetime import timedelta

from safe_api.domain.models import INITIAL_VERSION, Safe, SafeMetadata


def test_new_generates_id_and_derives_metadata():
    safe = Safe.new(None, bytearray(b"\x01\x02\x03"))

    assert isinstance(safe.id, uuid.UUID)
    assert safe.id.version == 4
    assert safe.encrypted_blob == b"\x01\x02\x03"
    assert isinstance(safe.encrypted_blob, bytes)
    assert safe.metadata == SafeMetadata(size=3, version=INITIAL_VERSION)
    assert safe.created_at == safe.updated_at
    assert safe.created_at.tzinfo is not None


def test_new_keeps_caller_id_and_accepts_empty_blob():
    given = uuid.uuid4()
    safe = Safe.new(given, b"")

    assert safe.id == given
    assert safe.metadata.size == 0


def test_new_ids_are_distinct():
    ids = {Safe.new(None, b"x").id for _ in range(200)}
    assert len(ids) == 200


def test_update_replaces_only_given_fields():
    safe = Safe.new(None, b"abc")

    safe.update(metadata=SafeMetadata(size=999, version=7))
    assert safe.encrypted_blob == b"abc"
    assert safe.metadata == SafeMetadata(size=3, version=7)

    safe.update(encrypted_blob=b"z")
    assert safe.encrypted_blob == b"z"
    assert safe.metadata == SafeMetadata(size=1, version=7)


def test_noop_update_still_refreshes_timestamp():
    safe = Safe.new(None, b"abc")
    before = safe.updated_at

    safe.update()

    assert safe.updated_at >= before
    assert safe.created_at <= safe.updated_at
    assert safe.encrypted_blob == b"abc"


def test_update_never_moves_timestamp_backwards():
    safe = Safe.new(None, b"abc")
    future = safe.updated_at + timedelta(hours=1)
    safe.updated_at = future

    safe.update(encrypted_blob=b"def")

    assert safe.updated_at == future


def test_snapshot_is_detached():
    safe = Safe.new(None, b"abc")
    copy = safe.snapshot()

    copy.update(encrypted_blob=b"changed", metadata=SafeMetadata(size=0, version=5))

    assert safe.encrypted_blob == b"abc"
    assert safe.metadata.version == INITIAL_VERSION
    assert copy.id == safe.id
