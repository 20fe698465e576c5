"""
Tests for app.services.infrastructure.storage.json_store
"""

import json

from app.services.infrastructure.storage import JsonRecordStore, PlaylistRecord


class TestJsonRecordStore:
    """Disk-first record store"""

    def test_save_and_get(self, tmp_path):
        store = JsonRecordStore(tmp_path, PlaylistRecord)

        saved = store.save(PlaylistRecord(url="https://x/list=1", title="One"))

        assert store.get(saved.id).title == "One"
        assert (tmp_path / f"{saved.id}.json").exists()
        assert len(store) == 1

    def test_records_survive_a_new_instance(self, tmp_path):
        saved = JsonRecordStore(tmp_path, PlaylistRecord).save(PlaylistRecord(url="u", title="Kept"))

        reloaded = JsonRecordStore(tmp_path, PlaylistRecord)

        assert reloaded.get(saved.id).title == "Kept"

    def test_callers_get_copies(self, tmp_path):
        store = JsonRecordStore(tmp_path, PlaylistRecord)
        saved = store.save(PlaylistRecord(url="u", title="Original"))

        fetched = store.get(saved.id)
        fetched.title = "Mutated"

        assert store.get(saved.id).title == "Original"

    def test_save_refreshes_updated_at(self, tmp_path):
        store = JsonRecordStore(tmp_path, PlaylistRecord)
        record = PlaylistRecord(url="u")
        record.updated_at = "2000-01-01T00:00:00+00:00"

        saved = store.save(record)

        assert saved.updated_at > "2000-01-01T00:00:00+00:00"
        assert saved.created_at == record.created_at

    def test_corrupt_file_is_skipped(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        store = JsonRecordStore(tmp_path, PlaylistRecord)

        assert store.get("broken") is None
        assert store.list() == []

    def test_unknown_fields_are_ignored(self, tmp_path):
        (tmp_path / "p1.json").write_text(
            json.dumps({"id": "p1", "url": "u", "legacy_field": True}),
            encoding="utf-8",
        )

        assert JsonRecordStore(tmp_path, PlaylistRecord).get("p1").url == "u"

    def test_list_with_predicate_and_delete(self, tmp_path):
        store = JsonRecordStore(tmp_path, PlaylistRecord)
        keep = store.save(PlaylistRecord(url="keep"))
        drop = store.save(PlaylistRecord(url="drop"))

        assert [p.id for p in store.list(lambda p: p.url == "keep")] == [keep.id]
        assert store.delete(drop.id) is True
        assert store.delete(drop.id) is False
        assert store.find_one(lambda p: p.url == "drop") is None
