import pytest

from brainmark.client.storage import InMemoryStore, JsonFileStore, NullStore, StorageUnavailable


class TestInMemoryStore:
    def test_set_get_remove(self):
        store = InMemoryStore()
        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
        store.remove("k")
        assert store.get("k") is None

    def test_initial_values_copied(self):
        initial = {"k": "v"}
        store = InMemoryStore(initial)
        store.set("k", "changed")
        assert initial == {"k": "v"}


class TestNullStore:
    def test_remembers_nothing(self):
        store = NullStore()
        store.set("k", "v")
        assert store.get("k") is None
        store.remove("k")


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "store.json").get("k") is None

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonFileStore(path).set("k", "v")
        assert JsonFileStore(path).get("k") == "v"

    def test_remove(self, tmp_path):
        store = JsonFileStore(tmp_path / "store.json")
        store.set("a", "1")
        store.set("b", "2")
        store.remove("a")
        assert store.get("a") is None
        assert store.get("b") == "2"

    def test_corrupt_file_is_unavailable(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageUnavailable):
            JsonFileStore(path).get("k")

    def test_non_object_is_unavailable(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StorageUnavailable):
            JsonFileStore(path).get("k")

    def test_directory_path_is_unavailable(self, tmp_path):
        with pytest.raises(StorageUnavailable):
            JsonFileStore(tmp_path).get("k")
