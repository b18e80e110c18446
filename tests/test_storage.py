from concurrent.futures import ThreadPoolExecutor

from repository.storage import StorageMap


def test_insert_if_absent_stores_once():
    storage = StorageMap()
    assert storage.insert_if_absent(1, "first")
    assert not storage.insert_if_absent(1, "second")
    assert storage.get(1) == "first"
    assert len(storage) == 1


def test_get_missing_returns_none():
    assert StorageMap().get(42) is None


def test_values_keep_insertion_order():
    storage = StorageMap()
    for key in (5, 1, 3):
        storage.insert_if_absent(key, f"v{key}")
    assert storage.values() == ["v5", "v1", "v3"]


def test_values_is_a_snapshot():
    storage = StorageMap()
    storage.insert_if_absent(1, "a")
    snapshot = storage.values()
    storage.insert_if_absent(2, "b")
    assert snapshot == ["a"]


def test_concurrent_inserts_of_same_key_have_one_winner():
    storage = StorageMap()
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda n: storage.insert_if_absent(7, n), range(200)))
    assert results.count(True) == 1
    assert len(storage) == 1
