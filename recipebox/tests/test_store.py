import json
import pytest
from recipebox.infra.store import InMemoryStore, JsonFileStore, StorageError


@pytest.mark.asyncio
async def test_in_memory_store_basic_operations():
    store = InMemoryStore({"recipe_index": ["a"]})
    assert await store.get("missing") is None
    assert await store.get("missing", []) == []
    await store.set("users:1", {"id": "1"})
    await store.set("users:2", {"id": "2"})
    assert sorted(await store.list("users:")) == ["users:1", "users:2"]
    await store.delete("users:1")
    await store.delete("users:1")
    assert await store.list("users:") == ["users:2"]
    assert await store.get("recipe_index") == ["a"]


@pytest.mark.asyncio
async def test_in_memory_store_returns_copies():
    store = InMemoryStore()
    value = {"items": [1]}
    await store.set("k", value)
    value["items"].append(2)
    loaded = await store.get("k")
    loaded["items"].append(3)
    assert await store.get("k") == {"items": [1]}


@pytest.mark.asyncio
async def test_unserializable_value_raises_storage_error():
    store = InMemoryStore()
    with pytest.raises(StorageError):
        await store.set("k", {"when": object()})


@pytest.mark.asyncio
async def test_json_file_store_persists(tmp_path):
    path = tmp_path / "store.json"
    store = JsonFileStore(path)
    assert await store.get("recipe_index", []) == []
    await store.set("recipe_index", ["r1"])
    await store.set("recipes:r1", {"name": "Soup"})
    assert json.loads(path.read_text(encoding="utf-8"))["recipes:r1"] == {"name": "Soup"}

    reopened = JsonFileStore(path)
    assert await reopened.get("recipe_index") == ["r1"]
    assert await reopened.list("recipes:") == ["recipes:r1"]
    await reopened.delete("recipes:r1")
    assert await store.get("recipes:r1") is None


@pytest.mark.asyncio
async def test_json_file_store_corrupt_file_reads_default(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)
    assert await store.get("current_user", "fallback") == "fallback"
    assert await store.list("") == []


@pytest.mark.asyncio
async def test_json_file_store_refuses_to_overwrite_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    content = '{"recipes:r1": {"name": "Soup"}, "recipe_index": ["r1"],'
    path.write_text(content, encoding="utf-8")
    store = JsonFileStore(path)
    with pytest.raises(StorageError):
        await store.set("current_user", {"id": "u"})
    with pytest.raises(StorageError):
        await store.delete("recipe_index")
    assert path.read_text(encoding="utf-8") == content


@pytest.mark.asyncio
async def test_json_file_store_rejects_non_object_document(tmp_path):
    path = tmp_path / "store.json"
    path.write_text('["r1"]', encoding="utf-8")
    store = JsonFileStore(path)
    assert await store.get("recipe_index", []) == []
    with pytest.raises(StorageError):
        await store.set("recipe_index", ["r2"])
    assert path.read_text(encoding="utf-8") == '["r1"]'
