"""Unit tests for ItemStore."""
from concurrent.futures import ThreadPoolExecutor

from itemstore.schemas import Item
from itemstore.storage import ItemStore


class TestItemStore:
    def test_new_store_is_empty(self):
        store = ItemStore()
        assert len(store) == 0
        assert store.list() == []
        assert store.get("missing") is None

    def test_put_then_get(self):
        store = ItemStore()
        store.put("a", Item(id="a", name="x"))
        assert store.get("a") == Item(id="a", name="x")

    def test_put_overwrites(self):
        store = ItemStore()
        store.put("a", Item(id="a", name="x"))
        store.put("a", Item(id="a", name="y"))
        assert len(store) == 1
        assert store.get("a").name == "y"

    def test_delete_reports_whether_removed(self):
        store = ItemStore()
        store.put("a", Item(id="a", name="x"))
        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.get("a") is None

    def test_list_returns_every_item(self):
        store = ItemStore()
        store.put("a", Item(id="a", name="x"))
        store.put("b", Item(id="b", name="x"))
        assert sorted(item.id for item in store.list()) == ["a", "b"]

    def test_stored_items_are_isolated_from_callers(self):
        store = ItemStore()
        original = Item(id="a", name="x")
        store.put("a", original)
        original.name = "changed"
        fetched = store.get("a")
        fetched.name = "also changed"
        assert store.get("a").name == "x"

    def test_clear(self):
        store = ItemStore()
        store.put("a", Item(id="a"))
        store.clear()
        assert len(store) == 0

    def test_concurrent_puts_are_all_kept(self):
        store = ItemStore()
        ids = [f"item-{n}" for n in range(200)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(lambda item_id: store.put(item_id, Item(id=item_id)), ids))

        assert len(store) == len(ids)
        assert {item.id for item in store.list()} == set(ids)
