# tests/test_store.py
from product_api.database import ProductStore, SEED_PRODUCTS
from product_api.models import Product


def _product(pid, name="Desk"):
    return Product(id=pid, name=name, description="Oak desk", price=150, category="office")


def test_seeded_store_keeps_insertion_order():
    store = ProductStore.seeded()
    assert [p.id for p in store.list()] == [p["id"] for p in SEED_PRODUCTS]
    assert len(store) == 3


def test_list_returns_a_copy():
    store = ProductStore.seeded()
    listed = store.list()
    listed.clear()
    assert len(store.list()) == 3


def test_get_by_id_and_find_index():
    store = ProductStore.seeded()
    assert store.get_by_id("2").name == "Smartphone"
    assert store.get_by_id("999") is None
    assert store.find_index("3") == 2
    assert store.find_index("999") == -1


def test_append_replace_remove():
    store = ProductStore()
    store.append(_product("a"))
    store.append(_product("b"))
    store.replace_at(0, _product("a", name="Standing desk"))
    assert store.get_by_id("a").name == "Standing desk"

    removed = store.remove_at(1)
    assert removed.id == "b"
    assert [p.id for p in store.list()] == ["a"]


def test_append_does_not_check_uniqueness():
    store = ProductStore()
    store.append(_product("x"))
    store.append(_product("x"))
    assert len(store) == 2
