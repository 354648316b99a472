from decimal import Decimal

import pytest

from wholesale.core.errors import InvalidQuantity
from wholesale.storefront.cart import CartItem, CartStore
from wholesale.storefront.storage import MemoryStorage


def make_item(product_id="p1", sku_id="s1", quantity=1, price="10", **extra) -> CartItem:
    return CartItem(
        id=CartItem.make_id(product_id, sku_id),
        product_id=product_id,
        product_name=f"Product {product_id}",
        sku_id=sku_id,
        quantity=quantity,
        price=Decimal(price),
        **extra,
    )


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def cart(storage):
    return CartStore(storage)


def test_make_id_is_product_dash_sku():
    assert CartItem.make_id("p1", "s1") == "p1-s1"


def test_same_identity_merges_quantity_and_keeps_first_price(cart):
    cart.add_item(make_item(quantity=2, price="10"))
    cart.add_item(make_item(quantity=3, price="99", specs="changed"))

    assert len(cart.items) == 1
    item = cart.get_item("p1-s1")
    assert item.quantity == 5
    assert item.price == Decimal("10")
    assert item.specs is None


def test_new_items_are_appended_in_order(cart):
    cart.add_item(make_item("p1", "s1"))
    cart.add_item(make_item("p2", "s1"))
    cart.add_item(make_item("p1", "s2"))
    cart.add_item(make_item("p1", "s1"))

    assert [i.id for i in cart.items] == ["p1-s1", "p2-s1", "p1-s2"]


@pytest.mark.parametrize("quantity", [0, -3])
def test_add_item_rejects_non_positive_quantity(cart, quantity):
    with pytest.raises(InvalidQuantity):
        cart.add_item(make_item(quantity=quantity))
    assert cart.items == []


def test_remove_missing_id_is_a_noop(cart):
    cart.add_item(make_item(quantity=2))
    before = [i.model_dump() for i in cart.items]

    cart.remove_item("nope")

    assert [i.model_dump() for i in cart.items] == before


def test_remove_item(cart):
    cart.add_item(make_item("p1", "s1"))
    cart.add_item(make_item("p2", "s2"))
    cart.remove_item("p1-s1")
    assert [i.id for i in cart.items] == ["p2-s2"]


def test_update_quantity_replaces_and_ignores_unknown_ids(cart):
    cart.add_item(make_item(quantity=2))
    cart.update_quantity("p1-s1", 7)
    cart.update_quantity("missing", 3)

    assert cart.total_items() == 7
    assert len(cart.items) == 1


@pytest.mark.parametrize("quantity", [0, -2])
def test_update_quantity_stores_non_positive_values(cart, quantity):
    cart.add_item(make_item(quantity=2))
    cart.update_quantity("p1-s1", quantity)

    assert cart.get_item("p1-s1").quantity == quantity
    assert cart.total_items() == quantity


def test_totals(cart):
    cart.add_item(make_item("p1", "s1", quantity=2, price="10"))
    cart.add_item(make_item("p2", "s2", quantity=1, price="5"))

    assert cart.total_items() == 3
    assert cart.total_price() == Decimal("25")


def test_empty_cart_totals_are_zero(cart):
    assert cart.total_items() == 0
    assert cart.total_price() == Decimal("0")
    assert cart.cart_type() is None


def test_clear_cart(cart):
    cart.add_item(make_item())
    cart.clear_cart()
    assert cart.items == []


def test_state_survives_reload(storage, cart):
    cart.add_item(make_item(quantity=2, price="12.50", color="Red"))
    cart.update_quantity("p1-s1", -1)

    reloaded = CartStore(storage)

    assert [i.model_dump() for i in reloaded.items] == [i.model_dump() for i in cart.items]
    assert reloaded.get_item("p1-s1").price == Decimal("12.50")
    assert reloaded.get_item("p1-s1").quantity == -1


def test_every_mutation_is_saved(storage, cart):
    cart.add_item(make_item(quantity=2))
    assert storage.load("rfq-cart-storage")["items"][0]["quantity"] == 2

    cart.clear_cart()
    assert storage.load("rfq-cart-storage") == {"items": []}


def test_reset_drops_persisted_state(storage, cart):
    cart.add_item(make_item())
    cart.reset()

    assert cart.items == []
    assert storage.load("rfq-cart-storage") is None


def test_items_are_copies(cart):
    cart.add_item(make_item(quantity=2))
    cart.items[0].quantity = 50
    assert cart.total_items() == 2


def test_cart_type_and_order_payload(cart):
    cart.add_item(make_item("p1", "s1", quantity=2, price="10", type="SAMPLE"))
    cart.add_item(make_item("p2", "s2", quantity=1, price="5"))

    assert cart.cart_type() == "SAMPLE"
    payload = cart.to_order_payload(note="rush")
    assert payload["type"] == "SAMPLE"
    assert payload["note"] == "rush"
    assert payload["items"] == [
        {"product_id": "p1", "sku_id": "s1", "quantity": 2, "unit_price": "10"},
        {"product_id": "p2", "sku_id": "s2", "quantity": 1, "unit_price": "5"},
    ]
