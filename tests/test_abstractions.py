import pytest

from pacshop.abstractions import (
    LandingPageAbstraction,
    OrderAbstraction,
    ProductAbstraction,
)
from pacshop.database import Database
from pacshop.models import NoSuchUserError, Order, Product, User, UserType


@pytest.fixture
def db():
    return Database()


def _new_seller():
    return User(42, UserType.SELLER, "New", "Seller", "somewhere", "000000")


def test_get_user_finds_seller(db):
    user = LandingPageAbstraction(db).get_user(2)
    assert user.first_name == "Swift"
    assert user.user_type is UserType.SELLER


def test_get_user_returns_each_known_user(db):
    abstraction = LandingPageAbstraction(db)
    for user in db.users:
        assert abstraction.get_user(user.id) == user


def test_get_user_unknown_raises(db):
    with pytest.raises(NoSuchUserError, match="User with ID 99 not found."):
        LandingPageAbstraction(db).get_user(99)


def test_orders_for_customer_only_their_orders(db):
    serena = db.customers[1]
    orders = OrderAbstraction(db).orders_for_customer(serena)
    assert len(orders) == 2
    assert all(order.customer.id == serena.id for order in orders)


def test_orders_for_customer_keeps_store_order(db):
    serena = db.customers[1]
    orders = OrderAbstraction(db).orders_for_customer(serena)
    assert orders == [db.orders[1], db.orders[2]]


def test_orders_for_seller_contain_seller_products(db):
    abstraction = OrderAbstraction(db)
    for seller in db.sellers:
        orders = abstraction.orders_for_seller(seller)
        assert orders
        for order in orders:
            assert any(p.seller.id == seller.id for p in order.products)


def test_orders_for_seller_without_sales_is_empty(db):
    assert OrderAbstraction(db).orders_for_seller(_new_seller()) == []


def test_order_with_several_seller_products_listed_once(db):
    seller = _new_seller()
    john = db.customers[0]
    items = [Product(10, "A", 1, seller), Product(11, "B", 1, seller)]
    abstraction = OrderAbstraction(db)
    abstraction.create_order(Order(7, john, items))
    orders = abstraction.orders_for_seller(seller)
    assert len(orders) == 1
    assert orders[0].id == 7


def test_create_order_then_found_for_customer(db):
    john = db.customers[0]
    abstraction = OrderAbstraction(db)
    before = len(abstraction.orders_for_customer(john))
    order = Order(5, john, [db.products[2]])
    abstraction.create_order(order)
    found = abstraction.orders_for_customer(john)
    assert len(found) == before + 1
    assert found[-1] is order


def test_all_products_is_store_list(db):
    assert ProductAbstraction(db).all_products() is db.products


def test_products_for_seller(db):
    swift = db.sellers[0]
    products = ProductAbstraction(db).products_for_seller(swift)
    assert [p.name for p in products] == ["Product0", "Product1"]


def test_create_product_round_trip(db):
    seller = _new_seller()
    abstraction = ProductAbstraction(db)
    product = Product(9, "Widget", 5, seller)
    abstraction.create_product(product)
    assert abstraction.all_products()[-1] is product
    assert abstraction.products_for_seller(seller) == [product]