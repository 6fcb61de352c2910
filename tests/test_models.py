import dataclasses

import pytest

from pacshop.models import NoSuchUserError, Order, Product, User, UserType


@pytest.fixture
def seller():
    return User(2, UserType.SELLER, "Swift", "Taylor", "seller address 2", "345678")


@pytest.fixture
def customer():
    return User(0, UserType.CUSTOMER, "John", "Doe", "customer address 0", "123456")


def test_user_fields(customer):
    assert customer.id == 0
    assert customer.user_type is UserType.CUSTOMER
    assert customer.first_name == "John"
    assert customer.last_name == "Doe"
    assert customer.address == "customer address 0"
    assert customer.account_no == "123456"


def test_user_is_immutable(customer):
    with pytest.raises(dataclasses.FrozenInstanceError):
        customer.id = 5
    assert customer.id == 0


def test_user_types_are_distinct():
    assert UserType.CUSTOMER is not UserType.SELLER
    assert UserType("SELLER") is UserType.SELLER


def test_product_can_be_updated(seller):
    product = Product(1, "Product1", 100, seller)
    product.quantity = 7
    product.name = "Renamed"
    assert product.quantity == 7
    assert product.name == "Renamed"
    assert product.seller == seller


def test_order_defaults_to_no_products(customer):
    order = Order(3, customer)
    assert order.products == []


def test_order_copies_products(customer, seller):
    product = Product(0, "Product0", 100, seller)
    source = [product]
    order = Order(0, customer, source)
    product.quantity = 1
    source.append(Product(1, "Product1", 100, seller))
    assert len(order.products) == 1
    assert order.products[0].quantity == 100
    assert order.products[0] is not product


def test_order_products_equal_to_originals(customer, seller):
    products = [Product(0, "Product0", 100, seller), Product(3, "Product3", 100, seller)]
    order = Order(1, customer, products)
    assert order.products == products
    assert order.customer == customer


def test_no_such_user_error_is_lookup_error():
    error = NoSuchUserError("User with ID 9 not found.")
    assert issubclass(NoSuchUserError, LookupError)
    assert error.args == ("User with ID 9 not found.",)
    with pytest.raises(LookupError) as excinfo:
        raise error
    assert excinfo.value is error