"""Data access for the landing page, orders and products."""

from __future__ import annotations

from pacshop.database import Database
from pacshop.models import NoSuchUserError, Order, Product, User


class LandingPageAbstraction:
    """Looks up users for the landing page."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def get_user(self, user_id: int) -> User:
        """Return the user with the given id, or raise NoSuchUserError."""
        for user in self._db.users:
            if user.id == user_id:
                return user
        raise NoSuchUserError(f"User with ID {user_id} not found.")


class OrderAbstraction:
    """Reads and records orders."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def orders_for_customer(self, customer: User) -> list[Order]:
        """Return the orders placed by the given customer."""
        return [order for order in self._db.orders if order.customer.id == customer.id]

    def orders_for_seller(self, seller: User) -> list[Order]:
        """Return the orders holding at least one product sold by the given seller."""
        return [
            order
            for order in self._db.orders
            if any(product.seller.id == seller.id for product in order.products)
        ]

    def create_order(self, order: Order) -> None:
        """Store a new order."""
        self._db.orders.append(order)


class ProductAbstraction:
    """Reads and records products."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def all_products(self) -> list[Product]:
        """Return the stored product list itself."""
        return self._db.products

    def products_for_seller(self, seller: User) -> list[Product]:
        """Return the products owned by the given seller."""
        return [product for product in self._db.products if product.seller.id == seller.id]

    def create_product(self, product: Product) -> None:
        """Store a new product."""
        self._db.products.append(product)