"""Controllers that route requests between views and data access."""

from __future__ import annotations

from typing import Any, Protocol

from pacshop.abstractions import (
    LandingPageAbstraction,
    OrderAbstraction,
    ProductAbstraction,
)
from pacshop.models import Order, Product, User, UserType


class OrderView(Protocol):
    """Something that can render orders for a request."""

    def show_order(self, message: Any) -> Any:
        """Render the orders for the request carried by the message."""
        ...


class ProductView(Protocol):
    """Something that can render products for a request."""

    def show_product(self, message: Any) -> Any:
        """Render the products for the request carried by the message."""
        ...


class ProductController:
    """Chooses which products a user sees and forwards rendering to a view."""

    def __init__(self, abstraction: ProductAbstraction) -> None:
        self._abstraction = abstraction
        self._presenter: ProductView | None = None

    def products_for_user(self, user: User) -> list[Product]:
        """Customers see every product; sellers see only their own."""
        if user.user_type is UserType.CUSTOMER:
            return list(self._abstraction.all_products())
        return self._abstraction.products_for_seller(user)

    def create_product(self, product: Product) -> None:
        """Store a new product."""
        self._abstraction.create_product(product)

    def subscribe(self, presenter: ProductView) -> None:
        """Register the view that renders products."""
        self._presenter = presenter

    def notify(self, message: Any) -> Any:
        """Ask the subscribed view to render; returns what the view returns."""
        if self._presenter is None:
            raise RuntimeError("no product presenter subscribed")
        return self._presenter.show_product(message)


class OrderController:
    """Chooses which orders a user sees and forwards rendering to a view."""

    def __init__(self, abstraction: OrderAbstraction) -> None:
        self._abstraction = abstraction
        self._presenter: OrderView | None = None

    def orders_for_user(self, user: User) -> list[Order]:
        """Customers see their own orders; sellers see orders holding their products."""
        if user.user_type is UserType.CUSTOMER:
            return self._abstraction.orders_for_customer(user)
        return self._abstraction.orders_for_seller(user)

    def create_order(self, order: Order) -> None:
        """Store a new order."""
        self._abstraction.create_order(order)

    def subscribe(self, presenter: OrderView) -> None:
        """Register the view that renders orders."""
        self._presenter = presenter

    def notify(self, message: Any) -> Any:
        """Ask the subscribed view to render; returns what the view returns."""
        if self._presenter is None:
            raise RuntimeError("no order presenter subscribed")
        return self._presenter.show_order(message)


class LandingPageController:
    """Looks up users and delegates product and order work."""

    def __init__(
        self,
        abstraction: LandingPageAbstraction,
        product_controller: ProductController,
        order_controller: OrderController,
    ) -> None:
        self._abstraction = abstraction
        self._products = product_controller
        self._orders = order_controller

    def get_user(self, user_id: int) -> User:
        """Return the user with the given id, or raise NoSuchUserError."""
        return self._abstraction.get_user(user_id)

    def order_view(self, message: Any) -> Any:
        """Have the order view render for the message."""
        return self._orders.notify(message)

    def product_view(self, message: Any) -> Any:
        """Have the product view render for the message."""
        return self._products.notify(message)

    def create_order(self, order: Order) -> None:
        """Store a new order."""
        self._orders.create_order(order)

    def create_product(self, product: Product) -> None:
        """Store a new product."""
        self._products.create_product(product)