"""HTML views for the landing page, the product list and the order list."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Any

from pacshop.controllers import (
    LandingPageController,
    OrderController,
    ProductController,
)
from pacshop.models import User, UserType

_TABLE_STYLE = (
    "<style>"
    "table, th, td {"
    "border: 1px solid black;"
    "border-collapse: collapse;"
    "}"
    "</style>"
)

_RELOAD_SCRIPT = (
    "<script>"
    'window.setInterval("reloadIFrame30k();", 30000);'
    'window.setInterval("reloadIFrame500();", 500);'
    "function reloadIFrame30k() {"
    "document.getElementById('ProductsViewId').contentWindow.location.reload();"
    "}"
    "function reloadIFrame500() {"
    "document.getElementById('OrdersViewId').contentWindow.location.reload();"
    "}"
    "</script>"
)

_ORDER_HEAD = """
    <!DOCTYPE html>
    <html>
    <head>
        <style>
            table, th, td {
                border: 1px solid black;
                border-collapse: collapse;
            }
        </style>
    </head>
    <body>
    <p>This is the sample order presenter</p>
    <table>
        <tr>
            <th>Order ID</th>
            <th>Customer Name</th>
            <th>Products</th>
        </tr>
    """

_PRODUCT_HEAD = """
    <!DOCTYPE html>
    <html>
    <head>
        <style>
            table, th, td {
                border: 1px solid black;
                border-collapse: collapse;
            }
        </style>
    </head>
    <body>
    <p>This is the sample product presenter</p>
    <table>
        <tr>
            <th>Product ID</th>
            <th>Product Name</th>
            <th>Quantity</th>
            <th>Seller Name</th>
        </tr>
    """

_TABLE_TAIL = """
    </table>
    </body>
    </html>
    """


@dataclass(frozen=True)
class Message:
    """A request to render a view for a given user."""

    user: User
    request: Any = None


def _row(*cells: object) -> str:
    return "<tr>" + "".join(f"<td>{escape(str(cell))}</td>" for cell in cells) + "</tr>"


class LandingPagePresenter:
    """Renders the landing page of a user, with product and order frames."""

    def __init__(self, controller: LandingPageController) -> None:
        self._controller = controller

    def show_page(self, user_id: int) -> str:
        """Return the landing page HTML; raises NoSuchUserError for unknown ids."""
        user = self._controller.get_user(user_id)
        role = "CUSTOMER" if user.user_type is UserType.CUSTOMER else "SELLER"
        name = f"{escape(user.first_name)} {escape(user.last_name)}"
        return "".join(
            [
                "<!DOCTYPE html>",
                "<html>",
                "<head>",
                _TABLE_STYLE,
                _RELOAD_SCRIPT,
                "</head>",
                "<body>",
                "<p>This is the sample landing page presenter</p>",
                f"<p>Logged in user ID: {user.id}, name: {name}</p>",
                f"<p>User role: {role}</p>",
                f"<iframe src='/product/{user.id}' title='Products' "
                "id='ProductsViewId' width='45%' height='500'></iframe>",
                f"<iframe src='/order/{user.id}' title='Orders' "
                "id='OrdersViewId' width='45%' height='500'></iframe>",
                "</body>",
                "</html>",
            ]
        )


class OrderPresenter:
    """Renders the orders a user may see; subscribes itself to its controller."""

    def __init__(self, controller: OrderController) -> None:
        self._controller = controller
        controller.subscribe(self)

    def show_order(self, message: Message) -> str:
        """Return an HTML table with one row per product of each order."""
        orders = self._controller.orders_for_user(message.user)
        rows = "".join(
            _row(order.id, order.customer.first_name, product.name)
            for order in orders
            for product in order.products
        )
        return _ORDER_HEAD + rows + _TABLE_TAIL


class ProductPresenter:
    """Renders the products a user may see; subscribes itself to its controller."""

    def __init__(self, controller: ProductController) -> None:
        self._controller = controller
        controller.subscribe(self)

    def show_product(self, message: Message) -> str:
        """Return an HTML table with one row per product."""
        products = self._controller.products_for_user(message.user)
        rows = "".join(
            _row(product.id, product.name, product.quantity, product.seller.first_name)
            for product in products
        )
        return _PRODUCT_HEAD + rows + _TABLE_TAIL