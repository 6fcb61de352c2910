"""Web application wiring the shop's agents to HTTP routes."""

from __future__ import annotations

import argparse
from typing import Any

from flask import Flask, request

from pacshop.abstractions import (
    LandingPageAbstraction,
    OrderAbstraction,
    ProductAbstraction,
)
from pacshop.controllers import (
    LandingPageController,
    OrderController,
    ProductController,
)
from pacshop.database import Database
from pacshop.models import NoSuchUserError, Order, Product
from pacshop.presenters import (
    LandingPagePresenter,
    Message,
    OrderPresenter,
    ProductPresenter,
)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def parse_product(payload: Any, controller: LandingPageController) -> Product:
    """Build a product from a decoded JSON object, resolving its seller."""
    return Product(
        id=_as_int(payload["id"]),
        name=_as_str(payload["name"]),
        quantity=_as_int(payload["quantity"]),
        seller=controller.get_user(_as_int(payload["seller"]["id"])),
    )


def parse_order(payload: Any, controller: LandingPageController) -> Order:
    """Build an order from a decoded JSON object, resolving its users."""
    order_id = _as_int(payload["id"])
    customer = controller.get_user(_as_int(payload["customer"]["id"]))
    products = [parse_product(item, controller) for item in payload["products"]]
    return Order(id=order_id, customer=customer, products=products)


def create_app(db: Database | None = None) -> Flask:
    """Build the application and its agents over the given store."""
    db = db if db is not None else Database()

    product_controller = ProductController(ProductAbstraction(db))
    ProductPresenter(product_controller)
    order_controller = OrderController(OrderAbstraction(db))
    OrderPresenter(order_controller)
    landing_controller = LandingPageController(
        LandingPageAbstraction(db), product_controller, order_controller
    )
    landing_page = LandingPagePresenter(landing_controller)

    app = Flask(__name__)

    @app.errorhandler(NoSuchUserError)
    def _unknown_user(error: NoSuchUserError):
        return str(error), 500

    @app.get("/<int(signed=True):user_id>")
    def landing(user_id: int):
        return landing_page.show_page(user_id)

    @app.get("/product/<int(signed=True):user_id>")
    def product_view(user_id: int):
        message = Message(user=landing_controller.get_user(user_id), request=request)
        return landing_controller.product_view(message)

    @app.get("/order/<int(signed=True):user_id>")
    def order_view(user_id: int):
        message = Message(user=landing_controller.get_user(user_id), request=request)
        return landing_controller.order_view(message)

    @app.post("/order")
    def create_order():
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            return "Invalid JSON", 400
        try:
            landing_controller.create_order(parse_order(payload, landing_controller))
        except Exception as error:  # any failure is reported to the client
            return f"Error creating order: {error}", 500
        return "Order created successfully", 201

    @app.post("/product")
    def create_product():
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            return "Invalid JSON", 400
        try:
            landing_controller.create_product(parse_product(payload, landing_controller))
        except Exception as error:  # any failure is reported to the client
            return f"Error creating product: {error}", 500
        return "Product created successfully", 201

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the shop web server."""
    parser = argparse.ArgumentParser(description="Run the shop web server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())