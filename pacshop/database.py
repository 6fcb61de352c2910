"""In-memory store seeded with sample users, products and orders."""

from __future__ import annotations

from pacshop.models import Order, Product, User, UserType


class Database:
    """Holds lists of customers, sellers, users, products and orders."""

    def __init__(self) -> None:
        self.customers: list[User] = [
            User(0, UserType.CUSTOMER, "John", "Doe", "customer address 0", "123456"),
            User(1, UserType.CUSTOMER, "Serena", "Williams", "customer address 1", "234567"),
        ]
        self.sellers: list[User] = [
            User(2, UserType.SELLER, "Swift", "Taylor", "seller address 2", "345678"),
            User(3, UserType.SELLER, "Andrew", "Wilson", "seller address 3", "456789"),
        ]
        self.users: list[User] = [*self.customers, *self.sellers]

        first_seller, second_seller = self.sellers
        self.products: list[Product] = [
            Product(0, "Product0", 100, first_seller),
            Product(1, "Product1", 100, first_seller),
            Product(2, "Product2", 100, second_seller),
            Product(3, "Product3", 100, second_seller),
        ]

        p = self.products
        john, serena = self.customers
        self.orders: list[Order] = [
            Order(0, john, [p[0], p[3]]),
            Order(1, serena, [p[1], p[3]]),
            Order(0, serena, [p[1], p[2]]),
        ]