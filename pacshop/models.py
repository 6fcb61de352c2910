"""Domain objects for the shop: users, products and orders."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class UserType(enum.Enum):
    """Role a user plays in the shop."""

    CUSTOMER = "CUSTOMER"
    SELLER = "SELLER"


@dataclass(frozen=True)
class User:
    """A customer or a seller."""

    id: int
    user_type: UserType
    first_name: str
    last_name: str
    address: str
    account_no: str


@dataclass
class Product:
    """A product offered for sale by a seller."""

    id: int
    name: str
    quantity: int
    seller: User


@dataclass
class Order:
    """An order placed by a customer; it holds its own copies of the products."""

    id: int
    customer: User
    products: list[Product] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.products = [replace(product) for product in self.products]


class NoSuchUserError(LookupError):
    """Raised when a user id is not known."""