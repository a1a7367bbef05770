"""Domain records of the sandwich shop: people, products and sandwiches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

SIZES = (15, 30)
MAX_VEGETABLES = 3


class ProductType(IntEnum):
    """Category of an ingredient sold by the shop."""

    BREAD = 1
    FILLING = 2
    CHEESE = 3
    SAUCE = 4
    VEGETABLE = 5


class Status(IntEnum):
    """Account state shared by clients, employees and administrators."""

    ACTIVE_CLIENT = 1
    MASTER_ADMIN = 2
    BLOCKED = 3
    ADMIN = 4
    EMPLOYEE = 5
    REMOVED = 6
    DISABLED = 7


@dataclass
class Person:
    """Personal data common to every account."""

    name: str = ""
    age: int = 0
    cpf: str = ""
    status: Status = Status.ACTIVE_CLIENT


@dataclass
class Address:
    """Postal address of a client."""

    street: str = ""
    number: int = 0
    complement: str = ""
    district: str = ""
    cep: str = ""
    city: str = ""
    state: str = ""


@dataclass
class Credentials:
    """Login name and password of an account."""

    login: str = ""
    password: str = ""


@dataclass
class Product:
    """An ingredient in stock, with its prices and running totals."""

    id: int
    name: str
    kind: ProductType
    cost_price: float = 0.0
    sale_price: float = 0.0
    total_cost: float = 0.0
    total_sales: float = 0.0
    quantity: int = 0
    purchased: int = 0
    sold: int = 0


@dataclass
class Sandwich:
    """A sandwich made of one bread, filling, cheese and sauce plus vegetables."""

    size: int = 15
    bread: Product | None = None
    filling: Product | None = None
    cheese: Product | None = None
    sauce: Product | None = None
    salad: list[Product] = field(default_factory=list)
    price: float = 0.0

    def portions(self) -> int:
        """Units of each ingredient the size takes: 1 for 15cm, 2 for 30cm."""
        if self.size == 15:
            return 1
        if self.size == 30:
            return 2
        raise ValueError(f"invalid sandwich size: {self.size}")

    def ingredients(self) -> list[Product]:
        """The chosen ingredients: bread, filling, cheese, sauce, then vegetables."""
        main = [self.bread, self.filling, self.cheese, self.sauce]
        return [product for product in main if product is not None] + list(self.salad)

    def compute_price(self) -> float:
        """Compute, store and return the price of the sandwich."""
        main = (self.bread, self.filling, self.cheese, self.sauce)
        if any(product is None for product in main):
            raise ValueError("sandwich is missing bread, filling, cheese or sauce")
        portions = self.portions()
        self.price = sum(product.sale_price for product in self.ingredients()) * portions
        return self.price


@dataclass
class Client:
    """A registered customer."""

    person: Person = field(default_factory=Person)
    address: Address = field(default_factory=Address)
    credentials: Credentials = field(default_factory=Credentials)
    purchases: int = 0
    last_sandwich: Sandwich | None = None


@dataclass
class Employee:
    """A shop employee."""

    person: Person = field(default_factory=lambda: Person(status=Status.EMPLOYEE))
    salary: float = 0.0


@dataclass
class Admin:
    """An administrator account."""

    person: Person = field(default_factory=lambda: Person(status=Status.ADMIN))
    credentials: Credentials = field(default_factory=Credentials)