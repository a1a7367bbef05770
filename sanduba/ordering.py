"""Sandwich ordering: stock checks, checkout with loyalty discount, recommendations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .inventory import UnknownProductError
from .models import Client, Product, ProductType, Sandwich

DISCOUNT_EVERY = 3
DISCOUNT_FACTOR = 0.7


class Availability(Enum):
    """Whether a product can go into a sandwich of a given size."""

    AVAILABLE = "available"
    ONLY_ONE_LEFT = "only_one_left"
    SOLD_OUT = "sold_out"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Receipt:
    """The outcome of buying one sandwich."""

    sandwich: Sandwich
    price: float
    charged: float
    discount: float

    @property
    def discounted(self) -> bool:
        return self.discount > 0


def check_availability(
    products: Iterable[Product], product_id: int, kind, size: int = 15
) -> Availability:
    """Whether the product with this id and category is in stock for a sandwich."""
    kind = ProductType(kind)
    product = next((p for p in products if p.kind == kind and p.id == product_id), None)
    if product is None:
        return Availability.UNKNOWN
    needed = 1 if kind is ProductType.VEGETABLE else Sandwich(size=size).portions()
    if product.quantity >= needed:
        return Availability.AVAILABLE
    if product.quantity > 0:
        return Availability.ONLY_ONE_LEFT
    return Availability.SOLD_OUT


def _sell(products: Iterable[Product], sandwich: Sandwich, factor: float) -> None:
    by_id = {p.id: p for p in products}
    portions = sandwich.portions()
    sales = []
    for ingredient in sandwich.ingredients():
        product = by_id.get(ingredient.id)
        if product is None:
            raise UnknownProductError(f"no product with id {ingredient.id}")
        sales.append((product, ingredient.sale_price))
    for product, unit_price in sales:
        product.quantity -= portions
        product.sold += portions
        product.total_sales += portions * unit_price * factor


def checkout(products: Iterable[Product], sandwich: Sandwich, client: Client) -> Receipt:
    """Sell a sandwich to a client, updating stock; every third purchase is discounted."""
    price = sandwich.compute_price()
    discounted = (client.purchases + 1) % DISCOUNT_EVERY == 0
    factor = DISCOUNT_FACTOR if discounted else 1.0
    _sell(products, sandwich, factor)
    client.purchases += 1
    client.last_sandwich = sandwich
    charged = price * factor
    return Receipt(sandwich=sandwich, price=price, charged=charged, discount=price - charged)


def _names(products: Iterable[Product]) -> str:
    return ", ".join(p.name for p in products)


def describe_sandwich(sandwich: Sandwich) -> str:
    """The summary shown before confirming a sandwich."""
    return (
        f"Sanduíche de {sandwich.filling.name}\n"
        f" Pão: {sandwich.bread.name}\n"
        f"Queijo: {sandwich.cheese.name}\n"
        f"Molho: {sandwich.sauce.name}\n"
        f"Vegetais: {_names(sandwich.salad)}\n"
        f"Preço: R$ {sandwich.price:.2f}"
    )


def describe_recommendation(sandwich: Sandwich) -> str:
    """The recommendation text built from a client's last sandwich."""
    salad = "".join(f" {p.name}," for p in sandwich.salad)
    return (
        "Recomendamos para você: \n"
        f"Sanduíche de {sandwich.bread.name} com {sandwich.size} cm, "
        f"recheiado de {sandwich.filling.name} com {sandwich.cheese.name},"
        f"salada composta por:{salad}"
        f" e molho de {sandwich.sauce.name} pelo valor de R${sandwich.price:.2f}!\n"
    )


def buy_recommended(products: Iterable[Product], client: Client) -> float:
    """Buy the client's last sandwich again at full price; return the price."""
    sandwich = client.last_sandwich
    if sandwich is None:
        raise ValueError("client has no previous sandwich")
    price = sandwich.compute_price()
    _sell(products, sandwich, 1.0)
    client.purchases += 1
    return price