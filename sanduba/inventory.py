"""Product stock: registration, changes, restocking and stock listings."""

from __future__ import annotations

from typing import Iterable, Iterator

from .models import Product, ProductType

DEFAULT_CAPACITY = 100
STOCK_LABEL = "Itens em estoque"
SALES_LABEL = "Itens vendidos"

_LABEL_FIELDS = {STOCK_LABEL: "quantity", SALES_LABEL: "sold"}


class DuplicateProductError(ValueError):
    """A product with that name is already registered."""


class UnknownProductError(LookupError):
    """No product with that name or id is registered."""


class InsufficientFundsError(ValueError):
    """The bank balance does not cover a purchase of stock."""


class Inventory:
    """The registered products, in the order they were registered."""

    def __init__(self, products: Iterable[Product] | None = None, capacity: int = DEFAULT_CAPACITY):
        self.products: list[Product] = list(products) if products is not None else []
        self.capacity = capacity

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def find(self, name: str) -> Product | None:
        """The product with exactly this name, or None."""
        return next((p for p in self.products if p.name == name), None)

    def _require(self, name: str) -> Product:
        product = self.find(name)
        if product is None:
            raise UnknownProductError(f"product not registered: {name!r}")
        return product

    def get(self, product_id: int) -> Product:
        """The product with this id; raise UnknownProductError if there is none."""
        for product in self.products:
            if product.id == product_id:
                return product
        raise UnknownProductError(f"no product with id {product_id}")

    def register(self, name: str, kind, cost_price: float, sale_price: float) -> Product:
        """Register a new product with empty stock and totals."""
        if self.find(name) is not None:
            raise DuplicateProductError(f"product already registered: {name!r}")
        if len(self.products) >= self.capacity:
            raise ValueError("inventory is full")
        product = Product(
            id=len(self.products) + 1,
            name=name,
            kind=ProductType(kind),
            cost_price=cost_price,
            sale_price=sale_price,
        )
        self.products.append(product)
        return product

    def rename(self, name: str, new_name: str) -> Product:
        """Give a product a new name that no other product has."""
        product = self._require(name)
        if self.find(new_name) is not None:
            raise DuplicateProductError(f"name already registered: {new_name!r}")
        product.name = new_name
        return product

    def change_type(self, name: str, kind) -> Product:
        """Change the category of a product."""
        product = self._require(name)
        product.kind = ProductType(kind)
        return product

    def change_prices(
        self, name: str, cost_price: float | None = None, sale_price: float | None = None
    ) -> Product:
        """Change the unit cost price, the unit sale price, or both."""
        product = self._require(name)
        if cost_price is not None:
            product.cost_price = cost_price
        if sale_price is not None:
            product.sale_price = sale_price
        return product

    def restock(self, name: str, quantity: int, balance: float) -> float:
        """Buy ``quantity`` units paid from ``balance``; return the new balance."""
        product = self._require(name)
        cost = quantity * product.cost_price
        if balance - cost < 0:
            raise InsufficientFundsError(
                f"saldo bancário insuficiente: {balance:.2f}"
            )
        product.purchased += quantity
        product.quantity += quantity
        product.total_cost += cost
        return balance - cost

    def restock_by_id(self, product_id: int, quantity: int) -> Product:
        """Add ``quantity`` units to the stock of the product with this id."""
        product = self.get(product_id)
        product.quantity += quantity
        return product

    def search_prefix(self, prefix: str) -> list[Product]:
        """Products whose names start with ``prefix``."""
        return [p for p in self.products if p.name.startswith(prefix)]

    def by_type(self, kind) -> list[Product]:
        """Products of one category, in registration order."""
        kind = ProductType(kind)
        return [p for p in self.products if p.kind == kind]

    def by_stock(self, descending: bool = False) -> list[Product]:
        """Products ordered by quantity in stock."""
        return sorted(self.products, key=lambda p: p.quantity, reverse=descending)

    def best_sellers(self) -> list[Product]:
        """Products ordered by units sold, most sold first."""
        return sorted(self.products, key=lambda p: p.sold, reverse=True)


def format_product(product: Product) -> str:
    """The full description of a product, one attribute per line."""
    lines = [
        f"ID - {product.id}",
        f"Nome - {product.name}",
        f"Tipo - {int(product.kind)}",
        f"Valor unitário de Compra - {product.cost_price:.2f}",
        f"Valor unitário de Venda - {product.sale_price:.2f}",
        f"Total de Compras - {product.total_cost:.2f}",
        f"Valor de Vendas - {product.total_sales:.2f}",
        f"Quantidade em estoque - {product.quantity}",
        f"Quantidade Comprada - {product.purchased}",
        f"Quantidade Vendida - {product.sold}",
    ]
    return "\n".join(lines) + "\n"


def format_stock_line(product: Product, label: str = STOCK_LABEL) -> str:
    """One listing line: id, name and the stock or sales count named by ``label``."""
    try:
        attribute = _LABEL_FIELDS[label]
    except KeyError:
        raise ValueError(f"unknown label: {label!r}") from None
    return f"ID: {product.id}\tNome:{product.name}\t{label}:{getattr(product, attribute)}"