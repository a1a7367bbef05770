"""Saving and loading of products, clients, admins and employees as JSON files."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable

from .models import (
    Address,
    Admin,
    Client,
    Credentials,
    Employee,
    Person,
    Product,
    ProductType,
    Sandwich,
    Status,
)


def _write(path, records: Iterable[Any]) -> None:
    data = [asdict(record) for record in records]
    Path(path).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def _read(path) -> list[dict]:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _product(data: dict) -> Product:
    return Product(**{**data, "kind": ProductType(data["kind"])})


def _optional_product(data: dict | None) -> Product | None:
    return None if data is None else _product(data)


def _person(data: dict) -> Person:
    return Person(**{**data, "status": Status(data["status"])})


def _sandwich(data: dict | None) -> Sandwich | None:
    if data is None:
        return None
    return Sandwich(
        size=data["size"],
        bread=_optional_product(data["bread"]),
        filling=_optional_product(data["filling"]),
        cheese=_optional_product(data["cheese"]),
        sauce=_optional_product(data["sauce"]),
        salad=[_product(item) for item in data["salad"]],
        price=data["price"],
    )


def _client(data: dict) -> Client:
    return Client(
        person=_person(data["person"]),
        address=Address(**data["address"]),
        credentials=Credentials(**data["credentials"]),
        purchases=data["purchases"],
        last_sandwich=_sandwich(data["last_sandwich"]),
    )


def _admin(data: dict) -> Admin:
    return Admin(person=_person(data["person"]), credentials=Credentials(**data["credentials"]))


def _employee(data: dict) -> Employee:
    return Employee(person=_person(data["person"]), salary=data["salary"])


def save_products(path, products: Iterable[Product]) -> None:
    """Write the product stock to ``path``."""
    _write(path, products)


def load_products(path) -> list[Product]:
    """Read the product stock from ``path``."""
    return [_product(item) for item in _read(path)]


def save_clients(path, clients: Iterable[Client]) -> None:
    """Write the clients to ``path``."""
    _write(path, clients)


def load_clients(path) -> list[Client]:
    """Read the clients from ``path``."""
    return [_client(item) for item in _read(path)]


def save_admins(path, admins: Iterable[Admin]) -> None:
    """Write the administrators to ``path``."""
    _write(path, admins)


def load_admins(path) -> list[Admin]:
    """Read the administrators from ``path``."""
    return [_admin(item) for item in _read(path)]


def save_employees(path, employees: Iterable[Employee]) -> None:
    """Write the employees to ``path``."""
    _write(path, employees)


def load_employees(path) -> list[Employee]:
    """Read the employees from ``path``."""
    return [_employee(item) for item in _read(path)]