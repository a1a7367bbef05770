"""Client accounts: registration, lookup, removal, blocking and listing."""

from __future__ import annotations

from typing import Iterable

from .models import Address, Client, Credentials, Person, Status


class DuplicateCpfError(ValueError):
    """A client with that CPF is already registered."""


class UnknownClientError(LookupError):
    """No client with that CPF is registered."""


class LoginTakenError(ValueError):
    """Another client already uses that login."""


def is_blank(text: str) -> bool:
    """True when ``text`` holds nothing but spaces (or nothing at all)."""
    return all(char == " " for char in text)


class ClientRegistry:
    """The registered clients, in the order they signed up."""

    def __init__(self, clients: Iterable[Client] | None = None):
        self.clients: list[Client] = list(clients) if clients is not None else []

    def find_by_cpf(self, cpf: str) -> Client | None:
        """The client with this CPF, or None."""
        return next((c for c in self.clients if c.person.cpf == cpf), None)

    def find_by_login(self, login: str) -> Client | None:
        """The client with this login, or None."""
        return next((c for c in self.clients if c.credentials.login == login), None)

    def _require(self, cpf: str) -> Client:
        client = self.find_by_cpf(cpf)
        if client is None:
            raise UnknownClientError(f"client not found: {cpf!r}")
        return client

    def register(self, person: Person, address: Address, credentials: Credentials) -> Client:
        """Sign up a new active client with no purchases yet."""
        if self.find_by_cpf(person.cpf) is not None:
            raise DuplicateCpfError(f"CPF already registered: {person.cpf!r}")
        if self.find_by_login(credentials.login) is not None:
            raise LoginTakenError(f"login not available: {credentials.login!r}")
        person.status = Status.ACTIVE_CLIENT
        client = Client(person=person, address=address, credentials=credentials, purchases=0)
        self.clients.append(client)
        return client

    def remove(self, cpf: str) -> bool:
        """Mark an active client as removed; False if it was not active."""
        client = self._require(cpf)
        if client.person.status == Status.ACTIVE_CLIENT:
            client.person.status = Status.REMOVED
            return True
        return False

    def block(self, cpf: str) -> bool:
        """Block a client; False if it was already blocked."""
        client = self._require(cpf)
        if client.person.status != Status.BLOCKED:
            client.person.status = Status.BLOCKED
            return True
        return False

    def unblock(self, cpf: str) -> bool:
        """Make a client active again; False if it already was."""
        client = self._require(cpf)
        if client.person.status != Status.ACTIVE_CLIENT:
            client.person.status = Status.ACTIVE_CLIENT
            return True
        return False

    def check_password(self, login: str, password: str) -> bool:
        """True when a client with this login has this password."""
        client = self.find_by_login(login)
        return client is not None and client.credentials.password == password


def format_client(client: Client) -> str:
    """The listing of a client: personal data, address, login and purchases."""
    person, address = client.person, client.address
    lines = [
        f"Nome: {person.name}",
        f"Idade: {person.age}",
        f"Status: {int(person.status)}",
        f"CPF: {person.cpf}",
        "Endereço:",
        f"Rua: {address.street}",
        f"Nº: {address.number}\tCEP: {address.cep}\tEstado: {address.state}"
        f"\tCidade: {address.city}\tBairro: {address.district}",
        f"Complemento: {address.complement}",
        f"Login: {client.credentials.login}",
        f"Compras realizadas: {client.purchases}",
    ]
    return "\n".join(lines) + "\n"