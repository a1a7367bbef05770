"""Administrator accounts, and login for clients and administrators."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .clients import ClientRegistry, LoginTakenError
from .models import Admin, Client, Credentials, Person, Status


class Role(IntEnum):
    """What a successful login grants access to."""

    CLIENT = 1
    MASTER_ADMIN = 2
    ADMIN = 3


class AuthenticationError(LookupError):
    """The login is unknown or the password does not match."""


class DuplicateAdminError(ValueError):
    """An administrator with that CPF is already registered."""


class UnknownAdminError(LookupError):
    """No administrator with that CPF is registered."""


class AdminRegistry:
    """The registered administrators, in the order they were added."""

    def __init__(self, admins: Iterable[Admin] | None = None):
        self.admins: list[Admin] = list(admins) if admins is not None else []

    def find(self, cpf: str) -> Admin | None:
        """The administrator with this CPF, or None."""
        return next((a for a in self.admins if a.person.cpf == cpf), None)

    def find_by_login(self, login: str) -> Admin | None:
        """The administrator with this login, or None."""
        return next((a for a in self.admins if a.credentials.login == login), None)

    def _require(self, cpf: str) -> Admin:
        admin = self.find(cpf)
        if admin is None:
            raise UnknownAdminError(f"admin not found: {cpf!r}")
        return admin

    def register(self, cpf: str, name: str, age: int, login: str, password: str) -> Admin:
        """Add a new enabled administrator."""
        if self.find(cpf) is not None:
            raise DuplicateAdminError(f"CPF already registered: {cpf!r}")
        if self.find_by_login(login) is not None:
            raise LoginTakenError(f"login not available: {login!r}")
        admin = Admin(
            person=Person(name=name, age=age, cpf=cpf, status=Status.ADMIN),
            credentials=Credentials(login=login, password=password),
        )
        self.admins.append(admin)
        return admin

    def disable(self, cpf: str) -> bool:
        """Disable an administrator; False if already disabled."""
        admin = self._require(cpf)
        if admin.person.status != Status.DISABLED:
            admin.person.status = Status.DISABLED
            return True
        return False

    def enable(self, cpf: str) -> bool:
        """Enable an administrator again; False if already enabled."""
        admin = self._require(cpf)
        if admin.person.status != Status.ADMIN:
            admin.person.status = Status.ADMIN
            return True
        return False


def authenticate(
    clients: ClientRegistry, admins: AdminRegistry, login: str, password: str
) -> tuple[Role, Client | Admin]:
    """Check a login and password; return the role granted and the account."""
    client = clients.find_by_login(login)
    if client is not None:
        if client.credentials.password == password:
            return Role.CLIENT, client
        raise AuthenticationError("incorrect login or password")
    admin = admins.find_by_login(login)
    if admin is not None and admin.credentials.password == password:
        role = Role.MASTER_ADMIN if admin.person.status == Status.MASTER_ADMIN else Role.ADMIN
        return role, admin
    raise AuthenticationError("incorrect login or password")


def format_admin(admin: Admin) -> str:
    """The listing of an administrator: personal data and login."""
    person = admin.person
    lines = [
        f"Nome: {person.name}",
        f"Idade: {person.age}",
        f"Status: {int(person.status)}",
        f"CPF: {person.cpf}",
        f"Login: {admin.credentials.login}",
    ]
    return "\n".join(lines) + "\n"