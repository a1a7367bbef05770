"""Employee records: registration, lookup and removal."""

from __future__ import annotations

from typing import Iterable

from .models import Employee, Person, Status


class DuplicateEmployeeError(ValueError):
    """An employee with that CPF is already registered."""


class UnknownEmployeeError(LookupError):
    """No employee with that CPF is registered."""


class EmployeeRegistry:
    """The registered employees, in the order they were hired."""

    def __init__(self, employees: Iterable[Employee] | None = None):
        self.employees: list[Employee] = list(employees) if employees is not None else []

    def find(self, cpf: str) -> Employee | None:
        """The employee with this CPF, or None."""
        return next((e for e in self.employees if e.person.cpf == cpf), None)

    def register(self, cpf: str, name: str, age: int) -> Employee:
        """Hire a new employee."""
        if self.find(cpf) is not None:
            raise DuplicateEmployeeError(f"CPF already registered: {cpf!r}")
        employee = Employee(person=Person(name=name, age=age, cpf=cpf, status=Status.EMPLOYEE))
        self.employees.append(employee)
        return employee

    def remove(self, cpf: str) -> bool:
        """Mark an employee as removed; False if already removed."""
        employee = self.find(cpf)
        if employee is None:
            raise UnknownEmployeeError(f"employee not found: {cpf!r}")
        if employee.person.status == Status.EMPLOYEE:
            employee.person.status = Status.REMOVED
            return True
        return False


def format_employee(employee: Employee) -> str:
    """The personal data of an employee, one attribute per line."""
    person = employee.person
    lines = [
        f"Nome: {person.name}",
        f"Idade: {person.age}",
        f"CPF: {person.cpf}",
        f"Status: {int(person.status)}",
    ]
    return "\n".join(lines) + "\n"