"""Financial report built from the product totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import Product

INITIAL_INVESTMENT = 10000.0


@dataclass(frozen=True)
class FinancialReport:
    """Revenue, expenses and bank balance of the shop."""

    revenue: float
    expenses: float
    payable: float
    site_and_freight: float
    salaries: float
    sales: tuple[tuple[str, float], ...]
    purchases: tuple[tuple[str, float], ...]
    bank_balance: float

    @property
    def profit(self) -> float:
        return self.revenue - self.expenses

    @property
    def final_balance(self) -> float:
        return self.bank_balance - self.payable

    def render(self) -> str:
        """The report as printed text."""
        lines = [
            "",
            f"(+)RECEITA:         = {self.revenue:.2f}",
            "Venda de produtos:",
        ]
        lines += [f"{name} = {amount:.2f}" for name, amount in self.sales]
        lines += [
            "",
            "",
            f"(-) DESPESA:          = {self.expenses:.2f}",
            f"Manut. do site e Frete= {self.site_and_freight:.2f}",
            f"Salários              = {self.salaries:.2f}",
            "",
            "",
            "Compra de produtos:",
        ]
        lines += [f"{name} = {amount:.2f}" for name, amount in self.purchases]
        lines += [
            "",
            "",
            f"(=) LUCRO:            =     {self.profit:.2f}",
            "",
            f"(+)Invest. inicial       = {INITIAL_INVESTMENT:.2f}",
            "",
            f"(=) SALDO BANCÁRIO:   =     {self.final_balance:.2f}",
            "",
            "",
        ]
        return "\n".join(lines)


def build_report(
    products: Iterable[Product],
    bank_balance: float,
    salary_rate: float,
    other_expenses_rate: float,
) -> FinancialReport:
    """Compute the financial report for the given products and rates."""
    products = list(products)
    rate = salary_rate + other_expenses_rate
    revenue = sum(p.total_sales for p in products)
    payable = sum(p.total_sales * rate for p in products)
    expenses = payable + sum(p.total_cost for p in products)
    return FinancialReport(
        revenue=revenue,
        expenses=expenses,
        payable=payable,
        site_and_freight=revenue * other_expenses_rate,
        salaries=revenue * salary_rate,
        sales=tuple((p.name, p.total_sales) for p in products),
        purchases=tuple((p.name, p.total_cost) for p in products),
        bank_balance=bank_balance,
    )