"""Employee salary roll with allowances and tax derived from basic pay."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

HRA_RATE = 0.02
DA_RATE = 0.01
TAX_RATE = 0.05


@dataclass(frozen=True)
class Employee:
    """An employee and the pay figures derived from the basic salary."""

    empid: int
    name: str
    basic: int

    @property
    def hra(self) -> float:
        """House rent allowance."""
        return HRA_RATE * self.basic

    @property
    def da(self) -> float:
        """Dearness allowance."""
        return DA_RATE * self.basic

    @property
    def income_tax(self) -> float:
        """Income tax deducted."""
        return TAX_RATE * self.basic

    @property
    def gross(self) -> float:
        """Basic pay plus allowances."""
        return self.basic + self.hra + self.da

    @property
    def net_pay(self) -> float:
        """Gross pay less income tax."""
        return self.gross - self.income_tax


def _row(e: Employee) -> str:
    return (
        f"{e.empid}\t{e.name:<15}\t{e.basic}\t{e.hra:.2f}\t{e.da:.2f}\t"
        f"{e.income_tax:.2f}\t{e.gross:.2f}\t{e.net_pay:.2f}"
    )


def payroll_report(employees: Iterable[Employee]) -> str:
    """Render the payroll table for the given employees."""
    stars = "*" * 80
    parts = [
        "\n\n\n\t\t\t\tXYZ& Co. Payroll\n\n",
        stars,
        "EmpId\tName\t\tBasic\t HRA\t DA\t IT\tGross\t\tNet Pay\n",
        stars,
    ]
    parts.extend("\n" + _row(e) for e in employees)
    parts.append("\n")
    parts.append(stars)
    return "".join(parts)