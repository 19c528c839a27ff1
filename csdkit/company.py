"""Employees of a company and the payment of their insurance."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_SEPARATOR = "-------------------------------------"


def _fmt(value: float) -> str:
    return f"{float(value):g}"


@dataclass
class Employee(ABC):
    """Someone employed by the company."""

    name: str = ""
    citizen_id: str = ""
    address: str = ""

    @abstractmethod
    def insurance_payment(self) -> float:
        """Return the monthly insurance payment for this employee."""


@dataclass
class Manager(Employee):
    """A salaried manager of a department."""

    salary: float = 0.0
    department: str = ""

    def insurance_payment(self) -> float:
        """Return one and a half times the salary."""
        return self.salary * 1.5


@dataclass
class SalesManager(Manager):
    """A manager whose insurance includes an extra amount."""

    extra: float = 0.0

    def insurance_payment(self) -> float:
        """Return the manager payment plus the extra amount."""
        return super().insurance_payment() + self.extra


@dataclass
class Worker(Employee):
    """An hourly paid worker."""

    fee_per_hour: float = 0.0
    hour_per_day: int = 0

    def insurance_payment(self) -> float:
        """Return the pay of thirty working days."""
        return self.fee_per_hour * self.hour_per_day * 30


class HumanResources:
    """The department that pays insurance."""

    def pay_insurance(self, employee: Employee) -> None:
        """Print the employee's details and insurance payment."""
        print(_SEPARATOR)
        print(f"Name:{employee.name}")
        print(f"Citizen Id:{employee.citizen_id}")
        print(f"Address:{employee.address}")
        print(f"Insurance Payment:{_fmt(employee.insurance_payment())}")
        print(_SEPARATOR)


def run_company_app() -> None:
    """Pay insurance for a sample manager, sales manager and worker."""
    hr = HumanResources()
    manager = Manager(name="Ali", citizen_id="ID-0001", address="Mecidiyeköy",
                      salary=40000, department="Pazarlama")
    sales_manager = SalesManager(name="Selami", citizen_id="ID-0003", address="Beylikdüzü",
                                 salary=40000, department="Pazarlama", extra=5000)
    worker = Worker(name="Veli", citizen_id="ID-0002", address="Şişli",
                    fee_per_hour=100, hour_per_day=8)

    for employee in (manager, sales_manager, worker):
        hr.pay_insurance(employee)