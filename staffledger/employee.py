"""Employee base class, position types and the salary-component interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class EmployeeType(Enum):
    """Position held by an employee; the value is its human-readable label."""

    PERSONAL = "Personal"
    ENGINEER = "Engineer"
    CLEANER = "Cleaner"
    DRIVER = "Driver"
    PROGRAMMER = "Programmer"
    TESTER = "Tester"
    TEAMLEADER = "Team Leader"
    PROJECTMANAGER = "Project Manager"
    SENIORMANAGER = "Senior Manager"
    UNKNOWN = "UNKNOWN"

    def label(self) -> str:
        """Return the label shown in reports, e.g. ``"Team Leader"``."""
        return self.value


def employee_type_from_label(label: str) -> EmployeeType:
    """Map a report label back to its type; unrecognised labels give UNKNOWN."""
    try:
        return EmployeeType(label)
    except ValueError:
        return EmployeeType.UNKNOWN


def format_amount(value: float) -> str:
    """Format a money or ratio value with six significant digits."""
    return f"{float(value):g}"


@dataclass(eq=False)
class Employee(ABC):
    """Common data for every employee.

    ``salary`` holds the salary computed when the employee was created;
    :meth:`calculate_salary` always computes it from the current data.
    """

    employee_id: int
    name: str
    worktime: int
    salary: float = field(init=False, repr=False)

    employee_type: ClassVar[EmployeeType] = EmployeeType.UNKNOWN

    def __post_init__(self) -> None:
        self.salary = self.calculate_salary()

    @abstractmethod
    def calculate_salary(self) -> float:
        """Compute the salary from the employee's current data."""

    def describe(self) -> str:
        """Return a multi-line description of the employee."""
        return "\n".join(self._describe_lines())

    def _describe_lines(self) -> list[str]:
        return [
            f"ID: {self.employee_id}",
            f"Employee Type: {self.employee_type.label()}",
            f"Name: {self.name}",
            f"Worktime: {self.worktime}",
        ]


class WorkBaseTime(ABC):
    """Salary component paid for hours worked."""

    @abstractmethod
    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        """Pay for regular hours."""

    @abstractmethod
    def calc_bonus(self) -> float:
        """Extra pay on top of the regular hours."""


class ProjectBudgetShare(ABC):
    """Salary component paid out of a project budget."""

    @abstractmethod
    def calc_budget_part(self, project_budget: float, personal_contribution: float) -> float:
        """Share of the project budget earned by the employee."""

    @abstractmethod
    def calc_pro_additions(self) -> float:
        """Additional project payments."""


class Heading(ABC):
    """Salary component paid for leading other people."""

    @abstractmethod
    def calc_heading_bonus(self, num_subordinates: int) -> float:
        """Bonus for heading the given number of subordinates."""