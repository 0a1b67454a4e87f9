"""Managers paid from project budgets and for the people they head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from staffledger.employee import (
    Employee,
    EmployeeType,
    Heading,
    ProjectBudgetShare,
    format_amount,
)

PROJECT_MANAGER_BUDGET_SHARE = 0.22
SENIOR_MANAGER_BUDGET_SHARE = 0.15


@dataclass(eq=False)
class ProjectManager(Employee, ProjectBudgetShare, Heading):
    """Manager paid a fixed share of one project's budget plus a heading bonus."""

    project_budget: float
    num_project_members: int
    heading_bonus_factor: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.PROJECTMANAGER

    def calculate_salary(self) -> float:
        return (
            self.calc_budget_part(self.project_budget, PROJECT_MANAGER_BUDGET_SHARE)
            + self.calc_pro_additions()
            + self.calc_heading_bonus(self.num_project_members)
        )

    def calc_budget_part(self, project_budget: float, personal_contribution: float) -> float:
        return project_budget * personal_contribution

    def calc_pro_additions(self) -> float:
        return 0.0

    def calc_heading_bonus(self, num_subordinates: int) -> float:
        return num_subordinates * self.heading_bonus_factor

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Project Budget: {format_amount(self.project_budget)}",
                f"Number of Project Members: {self.num_project_members}",
                f"Heading Bonus Factor: {format_amount(self.heading_bonus_factor)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class SeniorManager(Employee, Heading):
    """Manager paid a share of the total budget of several projects."""

    project_budgets: list[float]
    total_employees: int
    heading_bonus_factor: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.SENIORMANAGER

    def __post_init__(self) -> None:
        self.project_budgets = list(self.project_budgets)
        super().__post_init__()

    @property
    def total_budget(self) -> float:
        """Sum of all project budgets."""
        return sum(self.project_budgets, 0.0)

    def calculate_salary(self) -> float:
        return SENIOR_MANAGER_BUDGET_SHARE * self.total_budget + self.calc_heading_bonus(
            self.total_employees
        )

    def calc_heading_bonus(self, num_subordinates: int) -> float:
        return num_subordinates * self.heading_bonus_factor

    def add_project_budget(self, budget: float) -> None:
        """Add one more project's budget."""
        self.project_budgets.append(budget)

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Total Budget: {format_amount(self.total_budget)}",
                f"Total Employees: {self.total_employees}",
                f"Heading Bonus Factor: {format_amount(self.heading_bonus_factor)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )