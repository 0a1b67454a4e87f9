"""Hourly staff with project-budget shares and role-specific bonuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from staffledger.employee import (
    Employee,
    EmployeeType,
    Heading,
    ProjectBudgetShare,
    WorkBaseTime,
    format_amount,
)

TEAM_BONUS_THRESHOLD = 10
TEAM_BONUS_PER_EXTRA_SUBORDINATE = 1000.0


@dataclass(eq=False)
class Tester(Employee, WorkBaseTime, ProjectBudgetShare):
    """Hourly staff with a budget share and a bonus for each bug found."""

    hourly_rate: float
    project_contribution: float
    project_budget: float
    bugs_found: int
    bug_fix_bonus: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.TESTER

    def calculate_salary(self) -> float:
        return (
            self.calc_base(self.hourly_rate, self.worktime)
            + self.calc_bonus()
            + self.calc_budget_part(self.project_budget, self.project_contribution)
            + self.calc_pro_additions()
        )

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * worktime

    def calc_bonus(self) -> float:
        return self.bugs_found * self.bug_fix_bonus

    def calc_budget_part(self, project_budget: float, personal_contribution: float) -> float:
        return project_budget * personal_contribution

    def calc_pro_additions(self) -> float:
        return 0.0

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Hourly Rate: {format_amount(self.hourly_rate)}",
                f"Project Contribution: {format_amount(self.project_contribution)}",
                f"Project Budget: {format_amount(self.project_budget)}",
                f"Bugs Found: {self.bugs_found}",
                f"Bug Fix Bonus: {format_amount(self.bug_fix_bonus)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class TeamLeader(Employee, WorkBaseTime, ProjectBudgetShare, Heading):
    """Hourly staff who also lead a team and are paid per subordinate."""

    hourly_rate: float
    project_contribution: float
    project_budget: float
    num_subordinates: int
    heading_bonus_factor: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.TEAMLEADER

    def calculate_salary(self) -> float:
        return (
            self.calc_base(self.hourly_rate, self.worktime)
            + self.calc_bonus()
            + self.calc_budget_part(self.project_budget, self.project_contribution)
            + self.calc_pro_additions()
            + self.calc_heading_bonus(self.num_subordinates)
        )

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * worktime

    def calc_bonus(self) -> float:
        if self.num_subordinates > TEAM_BONUS_THRESHOLD:
            extra = self.num_subordinates - TEAM_BONUS_THRESHOLD
            return extra * TEAM_BONUS_PER_EXTRA_SUBORDINATE
        return 0.0

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
                f"Hourly Rate: {format_amount(self.hourly_rate)}",
                f"Project Contribution: {format_amount(self.project_contribution)}",
                f"Project Budget: {format_amount(self.project_budget)}",
                f"Number of Subordinates: {self.num_subordinates}",
                f"Heading Bonus Factor: {format_amount(self.heading_bonus_factor)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )