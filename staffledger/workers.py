"""Employees paid mainly for hours worked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from staffledger.employee import (
    Employee,
    EmployeeType,
    ProjectBudgetShare,
    WorkBaseTime,
    format_amount,
)

CLEANER_REGULAR_HOURS = 160
CLEANER_OVERTIME_EXTRA = 200.0
ENGINEER_REGULAR_HOURS = 200
ENGINEER_OVERTIME_EXTRA = 500.0


@dataclass(eq=False)
class Personal(Employee, WorkBaseTime):
    """Staff paid a flat hourly rate."""

    hourly_rate: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.PERSONAL

    def calculate_salary(self) -> float:
        return self.calc_base(self.hourly_rate, self.worktime) + self.calc_bonus()

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * worktime

    def calc_bonus(self) -> float:
        return 0.0

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Hourly Rate: {format_amount(self.hourly_rate)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class Cleaner(Employee, WorkBaseTime):
    """Hourly staff with raised pay for hours beyond the regular limit."""

    hourly_rate: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.CLEANER

    def calculate_salary(self) -> float:
        return self.calc_base(self.hourly_rate, self.worktime) + self.calc_bonus()

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * min(worktime, CLEANER_REGULAR_HOURS)

    def calc_bonus(self) -> float:
        if self.worktime > CLEANER_REGULAR_HOURS:
            overtime = self.worktime - CLEANER_REGULAR_HOURS
            return (self.hourly_rate + CLEANER_OVERTIME_EXTRA) * overtime
        return 0.0

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Hourly Rate: {format_amount(self.hourly_rate)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class Driver(Employee, WorkBaseTime):
    """Hourly staff with extra pay for night hours."""

    hourly_rate: float
    night_hour_bonus: float
    night_hours: int

    employee_type: ClassVar[EmployeeType] = EmployeeType.DRIVER

    def calculate_salary(self) -> float:
        return self.calc_base(self.hourly_rate, self.worktime) + self.calc_bonus()

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * worktime

    def calc_bonus(self) -> float:
        return self.night_hours * (self.hourly_rate + self.night_hour_bonus)

    def describe(self) -> str:
        return "\n".join(
            self._describe_lines()
            + [
                f"Hourly Rate: {format_amount(self.hourly_rate)}",
                f"Night Hour Bonus: {format_amount(self.night_hour_bonus)}",
                f"Night Hours: {self.night_hours}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class Engineer(Employee, WorkBaseTime, ProjectBudgetShare):
    """Hourly staff with overtime pay and a share of the project budget."""

    hourly_rate: float
    project_contribution: float
    project_budget: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.ENGINEER

    def calculate_salary(self) -> float:
        return (
            self.calc_base(self.hourly_rate, self.worktime)
            + self.calc_bonus()
            + self.calc_budget_part(self.project_budget, self.project_contribution)
            + self.calc_pro_additions()
        )

    def calc_base(self, hourly_rate: float, worktime: int) -> float:
        return hourly_rate * min(worktime, ENGINEER_REGULAR_HOURS)

    def calc_bonus(self) -> float:
        if self.worktime > ENGINEER_REGULAR_HOURS:
            overtime = self.worktime - ENGINEER_REGULAR_HOURS
            return (self.hourly_rate + ENGINEER_OVERTIME_EXTRA) * overtime
        return 0.0

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
                f"Salary: {format_amount(self.salary)}",
            ]
        )


@dataclass(eq=False)
class Programmer(Employee, WorkBaseTime, ProjectBudgetShare):
    """Hourly staff with a budget share and an early-completion bonus."""

    hourly_rate: float
    project_contribution: float
    project_budget: float
    early_completion_bonus: float

    employee_type: ClassVar[EmployeeType] = EmployeeType.PROGRAMMER

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
        return self.early_completion_bonus

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
                f"Early Completion Bonus: {format_amount(self.early_completion_bonus)}",
                f"Salary: {format_amount(self.salary)}",
            ]
        )