"""In-memory register of employees and the projects they work on."""

from __future__ import annotations

from dataclasses import dataclass, field

from staffledger.employee import Employee, EmployeeType
from staffledger.factory import create_employee


class EmployeeNotFoundError(LookupError):
    """Raised when no employee matches the request."""


class ProjectNotFoundError(LookupError):
    """Raised when no project has the requested name."""


@dataclass
class Project:
    """A named project and the employees assigned to it."""

    name: str
    employees: list[Employee] = field(default_factory=list)

    def add_employee(self, employee: Employee) -> None:
        """Assign an employee to the project."""
        self.employees.append(employee)

    def remove_employee(self, employee: Employee) -> None:
        """Remove the first assigned employee with the same ID, if any."""
        for index, member in enumerate(self.employees):
            if member.employee_id == employee.employee_id:
                del self.employees[index]
                return

    def has_employee(self, employee: Employee) -> bool:
        """Tell whether an employee with the same ID is assigned."""
        return any(member.employee_id == employee.employee_id for member in self.employees)


@dataclass
class EmployeeManagementSystem:
    """Holds all employees and projects."""

    employees: list[Employee] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)

    def add_employee(
        self,
        employee_type: EmployeeType,
        employee_id: int,
        name: str,
        worktime: int,
        arg1: float = 0.0,
        arg2: float = 0.0,
        arg3: float = 0.0,
        arg4: int = 0,
    ) -> Employee:
        """Create an employee and register it; see :func:`create_employee`."""
        employee = create_employee(employee_type, employee_id, name, worktime, arg1, arg2, arg3, arg4)
        self.employees.append(employee)
        return employee

    def remove_employee(self, employee_id: int) -> None:
        """Remove the first employee with the given ID."""
        for index, employee in enumerate(self.employees):
            if employee.employee_id == employee_id:
                del self.employees[index]
                return
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found.")

    def find_employee(self, employee_id: int) -> Employee:
        """Return the first employee with the given ID."""
        for employee in self.employees:
            if employee.employee_id == employee_id:
                return employee
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found.")

    def find_project(self, project_name: str) -> Project:
        """Return the first project with the given name."""
        for project in self.projects:
            if project.name == project_name:
                return project
        raise ProjectNotFoundError(f"Project {project_name} not found.")

    def create_project(self, project_name: str) -> Project:
        """Create an empty project and register it."""
        project = Project(project_name)
        self.projects.append(project)
        return project

    def add_employee_to_project(self, employee_id: int, project_name: str) -> bool:
        """Assign an employee to a project.

        Returns False when the employee is already on the project.
        """
        employee = self.find_employee(employee_id)
        project = self.find_project(project_name)
        if project.has_employee(employee):
            return False
        project.add_employee(employee)
        return True

    def transfer_employee_to_project(
        self, employee_id: int, old_project_name: str, new_project_name: str
    ) -> None:
        """Move an employee from one project to another."""
        employee = self.find_employee(employee_id)
        old_project = self.find_project(old_project_name)
        new_project = self.find_project(new_project_name)
        if not old_project.has_employee(employee):
            raise EmployeeNotFoundError(
                f"Employee {employee_id} is not on project {old_project_name}"
            )
        old_project.remove_employee(employee)
        new_project.add_employee(employee)

    def describe_all_employees(self) -> str:
        """Return a report describing every employee."""
        lines = ["--- All Employees ---"]
        for employee in self.employees:
            lines.extend([employee.describe(), ""])
        return "\n".join(lines)

    def describe_project(self, project_name: str) -> str:
        """Return a report describing every employee on a project."""
        project = self.find_project(project_name)
        lines = [f"--- Employees in Project: {project_name} ---"]
        for employee in project.employees:
            lines.extend([employee.describe(), ""])
        return "\n".join(lines)

    def find_by_name(self, name: str) -> list[Employee]:
        """All employees with exactly this name."""
        return [employee for employee in self.employees if employee.name == name]

    def find_by_position(self, position: EmployeeType) -> list[Employee]:
        """All employees holding the given position; UNKNOWN matches nobody."""
        if position is EmployeeType.UNKNOWN:
            return []
        return [employee for employee in self.employees if employee.employee_type is position]

    def find_by_project(self, project_name: str) -> list[Employee]:
        """Employees of the first project with this name; empty if there is none."""
        for project in self.projects:
            if project.name == project_name:
                return list(project.employees)
        return []

    def find_by_salary(self, salary: float, greater_than: bool) -> list[Employee]:
        """Employees earning strictly more (or strictly less) than ``salary``."""
        if greater_than:
            return [e for e in self.employees if e.calculate_salary() > salary]
        return [e for e in self.employees if e.calculate_salary() < salary]