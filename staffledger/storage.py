"""Reading and writing employees and projects as plain text files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Union

from staffledger.employee import Employee, EmployeeType, format_amount
from staffledger.factory import create_employee, type_code, type_from_code
from staffledger.managers import ProjectManager, SeniorManager
from staffledger.specialists import TeamLeader, Tester
from staffledger.system import EmployeeManagementSystem, Project
from staffledger.workers import Cleaner, Driver, Engineer, Personal, Programmer

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

PROJECT_MARKER = "Project:"
MEMBERS_MARKER = "Employees in project:"
MIN_FIELDS = 4

_UNSIGNED_PREFIX = re.compile(r"\s*\+?(\d+)")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_unsigned(text: str) -> int:
    """Read the leading unsigned integer of ``text``, ignoring what follows."""
    match = _UNSIGNED_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an unsigned integer: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    """Read the leading floating-point number of ``text``, ignoring what follows."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(0))


def _split_fields(line: str, separator: str = ",") -> list[str]:
    """Split on the separator; a trailing empty field is not a field."""
    if not line:
        return []
    fields = line.split(separator)
    if fields[-1] == "":
        fields.pop()
    return fields


def _employee_details(employee: Employee) -> list[str]:
    if isinstance(employee, (Personal, Cleaner)):
        return [format_amount(employee.hourly_rate)]
    if isinstance(employee, Engineer):
        return [
            format_amount(employee.hourly_rate),
            format_amount(employee.project_contribution),
            format_amount(employee.project_budget),
        ]
    if isinstance(employee, Driver):
        return [
            format_amount(employee.hourly_rate),
            format_amount(employee.night_hour_bonus),
            str(employee.night_hours),
        ]
    if isinstance(employee, Programmer):
        return [
            format_amount(employee.hourly_rate),
            format_amount(employee.project_contribution),
            format_amount(employee.project_budget),
            format_amount(employee.early_completion_bonus),
        ]
    if isinstance(employee, Tester):
        return [
            format_amount(employee.hourly_rate),
            format_amount(employee.project_contribution),
            format_amount(employee.project_budget),
            str(employee.bugs_found),
            format_amount(employee.bug_fix_bonus),
        ]
    if isinstance(employee, TeamLeader):
        return [
            format_amount(employee.hourly_rate),
            format_amount(employee.project_contribution),
            format_amount(employee.project_budget),
            str(employee.num_subordinates),
            format_amount(employee.heading_bonus_factor),
        ]
    if isinstance(employee, ProjectManager):
        return [
            format_amount(employee.project_budget),
            str(employee.num_project_members),
            format_amount(employee.heading_bonus_factor),
        ]
    if isinstance(employee, SeniorManager):
        return [
            format_amount(employee.total_budget),
            str(employee.total_employees),
            format_amount(employee.heading_bonus_factor),
        ]
    return [""]


def format_employee_line(employee: Employee) -> str:
    """Return the data-file line for an employee, without a line ending."""
    known = (
        Personal, Engineer, Cleaner, Driver, Programmer,
        Tester, TeamLeader, ProjectManager, SeniorManager,
    )
    employee_type = employee.employee_type if isinstance(employee, known) else EmployeeType.UNKNOWN
    fields = [
        type_code(employee_type),
        str(employee.employee_id),
        employee.name,
        str(employee.worktime),
    ]
    return ",".join(fields + _employee_details(employee))


def parse_employee_line(line: str) -> Employee:
    """Build an employee from one data-file line.

    Raises :class:`ValueError` when the line has too few fields, holds a
    value that is not a number, or names an unknown type.
    """
    fields = _split_fields(line)
    if len(fields) < MIN_FIELDS:
        raise ValueError(f"Invalid line: {line}")

    def optional(index: int, parse, default):
        return parse(fields[index]) if len(fields) > index else default

    employee_type = type_from_code(fields[0])
    employee_id = _parse_unsigned(fields[1])
    name = fields[2]
    worktime = _parse_unsigned(fields[3])
    arg1 = optional(4, _parse_float, 0.0)
    arg2 = optional(5, _parse_float, 0.0)
    arg3 = optional(6, _parse_float, 0.0)
    arg4 = optional(7, _parse_unsigned, 0)
    arg5 = optional(8, _parse_unsigned, 0)
    return create_employee(employee_type, employee_id, name, worktime, arg1, arg2, arg3, arg4, arg5)


def load_employees(system: EmployeeManagementSystem, path: PathLike) -> list[Employee]:
    """Add the employees stored in a file to the system.

    Lines that cannot be read are logged and skipped. Returns the employees
    that were added. Raises :class:`OSError` if the file cannot be opened.
    """
    loaded: list[Employee] = []
    with Path(path).open(encoding="utf-8") as stream:
        for raw in stream:
            line = raw.rstrip("\n")
            try:
                employee = parse_employee_line(line)
            except ValueError as error:
                logger.warning("Skipping line %r: %s", line, error)
                continue
            system.employees.append(employee)
            loaded.append(employee)
    return loaded


def save_employees(system: EmployeeManagementSystem, path: PathLike) -> None:
    """Write every employee of the system to a file, one per line."""
    with Path(path).open("w", encoding="utf-8") as stream:
        for employee in system.employees:
            stream.write(format_employee_line(employee) + "\n")


def _strip_spaces(text: str) -> str:
    return text.strip(" ")


def load_projects(system: EmployeeManagementSystem, path: PathLike) -> list[Project]:
    """Add the projects stored in a file to the system.

    Members are matched to the system's employees by name; names with no
    matching employee are logged and left out. Returns the projects added.
    Raises :class:`OSError` if the file cannot be opened.
    """
    added: list[Project] = []
    project_name = ""
    member_names: list[str] = []
    with Path(path).open(encoding="utf-8") as stream:
        for raw in stream:
            line = raw.rstrip("\n")
            if PROJECT_MARKER in line:
                rest = line[line.index(PROJECT_MARKER) + len(PROJECT_MARKER):]
                project_name = _strip_spaces(rest)
                member_names.clear()
            elif MEMBERS_MARKER in line:
                rest = line[line.index(MEMBERS_MARKER) + len(MEMBERS_MARKER):]
                member_names.extend(
                    name for name in map(_strip_spaces, _split_fields(rest)) if name
                )
                if not project_name:
                    continue
                project = Project(project_name)
                for member_name in member_names:
                    match = next((e for e in system.employees if e.name == member_name), None)
                    if match is None:
                        logger.warning("Employee %s not found.", member_name)
                    else:
                        project.employees.append(match)
                system.projects.append(project)
                added.append(project)
    return added


def save_projects(system: EmployeeManagementSystem, path: PathLike) -> None:
    """Write every project of the system and its members' names to a file."""
    with Path(path).open("w", encoding="utf-8") as stream:
        for project in system.projects:
            stream.write(f"{PROJECT_MARKER} {project.name}\n")
            names = ", ".join(employee.name for employee in project.employees)
            stream.write(f"{MEMBERS_MARKER} {names}\n")