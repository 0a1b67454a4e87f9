"""Construction of employees from a position type and generic arguments."""

from __future__ import annotations

from staffledger.employee import Employee, EmployeeType
from staffledger.managers import ProjectManager, SeniorManager
from staffledger.specialists import TeamLeader, Tester
from staffledger.workers import Cleaner, Driver, Engineer, Personal, Programmer


def create_employee(
    employee_type: EmployeeType,
    employee_id: int,
    name: str,
    worktime: int,
    arg1: float = 0.0,
    arg2: float = 0.0,
    arg3: float = 0.0,
    arg4: int = 0,
    arg5: int = 0,
) -> Employee:
    """Build an employee of the given type.

    The meaning of ``arg1`` to ``arg5`` depends on the type:

    * Personal, Cleaner: hourly rate.
    * Engineer: hourly rate, project contribution, project budget.
    * Driver: hourly rate, night-hour bonus, night hours.
    * Programmer: hourly rate, project contribution, project budget,
      early-completion bonus.
    * Tester: hourly rate, project contribution, project budget, bugs found,
      bug-fix bonus.
    * Team Leader: hourly rate, project contribution, project budget,
      number of subordinates, heading bonus factor.
    * Project Manager: project budget, number of project members,
      heading bonus factor.
    * Senior Manager: project budget, total employees, heading bonus factor.

    Raises :class:`ValueError` for an unknown type.
    """
    count4 = int(arg4)
    count5 = int(arg5)
    if employee_type is EmployeeType.PERSONAL:
        return Personal(employee_id, name, worktime, arg1)
    if employee_type is EmployeeType.ENGINEER:
        return Engineer(employee_id, name, worktime, arg1, arg2, arg3)
    if employee_type is EmployeeType.CLEANER:
        return Cleaner(employee_id, name, worktime, arg1)
    if employee_type is EmployeeType.DRIVER:
        return Driver(employee_id, name, worktime, arg1, arg2, int(arg3))
    if employee_type is EmployeeType.PROGRAMMER:
        return Programmer(employee_id, name, worktime, arg1, arg2, arg3, float(count4))
    if employee_type is EmployeeType.TESTER:
        return Tester(employee_id, name, worktime, arg1, arg2, arg3, count4, float(count5))
    if employee_type is EmployeeType.TEAMLEADER:
        return TeamLeader(employee_id, name, worktime, arg1, arg2, arg3, count4, float(count5))
    if employee_type is EmployeeType.PROJECTMANAGER:
        return ProjectManager(employee_id, name, worktime, arg1, int(arg2), arg3)
    if employee_type is EmployeeType.SENIORMANAGER:
        return SeniorManager(employee_id, name, worktime, [arg1], int(arg2), arg3)
    raise ValueError(f"Unknown employee type: {employee_type!r}")


def type_code(employee_type: EmployeeType) -> str:
    """Return the code used in data files, e.g. ``"TEAMLEADER"``."""
    return employee_type.name


def type_from_code(code: str) -> EmployeeType:
    """Map a data-file code back to its type; unrecognised codes give UNKNOWN."""
    try:
        return EmployeeType[code]
    except KeyError:
        return EmployeeType.UNKNOWN