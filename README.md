# staffledger

A small library that keeps a register of employees, assigns them to
projects and works out what each of them is paid.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Kinds of employee

Every employee has an `employee_id`, a `name` and a `worktime` in hours.
Each kind of employee has its own rule for working out a salary.

| Class            | Module        | Salary                                                                    |
|------------------|---------------|---------------------------------------------------------------------------|
| `Personal`       | `workers`     | hours × hourly rate                                                       |
| `Cleaner`        | `workers`     | up to 160 h at the rate; hours beyond that at rate + 200                  |
| `Driver`         | `workers`     | hours × rate, plus night hours × (rate + night-hour bonus)                |
| `Engineer`       | `workers`     | up to 200 h at the rate, hours beyond that at rate + 500, plus budget share |
| `Programmer`     | `workers`     | hours × rate, plus budget share, plus early-completion bonus              |
| `Tester`         | `specialists` | hours × rate, plus budget share, plus bugs found × bug-fix bonus          |
| `TeamLeader`     | `specialists` | hours × rate, plus budget share, plus subordinates × heading factor, plus 1000 for each subordinate beyond ten |
| `ProjectManager` | `managers`    | 22 % of the project budget, plus members × heading factor                 |
| `SeniorManager`  | `managers`    | 15 % of the sum of all project budgets, plus employees × heading factor   |

The budget share is the project budget × the employee's contribution.

    from staffledger.workers import Engineer

    engineer = Engineer(2, "Jane Smith", 210, 450.0, 0.1, 100000.0)
    engineer.calculate_salary()   # 109500.0
    print(engineer.describe())

`calculate_salary()` always works from the current values. The `salary`
attribute holds the figure computed when the employee was created and is
what `describe()` reports; it is not updated when fields change.

`SeniorManager` keeps a list of project budgets; `add_project_budget()`
appends one and `total_budget` gives their sum.

Positions are listed in `staffledger.employee.EmployeeType`. `label()` gives
the report label (for example `"Team Leader"`), and
`employee_type_from_label()` maps a label back, giving `UNKNOWN` for text it
does not recognise.

## Building employees by type

`staffledger.factory.create_employee(employee_type, employee_id, name,
worktime, arg1, arg2, arg3, arg4, arg5)` builds any kind of employee from
generic arguments whose meaning depends on the type (see its docstring). An
unknown type raises `ValueError`. `type_code()` and `type_from_code()`
convert between types and the upper-case codes used in data files, such as
`TEAMLEADER`.

## Managing staff and projects

    from staffledger.employee import EmployeeType
    from staffledger.system import EmployeeManagementSystem

    system = EmployeeManagementSystem()
    system.add_employee(EmployeeType.PERSONAL, 1, "John Doe", 40, 200.0)
    system.create_project("Apollo")
    system.add_employee_to_project(1, "Apollo")   # False if already on it

    system.find_by_salary(5000.0, True)    # employees paid more than 5000
    print(system.describe_project("Apollo"))

The system also offers `remove_employee()`, `find_employee()`,
`find_project()`, `transfer_employee_to_project()`,
`describe_all_employees()`, `find_by_name()`, `find_by_position()` and
`find_by_project()`. The `describe_*` methods return text rather than
printing it.

If an employee or project does not exist, the system raises
`EmployeeNotFoundError` or `ProjectNotFoundError` (both are `LookupError`s).
Transferring an employee who is not on the old project raises
`EmployeeNotFoundError`.

## Saving and loading

`staffledger.storage` keeps employees in a comma-separated file, one per
line: type code, ID, name, worktime, then the type's own values. Projects go
in a text file, where each project is written as a `Project:` line followed
by an `Employees in project:` line listing member names.

    from staffledger import storage

    storage.save_employees(system, "employees.csv")
    storage.save_projects(system, "projects.txt")

    restored = EmployeeManagementSystem()
    storage.load_employees(restored, "employees.csv")
    storage.load_projects(restored, "projects.txt")

`format_employee_line()` and `parse_employee_line()` work on single lines.
When loading, lines that cannot be read and project members whose name
matches no employee are logged as warnings and skipped; the load functions
return what they added. Project members are matched to employees by name,
so load the employees first.

A `SeniorManager` is saved with the total of its budgets and loaded back
with that total as its only budget.

## What it does not do

There is no command-line program or interactive menu: the package is a
library to be called from Python code.