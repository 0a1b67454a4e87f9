import pytest

from staffledger.employee import EmployeeType
from staffledger.managers import ProjectManager, SeniorManager


@pytest.fixture
def project_manager():
    return ProjectManager(8, "Frank Manage", 230, 1000000.0, 10, 2000.0)


@pytest.fixture
def senior_manager():
    budgets = [500000.0, 750000.0, 1000000.0]
    return SeniorManager(9, "Grace Senior", 300, budgets, 25, 3000.0)


def test_project_manager_salary(project_manager):
    assert project_manager.calculate_salary() == pytest.approx(240000.0)
    assert project_manager.salary == pytest.approx(240000.0)


def test_project_manager_ignores_worktime(project_manager):
    before = project_manager.calculate_salary()
    project_manager.worktime = 1
    assert project_manager.calculate_salary() == pytest.approx(before)


def test_project_manager_components(project_manager):
    total = (
        project_manager.calc_budget_part(project_manager.project_budget, 0.22)
        + project_manager.calc_pro_additions()
        + project_manager.calc_heading_bonus(project_manager.num_project_members)
    )
    assert total == pytest.approx(project_manager.calculate_salary())


def test_project_manager_heading_bonus_grows_with_members(project_manager):
    before = project_manager.calculate_salary()
    project_manager.num_project_members += 1
    after = project_manager.calculate_salary()
    assert after - before == pytest.approx(project_manager.heading_bonus_factor)


def test_project_manager_describe(project_manager):
    lines = project_manager.describe().splitlines()
    assert lines[0] == "ID: 8"
    assert "Employee Type: Project Manager" in lines
    assert "Name: Frank Manage" in lines
    assert "Number of Project Members: 10" in lines
    assert project_manager.employee_type is EmployeeType.PROJECTMANAGER


def test_senior_manager_salary(senior_manager):
    assert senior_manager.calculate_salary() == pytest.approx(412500.0)
    assert senior_manager.salary == pytest.approx(412500.0)


def test_senior_manager_total_budget(senior_manager):
    assert senior_manager.total_budget == pytest.approx(500000.0 + 750000.0 + 1000000.0)


def test_senior_manager_add_project_budget(senior_manager):
    before_total = senior_manager.total_budget
    before_salary = senior_manager.calculate_salary()
    senior_manager.add_project_budget(1000000.0)
    assert senior_manager.total_budget == pytest.approx(before_total + 1000000.0)
    assert senior_manager.calculate_salary() > before_salary
    assert senior_manager.salary == pytest.approx(before_salary)


def test_senior_manager_copies_budget_list():
    budgets = [500000.0]
    manager = SeniorManager(1, "Grace Senior", 300, budgets, 0, 3000.0)
    manager.add_project_budget(750000.0)
    assert budgets == [500000.0]
    assert manager.project_budgets == [500000.0, 750000.0]


def test_senior_manager_empty_budgets():
    manager = SeniorManager(2, "Grace Senior", 300, [], 25, 3000.0)
    assert manager.total_budget == 0.0
    assert manager.calculate_salary() == pytest.approx(manager.calc_heading_bonus(25))


def test_senior_manager_describe(senior_manager):
    lines = senior_manager.describe().splitlines()
    assert "Employee Type: Senior Manager" in lines
    assert "Name: Grace Senior" in lines
    assert "Total Employees: 25" in lines
    assert senior_manager.employee_type is EmployeeType.SENIORMANAGER