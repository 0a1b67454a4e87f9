import pytest

from staffledger.employee import EmployeeType
from staffledger.specialists import TeamLeader, Tester


@pytest.fixture
def qa_engineer():
    return Tester(6, "David Test", 200, 320.0, 0.15, 600000.0, 10, 1000.0)


@pytest.fixture
def leader():
    return TeamLeader(7, "Eve Lead", 290, 300.0, 0.25, 800000.0, 15, 2000.0)


def test_tester_salary(qa_engineer):
    assert qa_engineer.calculate_salary() == pytest.approx(164000.0)


def test_tester_salary_snapshot_matches(qa_engineer):
    assert qa_engineer.salary == pytest.approx(164000.0)


def test_tester_components_sum_to_salary(qa_engineer):
    total = (
        qa_engineer.calc_base(qa_engineer.hourly_rate, qa_engineer.worktime)
        + qa_engineer.calc_bonus()
        + qa_engineer.calc_budget_part(
            qa_engineer.project_budget, qa_engineer.project_contribution
        )
        + qa_engineer.calc_pro_additions()
    )
    assert total == pytest.approx(qa_engineer.calculate_salary())


def test_tester_bonus_scales_with_bugs(qa_engineer):
    before = qa_engineer.calc_bonus()
    qa_engineer.bugs_found *= 2
    assert qa_engineer.calc_bonus() == pytest.approx(2 * before)


def test_tester_snapshot_unchanged_after_edit(qa_engineer):
    original = qa_engineer.salary
    qa_engineer.bugs_found += 5
    assert qa_engineer.salary == original
    assert qa_engineer.calculate_salary() > original


def test_tester_describe(qa_engineer):
    text = qa_engineer.describe()
    lines = text.splitlines()
    assert lines[0] == "ID: 6"
    assert "Employee Type: Tester" in lines
    assert "Name: David Test" in lines
    assert "Bugs Found: 10" in lines
    assert lines[-1].startswith("Salary: ")


def test_tester_type(qa_engineer):
    assert qa_engineer.employee_type is EmployeeType.TESTER


def test_team_leader_salary(leader):
    assert leader.calculate_salary() == pytest.approx(322000.0)


def test_team_leader_components_sum_to_salary(leader):
    total = (
        leader.calc_base(leader.hourly_rate, leader.worktime)
        + leader.calc_bonus()
        + leader.calc_budget_part(leader.project_budget, leader.project_contribution)
        + leader.calc_pro_additions()
        + leader.calc_heading_bonus(leader.num_subordinates)
    )
    assert total == pytest.approx(leader.salary)


def test_team_leader_no_bonus_at_threshold(leader):
    leader.num_subordinates = 10
    assert leader.calc_bonus() == 0.0


def test_team_leader_bonus_just_above_threshold(leader):
    leader.num_subordinates = 11
    assert leader.calc_bonus() == pytest.approx(1000.0)


def test_team_leader_heading_bonus_proportional(leader):
    assert leader.calc_heading_bonus(0) == 0.0
    assert leader.calc_heading_bonus(4) == pytest.approx(2 * leader.calc_heading_bonus(2))


def test_team_leader_describe(leader):
    lines = leader.describe().splitlines()
    assert "Employee Type: Team Leader" in lines
    assert "Name: Eve Lead" in lines
    assert "Number of Subordinates: 15" in lines
    assert leader.employee_type is EmployeeType.TEAMLEADER