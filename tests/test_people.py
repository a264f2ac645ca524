import pytest

from staffroll import common
from staffroll.common import Department
from staffroll.people import Employee, Person, Programmer


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setattr(common, "DEBUG", False)


def test_person_fields_and_show(capsys):
    person = Person(12332112344, 24022009)
    assert person.cpf == 12332112344
    assert person.birthdate == 24022009
    person.show()
    assert capsys.readouterr().out == "Person:\n - CPF: 12332112344\n"


def test_employee_show(capsys):
    employee = Employee("Carlos", 500.0, Department.LOGISTICS, 987654321, 12022009)
    employee.show()
    out = capsys.readouterr().out
    assert out == (
        "Funcionario: Carlos\n - Salario: 500.00R$\n - Departamento: Logistics\n"
    )


def test_employee_accepts_int_department():
    employee = Employee("Ana", 10, 0, 1, 1012000)
    assert employee.department is Department.HR
    assert isinstance(employee, Person)


def test_employee_rejects_unknown_department():
    with pytest.raises(ValueError):
        Employee("Ana", 10.0, 7, 1, 1012000)


def test_employee_clock_in_toggles(capsys):
    employee = Employee("Carlos", 500.0, Department.LOGISTICS, 987654321, 12022009)
    assert employee.is_working is False
    employee.clock_in()
    assert employee.is_working is True
    employee.clock_in()
    assert employee.is_working is False
    out = capsys.readouterr().out
    assert out.count('Funcionario "Carlos" Bateu Ponto!\n') == 2


def test_programmer_show(capsys):
    programmer = Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)
    programmer.show()
    out = capsys.readouterr().out
    assert out.startswith("Programador: Joao\n")
    assert " - Departamento: Administration\n" in out
    assert isinstance(programmer, Employee)


def test_programmer_clock_in_and_super_call(capsys):
    programmer = Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)
    programmer.clock_in()
    Employee.clock_in(programmer)
    out = capsys.readouterr().out
    assert out == 'Programador "Joao" bateu ponto!\nFuncionario "Joao" Bateu Ponto!\n'
    assert programmer.is_working is False


def test_programmer_do_code(capsys):
    programmer = Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)
    programmer.do_code()
    assert capsys.readouterr().out == 'Programador "Joao" esta a programar...\n'


def test_creation_log_order(capsys, monkeypatch):
    monkeypatch.setattr(common, "DEBUG", True)
    Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)
    out = capsys.readouterr().out
    steps = [
        "ProgrammerCreate - Allocating employee",
        "EmployeeCreate - Allocating employee",
        "PersonCreate - Allocating Person",
        "PersonCreate - Person Allocated!",
        "EmployeeCreate - Employee Allocated!",
        "ProgrammerCreate - Programmer Allocated!",
    ]
    positions = [out.index(step) for step in steps]
    assert positions == sorted(positions)