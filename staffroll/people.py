"""People records: persons, employees and programmers."""

from __future__ import annotations

import sys

from staffroll.common import Department, printlog


def _emit(text: str) -> str:
    """Write text to standard output and hand it back."""
    sys.stdout.write(text)
    return text


class Person:
    """A person identified by CPF, with a ddmmyyyy birthdate."""

    def __init__(self, cpf: int, birthdate: int) -> None:
        printlog("PersonCreate", "Allocating Person\n")
        self.cpf = cpf
        self.birthdate = birthdate
        printlog("PersonCreate", "Person Allocated!\n")

    def _describe(self) -> str:
        return f"Person:\n - CPF: {self.cpf}\n"

    def __str__(self) -> str:
        return self._describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cpf={self.cpf!r}, birthdate={self.birthdate!r})"

    def show(self) -> str:
        """Print the person's summary and return the printed text."""
        return _emit(Person._describe(self))


class Employee(Person):
    """A person with a name, salary, department and working state."""

    _title = "Funcionario"

    def __init__(
        self,
        name: str,
        salary: float,
        department: Department | int,
        cpf: int,
        birthdate: int,
    ) -> None:
        printlog("EmployeeCreate", "Allocating employee\n")
        super().__init__(cpf, birthdate)
        printlog("EmployeeCreate", "Allocating name\n")
        self.name = str(name)
        self.department = Department(department)
        self.salary = float(salary)
        self.is_working = False
        printlog("EmployeeCreate", "Setting pointers\n")
        printlog("EmployeeCreate", "Employee Allocated!\n")

    def _describe_as(self, title: str) -> str:
        return (
            f"{title}: {self.name}\n"
            f" - Salario: {self.salary:.2f}R$\n"
            f" - Departamento: {self.department.label}\n"
        )

    def _describe(self) -> str:
        return self._describe_as(self._title)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, salary={self.salary!r}, "
            f"department={self.department.name}, cpf={self.cpf!r}, "
            f"birthdate={self.birthdate!r})"
        )

    def show(self) -> str:
        """Print the employee's summary and return the printed text."""
        return _emit(self._describe_as(self._title))

    def clock_in(self) -> None:
        """Toggle the working state and announce it."""
        self.is_working = not self.is_working
        print(f'Funcionario "{self.name}" Bateu Ponto!')


class Programmer(Employee):
    """An employee who writes code."""

    _title = "Programador"

    def __init__(
        self,
        name: str,
        salary: float,
        department: Department | int,
        cpf: int,
        birthdate: int,
    ) -> None:
        printlog("ProgrammerCreate", "Allocating employee\n")
        printlog("ProgrammerCreate", "Setting pointers\n")
        super().__init__(name, salary, department, cpf, birthdate)
        printlog("ProgrammerCreate", "Programmer Allocated!\n")

    def show(self) -> str:
        """Print the programmer's summary and return the printed text."""
        return _emit(self._describe_as("Programador"))

    def clock_in(self) -> None:
        """Toggle the working state and announce it as a programmer."""
        self.is_working = not self.is_working
        print(f'Programador "{self.name}" bateu ponto!')

    def do_code(self) -> str:
        """Announce that the programmer is coding and return the announcement."""
        return _emit(f'Programador "{self.name}" esta a programar...\n')