"""Interactive command line for registering staff."""

from __future__ import annotations

import argparse
import sys

from staffroll.common import Department, string_birthdate
from staffroll.people import Employee, Person, Programmer

MAX_NAME_LIMIT = 40
MAIN_MENU = "Bem vindo ao sistema de gerenciamento de funcionários!"

_MAX_CPF = 100_000_000_000
_MAX_BIRTHDATE = 100_000_000


def example() -> None:
    """Walk through the record types with fixed sample data."""
    person = Person(12332112344, 24022009)
    print(f"Person Pointer: {id(person):#x}")
    person.show()

    employee = Employee("Carlos", 500.0, Department.LOGISTICS, 987654321, 12022009)
    print(f"Employee Pointer> {id(employee):#x}")
    employee.clock_in()
    employee.show()

    programmer = Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)

    # Method tables are the classes, shared between every object.
    print(f"type(programmer) (Programmer methods): {id(type(programmer)):#x}")
    print(f"Employee methods: {id(Employee):#x}")
    print(f"Person methods: {id(Person):#x}\n")
    print(f"type(employee) (Employee methods): {id(type(employee)):#x}")
    print(f"Person methods: {id(Person):#x}")

    programmer.clock_in()
    Employee.clock_in(programmer)
    programmer.do_code()
    employee.clock_in()

    programmer.show()
    employee.show()


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def get_cpf() -> int:
    """Prompt until a CPF of at most 11 digits is entered."""
    while True:
        cpf = _read_int("Insira o CPF: ")
        print()
        if cpf is not None and 0 <= cpf < _MAX_CPF:
            return cpf
        print("CPF Invalido")


def get_birthdate() -> int:
    """Prompt until a ddmmyyyy birthdate of at most 8 digits is entered."""
    while True:
        birthdate = _read_int("Insira a data de nascimento (ddmmaaaa, sem separação): ")
        if birthdate is not None and 0 <= birthdate < _MAX_BIRTHDATE:
            return birthdate
        print("Data invalida")


def get_name() -> str:
    """Prompt for a name, keeping at most MAX_NAME_LIMIT - 1 characters."""
    line = input("Insira o nome:")
    return line[: MAX_NAME_LIMIT - 1]


def get_salary() -> float:
    """Prompt until a numeric salary is entered."""
    while True:
        try:
            return float(input("Input salary: ").strip())
        except ValueError:
            print("Invalid salary")


def get_department() -> Department:
    """Prompt for a department option from the menu."""
    prompt = (
        "Choose a department:\n1 - Human Resources\n2 - Logistics\n"
        "3 - Administration\n\nOption: "
    )
    while True:
        option = _read_int(prompt)
        if option is not None and 1 <= option <= len(Department):
            return Department(option - 1)
        print("Invalid option")


def interactive_person_create() -> Person:
    """Build a Person from prompted values."""
    cpf = get_cpf()
    birthdate = get_birthdate()
    return Person(cpf, birthdate)


def _prompt_employee_fields() -> tuple[str, float, Department, int, int]:
    cpf = get_cpf()
    birthdate = get_birthdate()
    name = get_name()
    salary = get_salary()
    department = get_department()
    return name, salary, department, cpf, birthdate


def interactive_employee_create() -> Employee:
    """Build an Employee from prompted values."""
    return Employee(*_prompt_employee_fields())


def interactive_programmer_create() -> Programmer:
    """Build a Programmer from prompted values."""
    return Programmer(*_prompt_employee_fields())


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    parser = argparse.ArgumentParser(prog="staffroll", description=MAIN_MENU)
    parser.add_argument(
        "--example", action="store_true", help="run the walkthrough with sample data"
    )
    args = parser.parse_args(argv)

    if args.example:
        example()
        return 0

    try:
        interactive_person_create()
    except EOFError:
        print("Input ended unexpectedly", file=sys.stderr)
        return 1

    print(string_birthdate(12121999), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())