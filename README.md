# staffroll

A small staff register. It models three kinds of record, each building on
the one before:

- `Person`: a CPF number and a birth date written as eight digits, `ddmmyyyy`.
- `Employee`: a person who also has a name, a salary and a department, and who
  clocks in and out.
- `Programmer`: an employee who can also write code.

Departments are listed in `staffroll.common.Department`: Human Resources,
Logistics and Administration.

## Installing

```
pip install .
```

## Using the console

```
staffroll
```

The command asks for a CPF (at most eleven digits) and a birth date in
`ddmmyyyy` form with no separators, asking again until the values are valid.
It then creates the person and prints a sample birth date in `d/m/yyyy` form.

## Using the library

```python
from staffroll.common import Department, string_birthdate
from staffroll.people import Employee, Person, Programmer

person = Person(cpf=12332112344, birthdate=24022009)
person.show()

employee = Employee("Carlos", 500.0, Department.LOGISTICS, 987654321, 12022009)
employee.clock_in()   # toggles whether the employee is working
employee.show()

programmer = Programmer("Joao", 1000.0, Department.ADMIN, 51487440812, 2022009)
programmer.clock_in()
programmer.do_code()
programmer.show()

print(string_birthdate(12121999))   # 12/12/1999
```

`staffroll.cli.example()` runs this same walkthrough from start to finish.
Diagnostic lines go through `staffroll.common.printlog`.

## Running the tests

```
pip install .[test]
pytest
```