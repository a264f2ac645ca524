"""Shared constants and helpers: departments, debug logging and date formatting."""

from __future__ import annotations

import enum
import time

DEBUG = True

CLOCKS_PER_SEC = 1_000_000

_DAY_POS = 1_000_000
_MONTH_POS = 10_000


class Department(enum.IntEnum):
    """Departments an employee can belong to."""

    HR = 0
    LOGISTICS = 1
    ADMIN = 2

    @property
    def label(self) -> str:
        """Human readable department name."""
        return _DEPARTMENT_LABELS[self]


_DEPARTMENT_LABELS = {
    Department.HR: "Human Resources",
    Department.LOGISTICS: "Logistics",
    Department.ADMIN: "Administration",
}


def printlog(tag: str, message: str) -> None:
    """Write a debug line stamped with processor clock ticks, when DEBUG is on."""
    if not DEBUG:
        return
    ticks = int(time.process_time() * CLOCKS_PER_SEC)
    print(f"[{ticks}] {tag} - {message}", end="")


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def string_birthdate(birthdate: int) -> str:
    """Format a ddmmyyyy integer as 'd/m/y'."""
    day = _trunc_div(birthdate, _DAY_POS)
    month = _trunc_div(birthdate - _DAY_POS * day, _MONTH_POS)
    year = birthdate - _DAY_POS * day - _MONTH_POS * month
    return f"{day}/{month}/{year}"