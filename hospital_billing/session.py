"""A billing session: entering patients, summarising and saving them."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .billing import PatientAccount, Pharmacy, Surgery

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

CSV_HEADER = "Name,Total Charges\n"


class InputError(ValueError):
    """Raised when patient details entered by the user are not acceptable."""


def format_money(amount: float) -> str:
    """Format an amount with two decimal places."""
    return f"{amount:.2f}"


def _parse_days(text: str) -> int:
    if _INTEGER.fullmatch(text):
        value = int(text)
        if _INT_MIN <= value <= _INT_MAX and value >= 0:
            return value
    raise InputError("Days must be 0 or more.")


class BillingSession:
    """Patients entered during one run, in the order they were added."""

    def __init__(self) -> None:
        self._patients: list[PatientAccount] = []
        self.surgery = Surgery()
        self.pharmacy = Pharmacy()

    @property
    def patients(self) -> tuple[PatientAccount, ...]:
        """The patients added so far."""
        return tuple(self._patients)

    def add_patient(
        self, name: str, days_text: str, surgery_type: int, medicine_type: int
    ) -> PatientAccount:
        """Validate the entry, bill the patient and record the account."""
        if not name or not days_text:
            raise InputError("Please enter both name and number of days.")
        days = _parse_days(days_text)

        patient = PatientAccount(name)
        patient.days = days
        self.surgery.update_account(patient, surgery_type)
        self.pharmacy.update_account(patient, medicine_type)
        self._patients.append(patient)
        return patient

    def summary_rows(self) -> list[tuple[str, str]]:
        """Name and formatted total charges for each patient."""
        return [(p.name, "$" + format_money(p.charges)) for p in self._patients]

    def save_csv(self, path: str | os.PathLike[str]) -> None:
        """Append the patients to a CSV file, writing the header if the file is new."""
        path = Path(path)
        is_new = not path.exists()
        with path.open("a", encoding="utf-8") as out:
            if is_new:
                out.write(CSV_HEADER)
            out.writelines(
                f"{p.name},{format_money(p.charges)}\n" for p in self._patients
            )