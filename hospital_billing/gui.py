"""Tk window for entering patients and saving their bills."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Mapping

from .billing import Pharmacy, Surgery
from .session import BillingSession, InputError, format_money


def default_csv_path(home: str | os.PathLike[str] | None = None) -> Path:
    """Where patients are saved: ``Desktop/patients.csv`` under the home directory."""
    base = Path.home() if home is None else Path(home)
    return base / "Desktop" / "patients.csv"


def _choice_labels(prices: Mapping[int, float]) -> list[str]:
    return [f"Type {key} (${format_money(price)})" for key, price in sorted(prices.items())]


class BillingWindow:
    """The main window: patient entry form, summary table and save button."""

    def __init__(self, root, session=None, csv_path=None) -> None:
        # tkinter is imported here so the rest of the package works without Tk.
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.session = session if session is not None else BillingSession()
        self.csv_path = Path(csv_path) if csv_path is not None else default_csv_path()

        root.title("Hospital Billing")
        form = ttk.Frame(root, padding=10)
        form.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)

        ttk.Label(form, text="Name").grid(row=0, column=0, sticky="w")
        self._name = ttk.Entry(form)
        self._name.grid(row=0, column=1, sticky="ew")

        ttk.Label(form, text="Days").grid(row=1, column=0, sticky="w")
        self._days = ttk.Entry(form)
        self._days.grid(row=1, column=1, sticky="ew")

        ttk.Label(form, text="Surgery").grid(row=2, column=0, sticky="w")
        self._surgery = ttk.Combobox(
            form, state="readonly", values=_choice_labels(Surgery.PRICES)
        )
        self._surgery.current(0)
        self._surgery.grid(row=2, column=1, sticky="ew")

        ttk.Label(form, text="Medicine").grid(row=3, column=0, sticky="w")
        self._meds = ttk.Combobox(
            form, state="readonly", values=_choice_labels(Pharmacy.PRICES)
        )
        self._meds.current(0)
        self._meds.grid(row=3, column=1, sticky="ew")

        buttons = ttk.Frame(form)
        buttons.grid(row=4, column=0, columnspan=2, pady=5)
        ttk.Button(buttons, text="Add Patient", command=self.add_patient).pack(side=tk.LEFT)
        ttk.Button(buttons, text="View Summary", command=self.view_summary).pack(side=tk.LEFT)
        ttk.Button(buttons, text="Save and Exit", command=self.save_and_exit).pack(side=tk.LEFT)

        self._table = ttk.Treeview(form, columns=("name", "charges"), show="headings")
        self._table.heading("name", text="Name")
        self._table.heading("charges", text="Total Charges")
        self._table.grid(row=5, column=0, columnspan=2, sticky="nsew")
        form.columnconfigure(1, weight=1)
        form.rowconfigure(5, weight=1)

    def add_patient(self) -> None:
        """Add the patient in the form, report the total and clear the form."""
        from tkinter import messagebox

        name = self._name.get()
        try:
            patient = self.session.add_patient(
                name,
                self._days.get(),
                self._surgery.current() + 1,
                self._meds.current() + 1,
            )
        except InputError as exc:
            messagebox.showwarning("Input Error", str(exc), parent=self.root)
            return

        messagebox.showinfo(
            "Patient Added",
            f"{name} was added with total charges: ${format_money(patient.charges)}",
            parent=self.root,
        )
        self._name.delete(0, "end")
        self._days.delete(0, "end")
        self._surgery.current(0)
        self._meds.current(0)

    def view_summary(self) -> None:
        """Fill the table with every patient's name and total."""
        self._table.delete(*self._table.get_children())
        for row in self.session.summary_rows():
            self._table.insert("", "end", values=row)

    def save_and_exit(self) -> None:
        """Append the patients to the CSV file and close the window."""
        from tkinter import messagebox

        try:
            self.session.save_csv(self.csv_path)
        except OSError:
            messagebox.showerror("Error", "Could not open file for writing.", parent=self.root)
        else:
            messagebox.showinfo(
                "Saved", f"Data added to file: {self.csv_path.name}", parent=self.root
            )
        finally:
            self.root.destroy()


def main(argv=None) -> int:
    """Open the billing window."""
    import tkinter as tk

    parser = argparse.ArgumentParser(description="Hospital billing")
    parser.add_argument("--csv", type=Path, default=None, help="file to append patients to")
    args = parser.parse_args(argv)

    root = tk.Tk()
    BillingWindow(root, BillingSession(), args.csv or default_csv_path())
    root.mainloop()
    return 0