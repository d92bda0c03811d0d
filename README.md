# hospital-billing

Keep track of what patients owe for a hospital stay. Each patient is charged
a daily room rate of $500.00, plus one surgery and one medicine chosen from
fixed price lists. Patients entered during a session can be listed with their
totals and appended to a CSV file.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library; no other packages are
needed.

## Running the window

```
hospital-billing
hospital-billing --csv path/to/patients.csv
```

Enter a name and the number of days, pick a surgery and a medicine, and press
**Add Patient**. A message shows the patient's total and the form is cleared.
**View Summary** fills the table with every patient added so far. **Save and
Exit** appends the patients to the CSV file, writing the `Name,Total Charges`
header first when the file is new, and then closes the window.

Without `--csv` the file is `Desktop/patients.csv` under your home directory.

## Price lists

| Choice | Surgery     | Medicine |
|-------:|------------:|---------:|
| 1      | $15,000.00  | $30.00   |
| 2      | $9,000.00   | $20.00   |
| 3      | $10,000.00  | $25.00   |
| 4      | $5,000.00   | $40.00   |
| 5      | $8,000.00   | $50.00   |

Any other choice adds nothing. The lists are available as the read-only
mappings `Surgery.PRICES` and `Pharmacy.PRICES`.

## Using the library

```python
from hospital_billing.billing import PatientAccount, Surgery, Pharmacy
from hospital_billing.session import BillingSession, format_money

account = PatientAccount("Jane Doe")
account.days = 3                         # charges become 3 * 500.00
Surgery().update_account(account, 2)     # + 9000.00
Pharmacy().update_account(account, 1)    # + 30.00
print(format_money(account.charges))     # 10530.00

session = BillingSession()
session.add_patient("Jane Doe", "3", 2, 1)
for name, total in session.summary_rows():
    print(name, total)                   # Jane Doe $10530.00
session.save_csv("patients.csv")
```

Setting `PatientAccount.days` replaces the charges with the room charge for
that many days; a negative number of days counts as zero. `add_charge` adds
an amount to the running total.

`BillingSession.add_patient` raises `InputError` (a `ValueError`) when the
name or the days are missing, or when the days are not a whole number of 0 or
more. `BillingSession.patients` gives the accounts added so far, in order.

## What it does not do

- Saved CSV files are only ever appended to; nothing reads them back into a
  session.
- Names are written to the CSV file as entered, without quoting, so a name
  containing a comma produces an extra column.
- Each patient gets exactly one surgery and one medicine; there is no way to
  remove or edit a patient once added.

## Tests

```
pip install .[test]
pytest
```