import pytest

from hospital_billing.billing import PatientAccount, Pharmacy, Surgery
from hospital_billing.session import BillingSession, InputError, format_money


def test_format_money_two_places():
    assert format_money(1.5) == "1.50"


def test_add_patient_bills_stay_surgery_and_medicine():
    session = BillingSession()
    patient = session.add_patient("Ann", "0", 1, 1)
    assert patient.name == "Ann"
    assert patient.days == 0
    assert patient.charges == Surgery.PRICES[1] + Pharmacy.PRICES[1]


def test_add_patient_room_charge():
    session = BillingSession()
    patient = session.add_patient("Bo", "2", 0, 0)
    assert patient.charges == 2 * PatientAccount.DAILY_RATE


def test_patients_recorded_in_order():
    session = BillingSession()
    session.add_patient("Ann", "1", 1, 1)
    session.add_patient("Bo", "3", 2, 2)
    assert [p.name for p in session.patients] == ["Ann", "Bo"]


@pytest.mark.parametrize("name, days", [("", "1"), ("Ann", ""), ("", "")])
def test_missing_fields_rejected(name, days):
    session = BillingSession()
    with pytest.raises(InputError, match="Please enter both name and number of days."):
        session.add_patient(name, days, 1, 1)
    assert session.patients == ()


@pytest.mark.parametrize("days", ["abc", "-1", "1.5", "1_0", "99999999999"])
def test_bad_days_rejected(days):
    session = BillingSession()
    with pytest.raises(InputError, match="Days must be 0 or more."):
        session.add_patient("Ann", days, 1, 1)
    assert session.patients == ()


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        BillingSession().add_patient("Ann", "x", 1, 1)


def test_summary_rows():
    session = BillingSession()
    patient = session.add_patient("Ann", "1", 1, 1)
    assert session.summary_rows() == [("Ann", "$" + format_money(patient.charges))]


def test_summary_empty():
    assert BillingSession().summary_rows() == []


def test_save_csv_writes_header_once(tmp_path):
    path = tmp_path / "patients.csv"
    session = BillingSession()
    patient = session.add_patient("Ann", "1", 1, 1)
    session.save_csv(path)
    session.save_csv(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    row = f"Ann,{format_money(patient.charges)}"
    assert lines == ["Name,Total Charges", row, row]


def test_save_csv_appends_to_existing(tmp_path):
    path = tmp_path / "patients.csv"
    path.write_text("Name,Total Charges\nOld,1.00\n", encoding="utf-8")
    session = BillingSession()
    session.add_patient("Ann", "0", 9, 9)
    session.save_csv(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["Name,Total Charges", "Old,1.00", "Ann,0.00"]


def test_save_csv_unwritable_raises(tmp_path):
    session = BillingSession()
    with pytest.raises(OSError):
        session.save_csv(tmp_path / "missing" / "patients.csv")