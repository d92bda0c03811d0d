"""Patient accounts and the price lists used to charge them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class PatientAccount:
    """A hospital stay: a name, a number of days and the running charges."""

    DAILY_RATE = 500.0

    def __init__(self, name: str = " ") -> None:
        self.name = name
        self._days = 0
        self._charges = 0.0

    @property
    def days(self) -> int:
        """Days spent in hospital."""
        return self._days

    @days.setter
    def days(self, value: int) -> None:
        # Negative stays count as zero; the room charge replaces any prior total.
        self._days = max(int(value), 0)
        self._charges = self._days * self.DAILY_RATE

    @property
    def charges(self) -> float:
        """Total charges on the account."""
        return self._charges

    def add_charge(self, amount: float) -> None:
        """Add an amount to the account's charges."""
        self._charges += amount

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, days={self._days}, "
            f"charges={self._charges:.2f})"
        )


def _charge_choice(
    prices: Mapping[int, float], account: PatientAccount, choice: int
) -> None:
    """Charge the price listed for ``choice``; unknown choices are ignored."""
    price = prices.get(choice)
    if price is not None:
        account.add_charge(price)


class Surgery:
    """Rates for surgery types 1 to 5."""

    PRICES: Mapping[int, float] = MappingProxyType(
        {1: 15000.0, 2: 9000.0, 3: 10000.0, 4: 5000.0, 5: 8000.0}
    )

    def update_account(self, account: PatientAccount, choice: int) -> None:
        """Charge the rate for surgery type ``choice`` to ``account``."""
        _charge_choice(self.PRICES, account, choice)


class Pharmacy:
    """Prices for medicine types 1 to 5."""

    PRICES: Mapping[int, float] = MappingProxyType(
        {1: 30.0, 2: 20.0, 3: 25.0, 4: 40.0, 5: 50.0}
    )

    def update_account(self, account: PatientAccount, choice: int) -> None:
        """Charge the price for medicine type ``choice`` to ``account``."""
        _charge_choice(self.PRICES, account, choice)