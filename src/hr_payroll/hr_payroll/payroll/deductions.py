from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.validators import round_money
from ..core.constants import ITF_RATE, NHF_MONTHLY_CAP, NHF_RATE, NSITF_RATE, PENSION_RATE
from ..core.exceptions import InvalidInputError


@dataclass(frozen=True)
class StatutoryDeductions:
    pension: Decimal
    nhf: Decimal
    nsitf: Decimal
    itf: Decimal

    @property
    def total(self) -> Decimal:
        return self.pension + self.nhf + self.nsitf + self.itf


def statutory_deductions(gross_pay: Decimal) -> StatutoryDeductions:
    """Flat-rate deductions on monthly gross pay; each is rounded on its own."""

    if gross_pay < 0:
        raise InvalidInputError("Gross pay cannot be negative")

    return StatutoryDeductions(
        pension=round_money(gross_pay * PENSION_RATE),
        nhf=round_money(min(gross_pay * NHF_RATE, NHF_MONTHLY_CAP)),
        nsitf=round_money(gross_pay * NSITF_RATE),
        itf=round_money(gross_pay * ITF_RATE),
    )
