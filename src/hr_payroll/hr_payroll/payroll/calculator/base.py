from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ...common.validators import round_money
from ...core.constants import MONTHS_PER_YEAR
from ...core.exceptions import InvalidInputError
from ..model import TaxBracket
from .brackets import NIGERIA_PAYE_2024, progressive_tax, validate_brackets


@dataclass(frozen=True)
class PayeAssessment:
    annual_taxable_income: Decimal
    consolidated_relief: Decimal
    monthly_paye: Decimal


class PayeCalculator(ABC):
    """Calculator interface (Strategy Pattern for PAYE relief policies)."""

    def __init__(self, brackets: Optional[Sequence[TaxBracket]] = None):
        self._brackets = validate_brackets(brackets or NIGERIA_PAYE_2024)

    @property
    def brackets(self) -> tuple[TaxBracket, ...]:
        return self._brackets

    @abstractmethod
    def relief(self, annual_gross: Decimal) -> Decimal:
        """Amount subtracted from annual gross before the brackets apply."""
        raise NotImplementedError

    def monthly_paye(self, annual_taxable_income: Decimal) -> Decimal:
        """Monthly PAYE owed on an annual taxable income, rounded half-up to kobo."""
        return round_money(progressive_tax(annual_taxable_income, self._brackets) / MONTHS_PER_YEAR)

    def assess(self, monthly_gross: Decimal) -> PayeAssessment:
        if monthly_gross < 0:
            raise InvalidInputError("Gross pay cannot be negative")

        annual_gross = monthly_gross * MONTHS_PER_YEAR
        relief = self.relief(annual_gross)
        taxable = max(annual_gross - relief, Decimal("0"))
        return PayeAssessment(
            annual_taxable_income=taxable,
            consolidated_relief=relief,
            monthly_paye=self.monthly_paye(taxable),
        )
