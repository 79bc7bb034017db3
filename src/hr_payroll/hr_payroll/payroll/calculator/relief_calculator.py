from __future__ import annotations

from decimal import Decimal

from ...core.constants import CRA_FLOOR, CRA_GROSS_RATE, CRA_MINIMUM_RATE
from .base import PayeCalculator


class ConsolidatedReliefPayeCalculator(PayeCalculator):
    """Subtracts the consolidated relief allowance before bracketing.

    CRA = max(200,000, 1% of annual gross) + 20% of annual gross.
    """

    def relief(self, annual_gross: Decimal) -> Decimal:
        if annual_gross <= 0:
            return Decimal("0")
        return max(CRA_FLOOR, annual_gross * CRA_MINIMUM_RATE) + annual_gross * CRA_GROSS_RATE
