from __future__ import annotations

from decimal import Decimal

from .base import PayeCalculator


class StandardPayeCalculator(PayeCalculator):
    """Standard rule: brackets apply to the full annual gross."""

    def relief(self, annual_gross: Decimal) -> Decimal:
        return Decimal("0")
