from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..model import TaxBracket
from .base import PayeCalculator
from .relief_calculator import ConsolidatedReliefPayeCalculator
from .standard_calculator import StandardPayeCalculator


@dataclass
class PayeCalculatorFactory:
    """Factory Pattern: choose the PAYE calculator for a relief policy."""

    brackets: Optional[Sequence[TaxBracket]] = None

    def for_policy(self, *, apply_consolidated_relief: bool) -> PayeCalculator:
        if apply_consolidated_relief:
            return ConsolidatedReliefPayeCalculator(self.brackets)
        return StandardPayeCalculator(self.brackets)
