"""Statutory rates and defaults.

Note: Keep rates here to avoid magic numbers spread across the payroll code.
"""

from decimal import Decimal

MONTHS_PER_YEAR = 12
MONEY_PLACES = Decimal("0.01")
# Largest amount a DECIMAL(15,2) column holds
MAX_MONEY_AMOUNT = Decimal("9999999999999.99")

PENSION_RATE = Decimal("0.08")
NHF_RATE = Decimal("0.025")
NHF_MONTHLY_CAP = Decimal("100000")
NSITF_RATE = Decimal("0.01")
ITF_RATE = Decimal("0.01")

# Consolidated relief allowance: max(floor, 1% of gross) + 20% of gross (annual figures)
CRA_FLOOR = Decimal("200000")
CRA_MINIMUM_RATE = Decimal("0.01")
CRA_GROSS_RATE = Decimal("0.20")

DEFAULT_HISTORY_LIMIT = 24
