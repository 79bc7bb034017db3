from decimal import Decimal

import pytest

from src.hr_payroll.hr_payroll.core.exceptions import InvalidInputError
from src.hr_payroll.hr_payroll.payroll.calculator.brackets import (
    NIGERIA_PAYE_2024,
    progressive_tax,
    validate_brackets,
)
from src.hr_payroll.hr_payroll.payroll.model import TaxBracket


@pytest.mark.parametrize(
    "income, expected",
    [
        ("0", "0"),
        ("300000", "21000"),
        ("600000", "54000"),
        ("1100000", "129000"),
        ("1600000", "224000"),
        ("3200000", "560000"),
        ("4200000", "800000"),
    ],
)
def test_progressive_tax_at_bracket_edges(income, expected):
    assert progressive_tax(Decimal(income), NIGERIA_PAYE_2024) == Decimal(expected)


def test_income_just_above_edge_is_taxed_at_marginal_rate():
    assert progressive_tax(Decimal("300001"), NIGERIA_PAYE_2024) == Decimal("21000.11")


def test_income_above_last_bound_has_no_ceiling():
    assert progressive_tax(Decimal("13200000"), NIGERIA_PAYE_2024) == Decimal("560000") + Decimal("10000000") * Decimal("0.24")


def test_negative_income_is_rejected():
    with pytest.raises(InvalidInputError):
        progressive_tax(Decimal("-1"), NIGERIA_PAYE_2024)


def test_canonical_table_is_valid():
    assert validate_brackets(NIGERIA_PAYE_2024) == NIGERIA_PAYE_2024


@pytest.mark.parametrize(
    "table",
    [
        [],
        [TaxBracket(Decimal("100"), None, Decimal("0.1"))],
        [TaxBracket(Decimal("0"), Decimal("100"), Decimal("0.1"))],
        [
            TaxBracket(Decimal("0"), Decimal("100"), Decimal("0.1")),
            TaxBracket(Decimal("150"), None, Decimal("0.2")),
        ],
        [
            TaxBracket(Decimal("0"), None, Decimal("0.1")),
            TaxBracket(Decimal("100"), None, Decimal("0.2")),
        ],
        [TaxBracket(Decimal("0"), None, Decimal("1.5"))],
    ],
)
def test_malformed_tables_are_rejected(table):
    with pytest.raises(ValueError):
        validate_brackets(table)
