"""
Unit tests for the pricing engine and display formatting.
"""

from decimal import Decimal

import pytest

from models.cart import CartLine
from models.product import Product
from modules.formatting import format_number_id, format_rupiah, unit_label
from modules.pricing import compute_summary, compute_tax, round_half_up


def _line(product_id, price, quantity):
    return CartLine(product=Product(id=product_id, name=product_id.title(), price=price), quantity=quantity)


class TestRoundHalfUp:
    """Ties go away from zero."""

    @pytest.mark.parametrize("value,expected", [
        ("2.5", 3),
        ("3.5", 4),
        ("2.4999", 2),
        ("18150.5", 18151),
        ("-2.5", -3),
        ("0", 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(Decimal(value)) == expected


class TestComputeTax:

    def test_eleven_percent_is_exact(self):
        assert compute_tax(165000, 0.11) == 18150

    def test_tie_rounds_up(self):
        # 50 * 0.11 = 5.5
        assert compute_tax(50, 0.11) == 6

    def test_zero_rate(self):
        assert compute_tax(165000, 0.0) == 0


class TestComputeSummary:

    def test_single_sack_of_cement(self):
        summary = compute_summary([_line("semen-padang", 165000, 1)], 0.11)

        assert summary.subtotal == 165000
        assert summary.tax == 18150
        assert summary.total == 183150
        assert summary.item_count == 1
        assert summary.tax_rate == 0.11

    def test_mixed_cart(self):
        lines = [
            _line("semen-padang", 165000, 2),
            _line("batu-bata-merah", 2500, 10),
        ]
        summary = compute_summary(lines, 0.11)

        assert summary.subtotal == 355000
        assert summary.tax == 39050
        assert summary.total == 394050
        assert summary.item_count == 12

    def test_empty_cart(self):
        summary = compute_summary([], 0.11)

        assert summary.subtotal == 0
        assert summary.tax == 0
        assert summary.total == 0
        assert summary.is_empty

    def test_total_is_subtotal_plus_tax(self):
        summary = compute_summary([_line("a", 999, 7), _line("b", 12345, 3)], 0.11)
        assert summary.total == summary.subtotal + summary.tax

    def test_same_lines_same_summary(self):
        lines = [_line("semen-padang", 165000, 2), _line("batu-bata-merah", 2500, 10)]

        first = compute_summary(lines, 0.11)
        second = compute_summary(lines, 0.11)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_default_rate(self):
        summary = compute_summary([_line("semen-padang", 165000, 1)])
        assert summary.tax == 18150


class TestFormatting:

    def test_thousands_separator(self):
        assert format_number_id(1650000) == "1.650.000"
        assert format_number_id(0) == "0"

    def test_rupiah(self):
        assert format_rupiah(183150) == "Rp 183.150"

    def test_unit_label(self):
        assert unit_label("55Kg / 1 Karung") == "1 Karung"
        assert unit_label("1 Pcs") == "1 Pcs"
        assert unit_label("") == "Unit"
