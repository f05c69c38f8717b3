"""
Tests for `domain/payments.py`.

Covers contract rules:
- selectionValue = sum(quantity * (unitPrice ?? 0)), missing quantity counts as 1.
- Only paid records count toward the per-type sums.
- totalDue and paymentPercentage use quoteValue ?? selectionValue.
- paymentPercentage is 0 when that value is 0.
- Milestones are 20/70/10 of the total, rounded half-up.
"""

from __future__ import annotations

from decimal import Decimal

from domain.payments import (
    PaymentRecord,
    PaymentType,
    SelectionItem,
    effective_value,
    payment_milestones,
    payment_percentage,
    payment_totals,
    quote_totals,
    selection_count,
    selection_value,
    to_decimal,
    total_due,
    total_paid,
)


def test_selection_value_sums_quantity_times_price() -> None:
    items = [
        SelectionItem(name="Clarence Sofa", quantity=1, unit_price=Decimal("8500")),
        SelectionItem(name="Monarch Armchair", quantity=2, unit_price=Decimal("3200")),
    ]

    assert selection_value(items) == Decimal("14900")
    assert selection_count(items) == 3


def test_missing_price_counts_as_zero_and_missing_quantity_as_one() -> None:
    items = [
        SelectionItem(name="Reading Lamp"),
        SelectionItem(name="Cushion", unit_price=Decimal("45")),
        SelectionItem(name="Sample", quantity=0, unit_price=Decimal("99")),
    ]

    assert selection_value(items) == Decimal("45")
    assert selection_count(items) == 2


def test_negative_prices_are_not_clamped() -> None:
    items = [
        SelectionItem(name="Sofa", quantity=1, unit_price=Decimal("1000")),
        SelectionItem(name="Trade-in credit", quantity=1, unit_price=Decimal("-250")),
    ]

    assert selection_value(items) == Decimal("750")


def test_selection_value_of_nothing_is_zero() -> None:
    assert selection_value([]) == Decimal("0")


def test_payment_totals_count_only_paid_records() -> None:
    totals = payment_totals(
        [
            PaymentRecord(payment_type="deposit", amount=Decimal("2880")),
            PaymentRecord(payment_type="production", amount=Decimal("10080"), status="pending"),
            PaymentRecord(payment_type="delivery", amount=Decimal("1440")),
            PaymentRecord(payment_type="refund", amount=Decimal("100")),
        ]
    )

    assert totals.deposit_paid == Decimal("2880")
    assert totals.production_paid == Decimal("0")
    assert totals.final_paid == Decimal("1440")
    assert totals.total_paid == Decimal("4320")


def test_total_paid_treats_missing_fields_as_zero() -> None:
    assert total_paid(Decimal("100"), None, Decimal("5")) == Decimal("105")
    assert total_paid(None, None, None) == Decimal("0")


def test_quote_value_overrides_selection_value() -> None:
    assert effective_value(Decimal("14400"), Decimal("14900")) == Decimal("14400")
    assert effective_value(None, Decimal("14900")) == Decimal("14900")
    assert effective_value(Decimal("0"), Decimal("14900")) == Decimal("0")


def test_total_due_without_quote_uses_selection_value() -> None:
    assert total_due(None, Decimal("15800"), Decimal("0")) == Decimal("15800")
    assert total_due(Decimal("14400"), Decimal("14900"), Decimal("2880")) == Decimal("11520")


def test_payment_percentage() -> None:
    assert payment_percentage(Decimal("14400"), Decimal("14900"), Decimal("2880")) == 20
    assert payment_percentage(None, Decimal("3"), Decimal("1")) == 33
    assert payment_percentage(None, Decimal("8"), Decimal("1")) == 13  # 12.5 rounds half-up


def test_payment_percentage_is_zero_when_value_is_zero() -> None:
    assert payment_percentage(None, Decimal("0"), Decimal("500")) == 0
    assert payment_percentage(Decimal("0"), Decimal("9000"), Decimal("500")) == 0


def test_payment_milestones() -> None:
    milestones = payment_milestones(Decimal("14400"))

    assert milestones.deposit == Decimal("2880")
    assert milestones.production == Decimal("10080")
    assert milestones.final == Decimal("1440")


def test_payment_milestones_round_half_up() -> None:
    milestones = payment_milestones(Decimal("12345"))

    assert milestones.deposit == Decimal("2469")
    assert milestones.production == Decimal("8642")  # 8641.5
    assert milestones.final == Decimal("1235")  # 1234.5


def test_payment_type_percentages() -> None:
    assert [t.percentage for t in PaymentType] == [20, 70, 10]


def test_quote_totals_subtract_discount() -> None:
    assert quote_totals([Decimal("8500"), Decimal("6400")], Decimal("500")) == (Decimal("14900"), Decimal("14400"))
    assert quote_totals([], None) == (Decimal("0"), Decimal("0"))


def test_to_decimal() -> None:
    assert to_decimal(14400) == Decimal("14400")
    assert to_decimal("99.50") == Decimal("99.50")
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) is None
    assert to_decimal("") is None
    assert to_decimal("n/a") is None
    assert to_decimal(True) is None
