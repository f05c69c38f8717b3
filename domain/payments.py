"""
Domain: Derived money fields for selections, payments, and quotes (pure).

Rules implemented here:
- selectionValue = sum(quantity_i * (unitPrice_i ?? 0)); a missing quantity counts as 1.
- depositPaid / productionPaid / finalPaid = sums of *paid* payment records per
  type (deposit / production / delivery), 0 when none.
- totalPaid = depositPaid + productionPaid + finalPaid
- effective value = quoteValue ?? selectionValue  (the quote overrides the selection)
- totalDue = effective value - totalPaid
- paymentPercentage = round(totalPaid / effective value * 100), 0 when the
  effective value is 0.
- Three-stage payment plan targets: deposit 20%, production 70%, final 10%,
  each rounded to a whole amount. These are informational; paid amounts are
  independent inputs.

Rounding is half-up. Negative prices and totals are passed through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

ZERO = Decimal("0")

DEPOSIT_SHARE = Decimal("0.20")
PRODUCTION_SHARE = Decimal("0.70")
FINAL_SHARE = Decimal("0.10")


class PaymentType(str, Enum):
    DEPOSIT = "deposit"
    PRODUCTION = "production"
    DELIVERY = "delivery"

    @property
    def percentage(self) -> int:
        return {
            PaymentType.DEPOSIT: 20,
            PaymentType.PRODUCTION: 70,
            PaymentType.DELIVERY: 10,
        }[self]


PAID_STATUS = "paid"


@dataclass(frozen=True, slots=True)
class SelectionItem:
    """One line of a prospect's selection. Prices may be unknown (None)."""

    name: str
    quantity: Optional[int] = None
    unit_price: Optional[Decimal] = None


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    payment_type: str
    amount: Decimal
    status: str = PAID_STATUS


@dataclass(frozen=True, slots=True)
class PaymentTotals:
    deposit_paid: Decimal = ZERO
    production_paid: Decimal = ZERO
    final_paid: Decimal = ZERO

    @property
    def total_paid(self) -> Decimal:
        return self.deposit_paid + self.production_paid + self.final_paid


@dataclass(frozen=True, slots=True)
class PaymentMilestones:
    deposit: Decimal
    production: Decimal
    final: Decimal


def to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a stored numeric value to Decimal; None for missing or unparseable."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def round_half_up(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def _quantity(item: SelectionItem) -> int:
    return item.quantity if item.quantity is not None else 1


def selection_value(items: Iterable[SelectionItem]) -> Decimal:
    return sum(
        ((item.unit_price if item.unit_price is not None else ZERO) * _quantity(item) for item in items),
        ZERO,
    )


def selection_count(items: Iterable[SelectionItem]) -> int:
    return sum(_quantity(item) for item in items)


def payment_totals(payments: Iterable[PaymentRecord]) -> PaymentTotals:
    deposit = production = final = ZERO
    for payment in payments:
        if payment.status != PAID_STATUS:
            continue
        if payment.payment_type == PaymentType.DEPOSIT.value:
            deposit += payment.amount
        elif payment.payment_type == PaymentType.PRODUCTION.value:
            production += payment.amount
        elif payment.payment_type == PaymentType.DELIVERY.value:
            final += payment.amount
    return PaymentTotals(deposit_paid=deposit, production_paid=production, final_paid=final)


def total_paid(
    deposit_paid: Optional[Decimal],
    production_paid: Optional[Decimal],
    final_paid: Optional[Decimal],
) -> Decimal:
    return (deposit_paid or ZERO) + (production_paid or ZERO) + (final_paid or ZERO)


def effective_value(quote_value: Optional[Decimal], selection_value: Decimal) -> Decimal:
    return quote_value if quote_value is not None else selection_value


def total_due(quote_value: Optional[Decimal], selection_value: Decimal, paid: Decimal) -> Decimal:
    return effective_value(quote_value, selection_value) - paid


def payment_percentage(quote_value: Optional[Decimal], selection_value: Decimal, paid: Decimal) -> int:
    denominator = effective_value(quote_value, selection_value)
    if denominator == 0:
        return 0
    return int(round_half_up(paid / denominator * 100))


def payment_milestones(total: Decimal) -> PaymentMilestones:
    return PaymentMilestones(
        deposit=round_half_up(total * DEPOSIT_SHARE),
        production=round_half_up(total * PRODUCTION_SHARE),
        final=round_half_up(total * FINAL_SHARE),
    )


def quote_totals(line_totals: Iterable[Decimal], discount: Optional[Decimal]) -> Tuple[Decimal, Decimal]:
    """(subtotal, total) where total = subtotal - discount."""

    subtotal = sum(line_totals, ZERO)
    return subtotal, subtotal - (discount or ZERO)


__all__ = [
    "PaymentMilestones",
    "PaymentRecord",
    "PaymentTotals",
    "PaymentType",
    "SelectionItem",
    "effective_value",
    "payment_milestones",
    "payment_percentage",
    "payment_totals",
    "quote_totals",
    "round_half_up",
    "selection_count",
    "selection_value",
    "to_decimal",
    "total_due",
    "total_paid",
]
