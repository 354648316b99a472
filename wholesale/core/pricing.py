# wholesale/core/pricing.py
"""
Quantity-break pricing.

A SKU carries a base unit price and an optional tier table of
(min_qty, price) pairs. The unit price charged for a quantity is the price of
the tier with the greatest min_qty <= quantity, or the base price when no
tier qualifies.

Tier tables are validated when they are written (`validate_tiers`), never
repaired at read time.
"""
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol

from wholesale.core.errors import DataIntegrityError, InvalidQuantity

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class TierLike(Protocol):
    min_qty: int
    price: Decimal


@dataclass(frozen=True)
class PriceTier:
    """One row of a SKU's quantity-break table."""

    min_qty: int
    price: Decimal


def to_decimal(value) -> Decimal:
    """Convert int / float / str / Decimal to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def ensure_quantity(quantity) -> int:
    """Return `quantity` if it is a positive int, else raise InvalidQuantity."""
    # bool is an int subclass but never a meaningful quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantity(f"Quantity must be an integer, got {quantity!r}")
    if quantity <= 0:
        raise InvalidQuantity(f"Quantity must be positive, got {quantity}")
    return quantity


def match_tier(tiers: Iterable[TierLike], quantity: int) -> TierLike | None:
    """
    Return the tier with the greatest min_qty <= quantity, or None.

    Raises:
        InvalidQuantity: if quantity is not a positive integer.
    """
    quantity = ensure_quantity(quantity)
    best: TierLike | None = None
    for tier in tiers:
        if tier.min_qty <= quantity and (best is None or tier.min_qty > best.min_qty):
            best = tier
    return best


def resolve_unit_price(base_price, tiers: Iterable[TierLike], quantity: int) -> Decimal:
    """
    Resolve the unit price to charge for `quantity` units.

    Example:
        base 100, tiers [(5, 95), (10, 90), (20, 85)]
        q=1 -> 100, q=5 -> 95, q=9 -> 95, q=20 -> 85, q=100 -> 85

    Raises:
        InvalidQuantity: if quantity is zero, negative or not an integer.
    """
    tier = match_tier(tiers, quantity)
    if tier is None:
        return to_decimal(base_price)
    return to_decimal(tier.price)


def validate_tiers(tiers: Iterable[TierLike], base_price=None) -> list[PriceTier]:
    """
    Validate a tier table before it is persisted and return it sorted by min_qty.

    Rules:
      - min_qty >= 1
      - min_qty unique within the table
      - price > 0

    Prices above the base price or not decreasing with min_qty are accepted
    but logged.

    Raises:
        DataIntegrityError: if any rule is violated.
    """
    normalized: list[PriceTier] = []
    seen: set[int] = set()

    for tier in tiers:
        min_qty = tier.min_qty
        price = to_decimal(tier.price)
        if isinstance(min_qty, bool) or not isinstance(min_qty, int) or min_qty < 1:
            raise DataIntegrityError(f"Tier min_qty must be an integer >= 1, got {min_qty!r}")
        if min_qty in seen:
            raise DataIntegrityError(f"Duplicate tier min_qty {min_qty}")
        if price <= 0:
            raise DataIntegrityError(f"Tier price must be positive (min_qty={min_qty})")
        seen.add(min_qty)
        normalized.append(PriceTier(min_qty=min_qty, price=price))

    normalized.sort(key=lambda t: t.min_qty)

    previous = to_decimal(base_price) if base_price is not None else None
    for tier in normalized:
        if previous is not None and tier.price > previous:
            logger.warning(
                "Tier price %s at min_qty=%s is higher than the previous price %s",
                tier.price,
                tier.min_qty,
                previous,
            )
        previous = tier.price

    return normalized


def build_tiers(base_price, discounts: Iterable[tuple[int, float]]) -> list[PriceTier]:
    """
    Derive a tier table from (min_qty, multiplier) pairs.

    >>> build_tiers(100, [(5, 0.95), (10, 0.90)])
    [PriceTier(min_qty=5, price=Decimal('95.00')), PriceTier(min_qty=10, price=Decimal('90.00'))]
    """
    base = to_decimal(base_price)
    tiers = [
        PriceTier(
            min_qty=min_qty,
            price=(base * to_decimal(multiplier)).quantize(CENT, rounding=ROUND_HALF_UP),
        )
        for min_qty, multiplier in discounts
    ]
    return validate_tiers(tiers, base_price=base)


def line_total(unit_price, quantity: int) -> Decimal:
    return (to_decimal(unit_price) * quantity).quantize(CENT, rounding=ROUND_HALF_UP)
