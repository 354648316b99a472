from decimal import Decimal

import pytest

from wholesale.core.errors import DataIntegrityError, InvalidQuantity
from wholesale.core.pricing import (
    PriceTier,
    build_tiers,
    line_total,
    match_tier,
    resolve_unit_price,
    validate_tiers,
)

TIERS = [PriceTier(5, Decimal("95")), PriceTier(10, Decimal("90")), PriceTier(20, Decimal("85"))]


@pytest.mark.parametrize(
    "quantity, expected",
    [(1, "100"), (4, "100"), (5, "95"), (9, "95"), (10, "90"), (20, "85"), (100, "85")],
)
def test_resolve_picks_greatest_qualifying_tier(quantity, expected):
    assert resolve_unit_price(Decimal("100"), TIERS, quantity) == Decimal(expected)


def test_resolve_ignores_tier_order():
    shuffled = [TIERS[2], TIERS[0], TIERS[1]]
    assert resolve_unit_price(100, shuffled, 12) == Decimal("90")


def test_empty_tier_list_falls_back_to_base_price():
    assert resolve_unit_price(Decimal("42.50"), [], 1000) == Decimal("42.50")


@pytest.mark.parametrize("quantity", [0, -1, 2.5, "3", True])
def test_invalid_quantity_is_rejected(quantity):
    with pytest.raises(InvalidQuantity):
        resolve_unit_price(Decimal("100"), TIERS, quantity)


def test_match_tier_returns_none_below_every_threshold():
    assert match_tier(TIERS, 4) is None
    assert match_tier(TIERS, 10).min_qty == 10


def test_validate_tiers_sorts_by_min_qty():
    result = validate_tiers([TIERS[2], TIERS[0], TIERS[1]])
    assert [t.min_qty for t in result] == [5, 10, 20]


def test_validate_tiers_rejects_duplicate_thresholds():
    with pytest.raises(DataIntegrityError):
        validate_tiers([PriceTier(5, Decimal("95")), PriceTier(5, Decimal("90"))])


@pytest.mark.parametrize(
    "tier",
    [PriceTier(0, Decimal("95")), PriceTier(5, Decimal("0")), PriceTier(5, Decimal("-1"))],
)
def test_validate_tiers_rejects_bad_rows(tier):
    with pytest.raises(DataIntegrityError):
        validate_tiers([tier])


def test_validate_tiers_warns_on_price_above_base(caplog):
    validate_tiers([PriceTier(5, Decimal("120"))], base_price=Decimal("100"))
    assert "higher than the previous price" in caplog.text


def test_build_tiers_rounds_to_cents():
    tiers = build_tiers(Decimal("33.33"), [(5, 0.95), (10, 0.90), (20, 0.85)])
    assert [(t.min_qty, t.price) for t in tiers] == [
        (5, Decimal("31.66")),
        (10, Decimal("30.00")),
        (20, Decimal("28.33")),
    ]


def test_line_total():
    assert line_total(Decimal("95"), 7) == Decimal("665.00")
