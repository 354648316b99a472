# scripts/seed_tier_prices.py
"""
Seed quantity-break tables for known SKUs, derived from each SKU's base price.

Usage:
    python -m scripts.seed_tier_prices
"""
import argparse
import logging

from sqlmodel import Session

from wholesale.core.pricing import build_tiers
from wholesale.database import engine
from wholesale.models.product import SkuTierPrice
from wholesale.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)

# sku_code -> [(min_qty, multiplier of the base price)]
TIER_PLAN: dict[str, list[tuple[int, float]]] = {
    "PUMP-50-30": [(5, 0.95), (10, 0.90), (20, 0.85)],
    "PUMP-80-50": [(3, 0.95), (10, 0.88)],
}


def seed_tier_prices(
    session: Session,
    plan: dict[str, list[tuple[int, float]]] = TIER_PLAN,
) -> dict[str, list[SkuTierPrice]]:
    """
    Overwrite the tier table of every SKU in `plan`; unknown codes are skipped.

    Returns the rows written, keyed by sku_code.
    """
    repo = ProductRepository()
    written: dict[str, list[SkuTierPrice]] = {}

    for sku_code, discounts in plan.items():
        sku = repo.get_sku_by_code(session, sku_code)
        if sku is None:
            logger.warning("%s not found", sku_code)
            continue
        tiers = build_tiers(sku.price, discounts)
        rows = repo.replace_tiers(
            session,
            sku.id,
            [SkuTierPrice(min_qty=t.min_qty, price=t.price) for t in tiers],
        )
        logger.info("Updated %s with tiers %s", sku_code, [(t.min_qty, str(t.price)) for t in tiers])
        written[sku_code] = rows

    return written


def main(argv: list[str] | None = None) -> None:
    argparse.ArgumentParser(description="Seed tier prices for known SKUs.").parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    logger.info("Start seeding tier prices...")
    with Session(engine) as session:
        seed_tier_prices(session)
    logger.info("Seeding finished.")


if __name__ == "__main__":
    main()
