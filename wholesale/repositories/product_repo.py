# wholesale/repositories/product_repo.py
import uuid

from sqlmodel import Session, select

from wholesale.models.product import Product, Sku, SkuTierPrice
from wholesale.models.size_chart import SizeChart


class ProductRepository:
    """
    Data access layer for Product, Sku, SkuTierPrice and SizeChart.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    # ----- Products -----

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_active: bool = True,
    ) -> list[Product]:
        stmt = select(Product)
        if only_active:
            stmt = stmt.where(Product.is_active == True)  # noqa: E712
        stmt = stmt.order_by(Product.created_at.desc()).offset(skip).limit(limit)
        return list(session.exec(stmt).all())

    def create_with_skus(
        self,
        session: Session,
        product: Product,
        skus: list[tuple[Sku, list[SkuTierPrice]]],
    ) -> Product:
        """Insert a product, its SKUs and their tiers in one transaction."""
        session.add(product)
        for sku, tiers in skus:
            sku.product_id = product.id
            session.add(sku)
            for tier in tiers:
                tier.sku_id = sku.id
                session.add(tier)
        session.commit()
        session.refresh(product)
        return product

    # ----- SKUs -----

    def get_sku(self, session: Session, sku_id: uuid.UUID) -> Sku | None:
        return session.get(Sku, sku_id)

    def get_sku_by_code(self, session: Session, sku_code: str) -> Sku | None:
        stmt = select(Sku).where(Sku.sku_code == sku_code)
        return session.exec(stmt).first()

    def list_skus(self, session: Session, product_id: uuid.UUID) -> list[Sku]:
        stmt = select(Sku).where(Sku.product_id == product_id).order_by(Sku.sku_code)
        return list(session.exec(stmt).all())

    # ----- Tier prices -----

    def list_tiers(self, session: Session, sku_id: uuid.UUID) -> list[SkuTierPrice]:
        stmt = (
            select(SkuTierPrice)
            .where(SkuTierPrice.sku_id == sku_id)
            .order_by(SkuTierPrice.min_qty)
        )
        return list(session.exec(stmt).all())

    def replace_tiers(
        self,
        session: Session,
        sku_id: uuid.UUID,
        tiers: list[SkuTierPrice],
    ) -> list[SkuTierPrice]:
        """
        Overwrite the whole tier table of a SKU.

        Old rows are flushed out first so re-inserting the same min_qty does
        not collide with the (sku_id, min_qty) unique constraint.
        """
        for row in self.list_tiers(session, sku_id):
            session.delete(row)
        session.flush()
        for tier in tiers:
            tier.sku_id = sku_id
            session.add(tier)
        session.commit()
        return self.list_tiers(session, sku_id)

    # ----- Size charts -----

    def get_size_chart(self, session: Session, chart_id: uuid.UUID) -> SizeChart | None:
        return session.get(SizeChart, chart_id)

    def list_size_charts(self, session: Session) -> list[SizeChart]:
        stmt = select(SizeChart).order_by(SizeChart.created_at.desc())
        return list(session.exec(stmt).all())

    def save_size_chart(self, session: Session, chart: SizeChart) -> SizeChart:
        session.add(chart)
        session.commit()
        session.refresh(chart)
        return chart

    def delete_size_chart(self, session: Session, chart: SizeChart) -> None:
        session.delete(chart)
        session.commit()
