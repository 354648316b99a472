# wholesale/services/product_service.py
import logging
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from wholesale.core.errors import NotFound
from wholesale.core.pricing import PriceTier, line_total, match_tier, to_decimal, validate_tiers
from wholesale.models.product import Product, Sku, SkuTierPrice
from wholesale.models.size_chart import SizeChart
from wholesale.repositories.product_repo import ProductRepository
from wholesale.schemas.product import (
    PriceQuote,
    ProductCreate,
    ProductRead,
    SkuRead,
    TierPriceIn,
    TierPriceRead,
)
from wholesale.schemas.size_chart import SizeChartCreate, SizeChartUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for the catalog.

    Responsibilities:
      - product / SKU creation and read models (SKUs carry their tier tables)
      - write-time validation and wholesale overwrite of tier prices
      - unit price quotes through the tier resolver
      - size chart CRUD
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Helpers -----

    def _sku_read(self, session: Session, sku: Sku) -> SkuRead:
        tiers = self.repo.list_tiers(session, sku.id)
        return SkuRead(
            id=sku.id,
            product_id=sku.product_id,
            sku_code=sku.sku_code,
            price=sku.price,
            moq=sku.moq,
            stock=sku.stock,
            specs=sku.specs,
            image_url=sku.image_url,
            tier_prices=[TierPriceRead(min_qty=t.min_qty, price=t.price) for t in tiers],
        )

    def _product_read(self, session: Session, product: Product) -> ProductRead:
        skus = self.repo.list_skus(session, product.id)
        return ProductRead(
            id=product.id,
            title=product.title,
            description=product.description,
            base_price=product.base_price,
            moq=product.moq,
            image_url=product.image_url,
            size_chart_id=product.size_chart_id,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
            skus=[self._sku_read(session, s) for s in skus],
        )

    @staticmethod
    def _tier_rows(tiers: list[TierPriceIn], base_price) -> list[SkuTierPrice]:
        validated = validate_tiers(
            [PriceTier(min_qty=t.min_qty, price=t.price) for t in tiers],
            base_price=base_price,
        )
        return [SkuTierPrice(min_qty=t.min_qty, price=t.price) for t in validated]

    def get_sku(self, session: Session, sku_id: uuid.UUID) -> Sku:
        """
        Raises:
            NotFound: if the SKU does not exist.
        """
        sku = self.repo.get_sku(session, sku_id)
        if sku is None:
            raise NotFound(f"SKU {sku_id} not found")
        return sku

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        only_active: bool = True,
    ) -> list[Product]:
        return self.repo.list_products(session, skip=skip, limit=limit, only_active=only_active)

    def get_product(self, session: Session, product_id: uuid.UUID) -> ProductRead:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return self._product_read(session, product)

    def create_product(self, session: Session, payload: ProductCreate) -> ProductRead:
        """
        Create a product with its SKUs and tier tables.

        - SKU codes must be unique across the catalog (409 otherwise).
        - Each tier table is validated before anything is written.
        """
        codes = [s.sku_code for s in payload.skus]
        if len(codes) != len(set(codes)):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Duplicate sku_code in payload",
            )
        for code in codes:
            if self.repo.get_sku_by_code(session, code) is not None:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"SKU code {code} already exists",
                )

        product = Product(
            title=payload.title,
            description=payload.description,
            base_price=payload.base_price,
            moq=payload.moq,
            image_url=payload.image_url,
            size_chart_id=payload.size_chart_id,
            is_active=payload.is_active,
        )
        skus = [
            (
                Sku(
                    product_id=product.id,
                    sku_code=s.sku_code,
                    price=s.price,
                    moq=s.moq,
                    stock=s.stock,
                    specs=s.specs,
                    image_url=s.image_url,
                ),
                self._tier_rows(s.tier_prices, s.price),
            )
            for s in payload.skus
        ]
        product = self.repo.create_with_skus(session, product, skus)
        return self._product_read(session, product)

    # ----- Tier prices -----

    def set_tier_prices(
        self,
        session: Session,
        sku_id: uuid.UUID,
        tiers: list[TierPriceIn],
    ) -> SkuRead:
        """
        Overwrite the tier table of a SKU wholesale.

        Raises:
            NotFound: unknown SKU.
            DataIntegrityError: duplicate / invalid thresholds.
        """
        sku = self.get_sku(session, sku_id)
        rows = self._tier_rows(tiers, sku.price)
        try:
            self.repo.replace_tiers(session, sku.id, rows)
        except IntegrityError:
            session.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Tier table conflicts with existing data",
            )

        product = self.repo.get_by_id(session, sku.product_id)
        if product is not None:
            product.updated_at = datetime.now(timezone.utc)
            session.add(product)
            session.commit()

        logger.info("Updated tier prices for %s: %s", sku.sku_code, [(r.min_qty, str(r.price)) for r in rows])
        return self._sku_read(session, sku)

    def quote(self, session: Session, sku_id: uuid.UUID, quantity: int) -> PriceQuote:
        """
        Resolve the unit price for `quantity` units of a SKU.

        Raises:
            NotFound: unknown SKU.
            InvalidQuantity: quantity <= 0.
        """
        sku = self.get_sku(session, sku_id)
        tiers = self.repo.list_tiers(session, sku.id)
        tier = match_tier(tiers, quantity)
        unit_price = to_decimal(tier.price if tier is not None else sku.price)
        return PriceQuote(
            sku_id=sku.id,
            quantity=quantity,
            base_price=sku.price,
            unit_price=unit_price,
            line_total=line_total(unit_price, quantity),
            matched_min_qty=tier.min_qty if tier is not None else None,
        )

    # ----- Size charts -----

    def list_size_charts(self, session: Session) -> list[SizeChart]:
        return self.repo.list_size_charts(session)

    def get_size_chart(self, session: Session, chart_id: uuid.UUID) -> SizeChart:
        chart = self.repo.get_size_chart(session, chart_id)
        if chart is None:
            raise NotFound(f"SizeChart with ID {chart_id} not found")
        return chart

    def create_size_chart(self, session: Session, payload: SizeChartCreate) -> SizeChart:
        return self.repo.save_size_chart(session, SizeChart(name=payload.name, data=payload.data))

    def update_size_chart(
        self,
        session: Session,
        chart_id: uuid.UUID,
        payload: SizeChartUpdate,
    ) -> SizeChart:
        chart = self.get_size_chart(session, chart_id)
        if payload.name is not None:
            chart.name = payload.name
        if payload.data is not None:
            chart.data = payload.data
        return self.repo.save_size_chart(session, chart)

    def delete_size_chart(self, session: Session, chart_id: uuid.UUID) -> None:
        chart = self.get_size_chart(session, chart_id)
        self.repo.delete_size_chart(session, chart)
