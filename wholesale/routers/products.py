# wholesale/routers/products.py
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from wholesale.core.auth import require_admin
from wholesale.database import get_session
from wholesale.repositories.product_repo import ProductRepository
from wholesale.schemas.product import (
    PriceQuote,
    ProductCreate,
    ProductRead,
    ProductSummary,
    SkuRead,
    TierPricesUpdate,
)
from wholesale.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[ProductSummary])
def list_products(
    session: Session = Depends(get_session),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=1000),
):
    """
    List active products (also feeds sitemap generation).
    """
    return service.list_products(session, skip=skip, limit=limit)


@router.get("/skus/{sku_id}/quote", response_model=PriceQuote)
def quote_sku(
    sku_id: uuid.UUID,
    quantity: int,
    session: Session = Depends(get_session),
):
    """
    Resolve the tiered unit price of a SKU for `quantity` units.
    """
    return service.quote(session, sku_id, quantity)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product with its SKUs and tier tables.
    """
    return service.get_product(session, product_id)


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a product with SKUs and optional tier tables (admin only).
    """
    return service.create_product(session, payload)


@router.put(
    "/skus/{sku_id}/tier-prices",
    response_model=SkuRead,
    dependencies=[Depends(require_admin)],
)
def set_tier_prices(
    sku_id: uuid.UUID,
    payload: TierPricesUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace the whole tier table of a SKU (admin only).

    Duplicate min_qty values are rejected with 409.
    """
    return service.set_tier_prices(session, sku_id, payload.tiers)
