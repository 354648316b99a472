import importlib

from wholesale.repositories.company_repo import CompanyRepository
from wholesale.repositories.exchange_rate_repo import ExchangeRateRepository
from wholesale.repositories.product_repo import ProductRepository


def test_app_module_imports_with_every_router():
    main = importlib.import_module("wholesale.main")
    paths = {route.path for route in main.app.routes}

    for path in (
        "/",
        "/auth/register",
        "/products",
        "/products/skus/{sku_id}/quote",
        "/size-charts",
        "/exchange-rates",
        "/analytics/track",
        "/platform/companies",
        "/uploads",
        "/orders",
    ):
        assert path in paths


def test_repository_listing_methods():
    assert callable(ProductRepository().list_products)
    assert callable(CompanyRepository().list_companies)
    assert callable(ExchangeRateRepository().list_rates)


def test_domain_errors_carry_their_class_name(client):
    resp = client.get(
        "/products/skus/00000000-0000-0000-0000-000000000000/quote",
        params={"quantity": 3},
    )
    assert resp.status_code == 404
    assert resp.json()["error"] == "NotFound"
