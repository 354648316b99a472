from decimal import Decimal


def test_list_products(client, pump):
    resp = client.get("/products")
    assert resp.status_code == 200
    rows = resp.json()
    assert [r["id"] for r in rows] == [str(pump.id)]
    assert "skus" not in rows[0]
    assert "updated_at" in rows[0]


def test_get_product_with_tiers(client, pump):
    resp = client.get(f"/products/{pump.id}")
    assert resp.status_code == 200
    sku = resp.json()["skus"][0]
    assert sku["sku_code"] == "PUMP-50-30"
    assert [(t["min_qty"], Decimal(t["price"])) for t in sku["tier_prices"]] == [
        (5, Decimal("95")),
        (10, Decimal("90")),
        (20, Decimal("85")),
    ]


def test_get_missing_product(client):
    resp = client.get("/products/00000000-0000-0000-0000-000000000000")
    assert resp.status_code == 404


def test_quote_examples(client, pump):
    sku_id = pump.skus[0].id
    expected = {1: "100", 5: "95", 9: "95", 20: "85", 100: "85"}
    for quantity, price in expected.items():
        resp = client.get(f"/products/skus/{sku_id}/quote", params={"quantity": quantity})
        assert resp.status_code == 200
        assert Decimal(resp.json()["unit_price"]) == Decimal(price)

    body = client.get(f"/products/skus/{sku_id}/quote", params={"quantity": 12}).json()
    assert body["matched_min_qty"] == 10
    assert Decimal(body["line_total"]) == Decimal("1080")


def test_quote_below_tiers_has_no_match(client, pump):
    body = client.get(f"/products/skus/{pump.skus[0].id}/quote", params={"quantity": 2}).json()
    assert body["matched_min_qty"] is None


def test_quote_rejects_non_positive_quantity(client, pump):
    resp = client.get(f"/products/skus/{pump.skus[0].id}/quote", params={"quantity": 0})
    assert resp.status_code == 400


def test_quote_unknown_sku(client):
    resp = client.get(
        "/products/skus/00000000-0000-0000-0000-000000000000/quote",
        params={"quantity": 1},
    )
    assert resp.status_code == 404


def test_replace_tier_prices(client, pump, admin):
    sku_id = pump.skus[0].id
    resp = client.put(
        f"/products/skus/{sku_id}/tier-prices",
        json={"tiers": [{"min_qty": 10, "price": "80"}, {"min_qty": 5, "price": "90"}]},
        headers=admin["headers"],
    )
    assert resp.status_code == 200
    assert [t["min_qty"] for t in resp.json()["tier_prices"]] == [5, 10]

    quote = client.get(f"/products/skus/{sku_id}/quote", params={"quantity": 25}).json()
    assert Decimal(quote["unit_price"]) == Decimal("80")


def test_duplicate_tier_threshold_is_rejected(client, pump, admin):
    sku_id = pump.skus[0].id
    resp = client.put(
        f"/products/skus/{sku_id}/tier-prices",
        json={"tiers": [{"min_qty": 5, "price": "90"}, {"min_qty": 5, "price": "80"}]},
        headers=admin["headers"],
    )
    assert resp.status_code == 409

    # previous table untouched
    sku = client.get(f"/products/{pump.id}").json()["skus"][0]
    assert [t["min_qty"] for t in sku["tier_prices"]] == [5, 10, 20]


def test_empty_tier_table_clears_breaks(client, pump, admin):
    sku_id = pump.skus[0].id
    client.put(f"/products/skus/{sku_id}/tier-prices", json={"tiers": []}, headers=admin["headers"])
    quote = client.get(f"/products/skus/{sku_id}/quote", params={"quantity": 50}).json()
    assert Decimal(quote["unit_price"]) == Decimal("100")


def test_tier_prices_need_admin(client, pump, buyer):
    url = f"/products/skus/{pump.skus[0].id}/tier-prices"
    assert client.put(url, json={"tiers": []}).status_code == 401
    assert client.put(url, json={"tiers": []}, headers=buyer["headers"]).status_code == 403


def test_create_product(client, admin):
    payload = {
        "title": "Pump 80",
        "base_price": "120.00",
        "skus": [
            {"sku_code": "PUMP-80-50", "price": "120.00", "tier_prices": [{"min_qty": 3, "price": "114"}]},
            {"sku_code": "PUMP-80-51", "price": "125.00"},
        ],
    }
    resp = client.post("/products", json=payload, headers=admin["headers"])
    assert resp.status_code == 201
    assert sorted(s["sku_code"] for s in resp.json()["skus"]) == ["PUMP-80-50", "PUMP-80-51"]

    again = client.post("/products", json=payload, headers=admin["headers"])
    assert again.status_code == 409


def test_size_chart_crud(client, admin):
    created = client.post(
        "/size-charts",
        json={"name": "EU shoes", "data": {"headers": ["EU", "US"], "rows": [["38", "7"]]}},
        headers=admin["headers"],
    )
    assert created.status_code == 201
    chart_id = created.json()["id"]

    assert client.get(f"/size-charts/{chart_id}").json()["data"]["rows"] == [["38", "7"]]

    renamed = client.patch(f"/size-charts/{chart_id}", json={"name": "EU"}, headers=admin["headers"])
    assert renamed.json()["name"] == "EU"

    assert client.delete(f"/size-charts/{chart_id}", headers=admin["headers"]).status_code == 204
    assert client.get(f"/size-charts/{chart_id}").status_code == 404
