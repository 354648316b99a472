import csv
import io


def test_list_companies(client, platform_admin, admin, buyer):
    resp = client.get("/platform/companies", headers=platform_admin["headers"])
    assert resp.status_code == 200
    rows = resp.json()
    assert {r["id"] for r in rows} == {str(admin["company_id"]), str(buyer["company_id"])}
    assert all(r["user_count"] == 1 for r in rows)
    assert all(r["status"] == "PENDING" for r in rows)


def test_platform_routes_need_platform_admin(client, admin):
    assert client.get("/platform/companies").status_code == 401
    assert client.get("/platform/companies", headers=admin["headers"]).status_code == 403


def test_status_update_and_dashboard(client, platform_admin, admin, buyer):
    company_id = admin["company_id"]
    resp = client.patch(
        f"/platform/companies/{company_id}/status",
        json={"status": "APPROVED"},
        headers=platform_admin["headers"],
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "APPROVED"

    stats = client.get("/platform/dashboard-stats", headers=platform_admin["headers"]).json()
    assert stats == {"total_companies": 2, "pending_companies": 1, "total_orders": 0, "total_users": 3}


def test_invalid_status(client, platform_admin, admin):
    resp = client.patch(
        f"/platform/companies/{admin['company_id']}/status",
        json={"status": "MAYBE"},
        headers=platform_admin["headers"],
    )
    assert resp.status_code == 422


def test_assign_sales_rep_and_filter(client, platform_admin, admin, buyer):
    resp = client.patch(
        f"/platform/companies/{admin['company_id']}/sales-rep",
        json={"sales_rep_id": str(platform_admin["id"])},
        headers=platform_admin["headers"],
    )
    assert resp.status_code == 200
    assert resp.json()["sales_rep"]["email"] == platform_admin["email"]

    filtered = client.get(
        "/platform/companies",
        params={"sales_rep_id": str(platform_admin["id"])},
        headers=platform_admin["headers"],
    ).json()
    assert [c["id"] for c in filtered] == [str(admin["company_id"])]

    reps = client.get("/platform/sales-reps", headers=platform_admin["headers"]).json()
    assert [r["email"] for r in reps] == [platform_admin["email"]]


def test_sales_rep_must_be_platform_admin(client, platform_admin, admin, buyer):
    resp = client.patch(
        f"/platform/companies/{admin['company_id']}/sales-rep",
        json={"sales_rep_id": str(buyer["id"])},
        headers=platform_admin["headers"],
    )
    assert resp.status_code == 400


def test_unknown_company(client, platform_admin):
    resp = client.patch(
        "/platform/companies/00000000-0000-0000-0000-000000000000/status",
        json={"status": "APPROVED"},
        headers=platform_admin["headers"],
    )
    assert resp.status_code == 404


def test_csv_export(client, platform_admin, admin, make_user):
    make_user("second@acme.com")
    resp = client.get("/platform/companies/export", headers=platform_admin["headers"])

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "companies.csv" in resp.headers["content-disposition"]

    rows = list(csv.DictReader(io.StringIO(resp.text)))
    assert len(rows) == 2
    assert {r["contact_email"] for r in rows} == {"admin@acme.com", "second@acme.com"}
