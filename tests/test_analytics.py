import json
import logging
import re

from storefront_fakes import FakeTransport
from wholesale.storefront.analytics import AnalyticsTracker, new_session_id
from wholesale.storefront.api import StorefrontApi
from wholesale.storefront.auth_store import AuthStore
from wholesale.storefront.http import build_client
from wholesale.storefront.storage import MemoryStorage


def track(client, event_type, **extra):
    return client.post("/analytics/track", json={"event_type": event_type, **extra})


def test_track_is_public(client):
    resp = track(client, "VISIT", session_id="sess_1", metadata=json.dumps({"path": "/en"}))
    assert resp.status_code == 201
    assert resp.json()["event_type"] == "VISIT"


def test_track_rejects_non_json_metadata(client):
    assert track(client, "VISIT", metadata="{not json").status_code == 422


def test_dashboard(client, admin):
    for _ in range(4):
        track(client, "VISIT")
    track(client, "VIEW_PRODUCT")

    body = client.get("/analytics/dashboard", headers=admin["headers"]).json()
    assert body["visits"] == {"today": 4, "total": 4}
    assert body["orders"] == {"today": 0, "total": 0}
    assert body["conversion_rate"] == 0


def test_funnel(client, admin):
    for event, n in [("VIEW_PRODUCT", 3), ("ADD_TO_CART", 2), ("PURCHASE", 1)]:
        for _ in range(n):
            track(client, event)

    body = client.get("/analytics/funnel", headers=admin["headers"]).json()
    assert [(s["step"], s["count"]) for s in body["funnel"]] == [
        ("Product View", 3),
        ("Add to Cart", 2),
        ("Checkout", 0),
        ("Purchase", 1),
    ]


def test_reports_need_admin(client, buyer):
    assert client.get("/analytics/dashboard").status_code == 401
    assert client.get("/analytics/funnel", headers=buyer["headers"]).status_code == 403


def test_session_id_format():
    assert re.fullmatch(r"sess_[0-9a-f]{12}_\d{13}", new_session_id())


def test_tracker_posts_event_with_user_and_session():
    auth = AuthStore(MemoryStorage())
    auth.set_auth("tok", {"id": "8c0d7e38-2a2e-4f3b-9d6e-0d3c4c1a7f11", "email": "a@b.com", "role": "USER"})
    transport = FakeTransport((201, {"id": "x"}))
    api = StorefrontApi(build_client("http://api.test", auth, transport=transport))

    tracker = AnalyticsTracker(api, auth, session_id="sess_abc_1")
    assert tracker.track_event("ADD_TO_CART", {"sku": "PUMP-50-30"}) is True

    sent = json.loads(transport.requests[0].body)
    assert sent == {
        "event_type": "ADD_TO_CART",
        "user_id": "8c0d7e38-2a2e-4f3b-9d6e-0d3c4c1a7f11",
        "metadata": json.dumps({"sku": "PUMP-50-30"}),
        "session_id": "sess_abc_1",
    }


def test_tracker_swallows_failures(caplog):
    transport = FakeTransport((500, None), (500, None))
    auth = AuthStore(MemoryStorage())
    api = StorefrontApi(build_client("http://api.test", auth, sleep=lambda _: None, transport=transport))

    with caplog.at_level(logging.ERROR):
        assert AnalyticsTracker(api).track_event("VISIT") is False
    assert "Analytics tracking failed" in caplog.text
