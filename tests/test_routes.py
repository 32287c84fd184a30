"""HTTP tests against a temporary SQLite database (see conftest.py)."""

import sqlite3
import uuid

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def _tag():
    # unique marker so tests sharing the database only see their own rows
    return uuid.uuid4().hex[:10]


def _create(client, **fields):
    body = {"username": f"{_tag()}@outlook.com", **fields}
    resp = client.post("/vault/accounts", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_fetch_account(client):
    account = _create(client, platform="@glow", secret_key="gezd gnbv gy3t qojq", notes="iPhone 4")
    assert account["secret_key"] == "GEZDGNBVGY3TQOJQ"
    assert account["has_2fa"] is True

    resp = client.get(f"/vault/accounts/{account['id']}")
    assert resp.status_code == 200
    assert resp.json()["platform"] == "@glow"


def test_username_is_required(client):
    resp = client.post("/vault/accounts", json={"platform": "@nobody"})
    assert resp.status_code == 422


def test_update_account(client):
    account = _create(client, notes="iPhone 1")
    resp = client.put(f"/vault/accounts/{account['id']}", json={"notes": "Redmi #6"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["notes"] == "Redmi #6"
    assert updated["username"] == account["username"]
    assert updated["updated_at"] >= account["updated_at"]


def test_missing_account_is_404(client):
    assert client.get("/vault/accounts/does-not-exist").status_code == 404
    assert client.put("/vault/accounts/does-not-exist", json={"notes": "x"}).status_code == 404
    assert client.delete("/vault/accounts/does-not-exist").status_code == 404
    assert client.get("/vault/accounts/does-not-exist/totp").status_code == 404


def test_delete_account_and_log(client):
    account = _create(client)
    resp = client.delete(f"/vault/accounts/{account['id']}", headers={"X-Operator": "ops@agency"})
    assert resp.status_code == 200
    assert client.get(f"/vault/accounts/{account['id']}").status_code == 404

    logs = client.get("/logs").json()["logs"]
    deleted = [l for l in logs if l["action"] == "DELETE" and l["target"] == f"Vault: {account['username']}"]
    assert deleted and deleted[0]["user"] == "ops@agency"


def test_create_is_logged_with_default_user(client):
    account = _create(client)
    logs = client.get("/logs").json()["logs"]
    created = [l for l in logs if l["action"] == "CREATE" and l["target"] == f"Vault: {account['username']}"]
    assert created and created[0]["user"] == "System"


def test_search_filters_accounts(client):
    tag = _tag()
    _create(client, platform=f"@{tag}.one")
    _create(client, notes=f"redmi {tag}")
    _create(client, platform="@unrelated")

    resp = client.get("/vault/accounts", params={"q": tag.upper()})
    assert resp.json()["total"] == 2


def test_devices_grouped_and_ordered(client):
    tag = _tag()
    _create(client, platform=f"@{tag}", notes=f"Redmi #3 {tag}")
    _create(client, platform=f"@{tag}", notes=f"iPhone 7 {tag}")
    _create(client, platform=f"@{tag}", notes=f"phone 7 {tag}")
    _create(client, platform=f"@{tag}", notes=f"nelson redmi {tag}")
    _create(client, platform=f"@{tag}", notes="not yet logged in")
    _create(client, platform=f"@{tag}", notes="")

    resp = client.get("/vault/devices", params={"q": tag})
    assert resp.status_code == 200
    devices = resp.json()["devices"]
    assert [d["key"] for d in devices] == ["iphone_7", "android_3", "android_7"]
    assert [d["display_name"] for d in devices] == ["iPhone #7", "Android Phone #3", "Android Phone #7"]
    assert len(devices[0]["members"]) == 2
    assert resp.json()["render_hint"]["type"] == "device_board"


def test_totp_endpoint(client):
    valid = _create(client, secret_key=RFC_SECRET)
    body = client.get(f"/vault/accounts/{valid['id']}/totp").json()
    assert body["valid"] is True
    assert len(body["token"]) == 6 and body["token"].isdigit()
    assert 1 <= body["remaining"] <= 30

    invalid = _create(client, secret_key="18181818")
    assert client.get(f"/vault/accounts/{invalid['id']}/totp").json() == {"configured": True, "valid": False}

    none = _create(client)
    assert client.get(f"/vault/accounts/{none['id']}/totp").json() == {"configured": False, "valid": False}


def test_summary(client):
    _create(client, notes="iPhone 9")
    body = client.get("/vault/summary").json()
    assert body["summary"]["accounts"] >= 1
    assert body["summary"]["devices"] >= 1
    types = [h["type"] for h in body["render_hints"]]
    assert "metrics_grid" in types and "device_board" in types


@pytest.mark.parametrize("limit", [0, 5000])
def test_logs_limit_validated(client, limit):
    assert client.get("/logs", params={"limit": limit}).status_code == 422


def test_collage_layouts(client):
    body = client.get("/collage/layouts").json()
    assert {"name": "grid-7", "slots": 7} in body["layouts"]
    assert "16:9" in body["aspect_ratios"]


def test_collage_layout_geometry(client):
    resp = client.get(
        "/collage/layouts/grid-3",
        params={"aspect_ratio": "9:16", "image_width": 1000, "image_height": 1000},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert (body["width"], body["height"]) == (2160, 3840)
    assert body["cells"][0] == {
        "x": 0, "y": 0, "w": 1080, "h": 3840,
        "draw": {"x": -1380, "y": 0, "w": 3840, "h": 3840},
    }
    assert len(body["cells"]) == 3


def test_unknown_collage_layout_is_404(client):
    assert client.get("/collage/layouts/mosaic").status_code == 404


# ── Startup ─────────────────────────────────────────────

def test_demo_mode_is_off_by_default():
    from config import Settings

    assert Settings.model_fields["demo_mode"].default is False


def test_restart_in_demo_mode_keeps_existing_accounts(client, monkeypatch):
    account = _create(client, platform="@keeper", notes="iPhone 2")
    monkeypatch.setattr(settings, "demo_mode", True)
    monkeypatch.setattr(settings, "seed_on_startup", True)

    with TestClient(app) as restarted:
        resp = restarted.get(f"/vault/accounts/{account['id']}")
        assert resp.status_code == 200
        assert resp.json()["platform"] == "@keeper"

        # vault was not empty, so no demo rows were added on top
        assert restarted.get("/vault/accounts", params={"q": "glowhaus"}).json()["total"] == 0

        logs = restarted.get("/logs", params={"limit": 1000}).json()["logs"]
        assert any(l["target"] == f"Vault: {account['username']}" for l in logs)


def test_startup_schema_has_indexes(client, test_db_dir):
    with TestClient(app):
        pass  # second startup runs create_tables against the existing schema

    conn = sqlite3.connect(test_db_dir / "test.db")
    try:
        names = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='index'")}
    finally:
        conn.close()
    assert {
        "ix_vault_accounts_updated_at",
        "ix_activity_logs_timestamp",
        "ix_creators_last_updated",
        "ix_brand_products_last_updated",
    } <= names


def test_database_lives_in_session_temp_dir(test_db_dir):
    assert test_db_dir.is_dir()
    assert str(test_db_dir / "test.db") in settings.database_url
