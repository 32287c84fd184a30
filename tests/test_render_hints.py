from render_hints import (
    build_activity_hint,
    build_device_board_hint,
    build_vault_dashboard_hints,
    build_vault_metrics_hint,
)
from vault.device_groups import CredentialRecord, group_by_device


def _groups():
    return group_by_device([
        CredentialRecord(id="a", platform_handle="@glow", username="glow@x.com", notes="iPhone 2"),
        CredentialRecord(id="b", platform_handle="", username="deals@x.com", notes="phone 2"),
        CredentialRecord(id="c", platform_handle="@tee", username="tee@x.com", notes="Redmi #4"),
    ])


def test_device_board_one_device_per_group_one_app_per_member():
    hint = build_device_board_hint(_groups())
    assert hint["type"] == "device_board"
    assert [d["name"] for d in hint["devices"]] == ["iPhone #2", "Android Phone #4"]
    assert [d["kind"] for d in hint["devices"]] == ["ios", "android"]
    # blank handle falls back to the email
    assert [a["label"] for a in hint["devices"][0]["apps"]] == ["@glow", "deals@x.com"]


def test_vault_metrics_hint():
    hint = build_vault_metrics_hint({"accounts": 4, "with_2fa": 1, "devices": 2, "unassigned": 1})
    labels = {m["label"]: m for m in hint["metrics"]}
    assert labels["Accounts"]["value"] == "4"
    assert labels["2FA Enabled"]["change"] == "25% of accounts"
    assert labels["No Device"]["value"] == "1"


def test_vault_metrics_hint_empty_vault():
    hint = build_vault_metrics_hint({})
    labels = [m["label"] for m in hint["metrics"]]
    assert "No Device" not in labels
    assert hint["metrics"][2]["change"] == "0% of accounts"


def test_activity_hint_caps_items():
    logs = [{"action": "CREATE", "target": f"Vault: {i}", "user": "System", "timestamp": None} for i in range(30)]
    assert len(build_activity_hint(logs)["items"]) == 20


def test_dashboard_hints_skip_empty_sections():
    assert build_vault_dashboard_hints() == []
    hints = build_vault_dashboard_hints(summary={"accounts": 1}, groups=_groups(), logs=[])
    assert [h["type"] for h in hints] == ["metrics_grid", "device_board"]
