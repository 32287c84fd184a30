"""Render hints builder for the vault dashboard.

Converts vault data structures into render_hints dicts that the frontend
renderer can draw directly (device board, metric tiles, activity feed)
without any further logic on the client.
"""

from __future__ import annotations

from vault.device_groups import DeviceGroup


def build_device_board_hint(groups: list[DeviceGroup]) -> dict:
    """Build a device_board render hint: one phone per group, one app per account."""
    devices = []
    for group in groups:
        devices.append({
            "key": group.key,
            "name": group.display_name,
            "kind": group.kind.value,
            "apps": [
                {
                    "id": m.id,
                    "label": m.platform_handle or m.username or "Unknown",
                    "username": m.username,
                }
                for m in group.members
            ],
        })

    return {
        "type": "device_board",
        "title": "Devices",
        "devices": devices,
    }


def build_vault_metrics_hint(summary: dict) -> dict:
    """Build a metrics_grid render hint from vault counts."""
    total = summary.get("accounts", 0)
    with_2fa = summary.get("with_2fa", 0)
    metrics = [
        {"label": "Accounts", "value": str(total)},
        {"label": "Devices", "value": str(summary.get("devices", 0))},
        {
            "label": "2FA Enabled",
            "value": str(with_2fa),
            "change": f"{(with_2fa / total * 100) if total else 0:.0f}% of accounts",
        },
    ]

    unassigned = summary.get("unassigned", 0)
    if unassigned:
        metrics.append({
            "label": "No Device",
            "value": str(unassigned),
            "trend": "down",
        })

    return {
        "type": "metrics_grid",
        "title": "Vault",
        "metrics": metrics,
    }


def build_activity_hint(logs: list[dict]) -> dict:
    """Build an activity_feed render hint from serialized log entries."""
    return {
        "type": "activity_feed",
        "title": "Recent Activity",
        "items": [
            {
                "action": log.get("action", ""),
                "target": log.get("target", ""),
                "user": log.get("user", ""),
                "timestamp": log.get("timestamp"),
            }
            for log in logs[:20]  # Feed widget shows the latest 20
        ],
    }


def build_vault_dashboard_hints(
    summary: dict | None = None,
    groups: list[DeviceGroup] | None = None,
    logs: list[dict] | None = None,
) -> list[dict]:
    """Build a complete set of render hints for the vault view."""
    hints = []

    if summary:
        hints.append(build_vault_metrics_hint(summary))

    if groups:
        hints.append(build_device_board_hint(groups))

    if logs:
        hints.append(build_activity_hint(logs))

    return hints
