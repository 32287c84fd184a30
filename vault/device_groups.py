"""Device grouping: infer which phone each vault account lives on.

Operators note the phone an account is logged in on as free text ("iPhone 7",
"Redmi #8", "Nelson's phone"). There is no structured device field, so this
module parses the notes into best-effort device buckets for the vault's
device board. Unparseable notes fall through to fallback buckets instead of
being rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "not yet logged in"
ANDROID_MARKERS = ("redmi", "android")

# "iphone 7", "phone #3", "device 12", "#8", "# #4"
DEVICE_NUMBER_PATTERN = re.compile(r"(iphone|phone|device|#)\s*#?\s*(\d+)", re.IGNORECASE)

ANDROID_SORT_BASE = 1000  # Android buckets sort after the iOS range 1-999
MISC_SORT_BASE = 2000  # Unnumbered Android buckets sort after every numbered one
IOS_FALLBACK_NUMBER = 1

# Legacy fixed mappings for phones that were never labelled with a number.
# Origin unknown; kept verbatim until product confirms what they stand for.
LEGACY_ANDROID_KEYWORDS = [
    (("nelson",), 7),
    (("tiktok", "redmi"), 8),
]


class DeviceKind(str, Enum):
    IOS = "ios"
    ANDROID = "android"


@dataclass
class CredentialRecord:
    id: str
    platform_handle: str = ""
    username: str = ""
    notes: str = ""
    updated_at: datetime | None = None

    @classmethod
    def from_account(cls, account) -> "CredentialRecord":
        """Build a record from a stored VaultAccount row."""
        return cls(
            id=str(account.id),
            platform_handle=account.platform or "",
            username=account.username or "",
            notes=account.notes or "",
            updated_at=account.updated_at,
        )


@dataclass
class DeviceGroup:
    key: str
    display_name: str
    kind: DeviceKind
    sort_order: int
    members: list[CredentialRecord] = field(default_factory=list)


def normalize_notes(notes: str | None) -> str:
    return (notes or "").strip().lower()


def is_excluded(notes: str | None) -> bool:
    """Accounts without notes, or not logged in anywhere yet, have no device."""
    text = normalize_notes(notes)
    return not text or NOT_LOGGED_IN in text


def extract_device_number(notes: str | None) -> int | None:
    match = DEVICE_NUMBER_PATTERN.search(notes or "")
    if match is None:
        return None
    return int(match.group(2))


def _epoch_millis(value: datetime | None) -> int:
    if value is None:
        return 0
    if value.tzinfo is None:
        # SQLite hands back naive datetimes; they are stored as UTC
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def _legacy_android_number(text: str) -> int | None:
    for keywords, number in LEGACY_ANDROID_KEYWORDS:
        if all(kw in text for kw in keywords):
            return number
    return None


def classify_record(record: CredentialRecord) -> tuple[str, DeviceKind, int] | None:
    """Return (key, kind, sort_order) for a record, or None if it has no device."""
    if is_excluded(record.notes):
        return None

    text = normalize_notes(record.notes)
    number = extract_device_number(text)

    if any(marker in text for marker in ANDROID_MARKERS):
        if number is None:
            number = _legacy_android_number(text)
        if number is not None:
            return f"android_{number}", DeviceKind.ANDROID, ANDROID_SORT_BASE + number
        # One bucket per unmatched account, newest last
        sort_order = MISC_SORT_BASE + _epoch_millis(record.updated_at)
        return f"android_misc_{record.id}", DeviceKind.ANDROID, sort_order

    if number is None:
        number = IOS_FALLBACK_NUMBER
    return f"iphone_{number}", DeviceKind.IOS, number


def display_name_for(key: str, kind: DeviceKind) -> str:
    if kind == DeviceKind.IOS:
        return f"iPhone #{key.rsplit('_', 1)[-1]}"
    if key.startswith("android_misc_"):
        return "Android Device"
    return f"Android Phone #{key.rsplit('_', 1)[-1]}"


def group_by_device(records: list[CredentialRecord]) -> list[DeviceGroup]:
    """Group records into device buckets, ordered iOS first, then Android, then misc.

    Records sharing a key (same phone, several accounts) are merged in input
    order. Excluded records appear in no group.
    """
    groups: dict[str, DeviceGroup] = {}
    skipped = 0

    for record in records:
        classified = classify_record(record)
        if classified is None:
            skipped += 1
            continue
        key, kind, sort_order = classified
        group = groups.get(key)
        if group is None:
            group = DeviceGroup(
                key=key,
                display_name=display_name_for(key, kind),
                kind=kind,
                sort_order=sort_order,
            )
            groups[key] = group
        group.members.append(record)

    logger.debug("Grouped %d records into %d devices (%d skipped)", len(records) - skipped, len(groups), skipped)
    return sorted(groups.values(), key=lambda g: (g.sort_order, g.key))
