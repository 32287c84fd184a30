"""Account vault package: device grouping, search, 2FA codes and persistence."""

from vault.device_groups import (
    CredentialRecord,
    DeviceGroup,
    DeviceKind,
    classify_record,
    display_name_for,
    group_by_device,
)
from vault.search import filter_records, matches_search
from vault.totp import TotpCode, clean_secret, current_code

__all__ = [
    "CredentialRecord",
    "DeviceGroup",
    "DeviceKind",
    "classify_record",
    "display_name_for",
    "group_by_device",
    "filter_records",
    "matches_search",
    "TotpCode",
    "clean_secret",
    "current_code",
]
