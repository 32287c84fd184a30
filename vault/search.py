"""Free-text search over vault records."""


def matches_search(record, term: str | None) -> bool:
    """Case-insensitive substring match against handle, username and notes.

    Works with both CredentialRecord (``platform_handle``) and VaultAccount
    rows (``platform``).
    """
    needle = (term or "").strip().lower()
    if not needle:
        return True

    handle = getattr(record, "platform_handle", None)
    if handle is None:
        handle = getattr(record, "platform", "")
    haystacks = (handle, getattr(record, "username", ""), getattr(record, "notes", ""))
    return any(needle in (value or "").lower() for value in haystacks)


def filter_records(records: list, term: str | None) -> list:
    return [r for r in records if matches_search(r, term)]
