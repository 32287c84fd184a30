"""Vault persistence: create, update and delete stored credentials."""

import logging
from datetime import datetime, timezone

from sqlalchemy import desc, select

from activity import add_log
from db import async_session
from models import VaultAccount
from vault.totp import clean_secret

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("platform", "username", "password", "email_password", "secret_key", "notes")


def _clean(data: dict) -> dict:
    values = {name: (data.get(name) or "") for name in EDITABLE_FIELDS if name in data}
    if "secret_key" in values:
        values["secret_key"] = clean_secret(values["secret_key"])
    return values


async def list_accounts() -> list[VaultAccount]:
    """All accounts, most recently updated first."""
    async with async_session() as session:
        result = await session.execute(
            select(VaultAccount).order_by(desc(VaultAccount.updated_at))
        )
        return list(result.scalars().all())


async def get_account(account_id: str) -> VaultAccount | None:
    async with async_session() as session:
        return await session.get(VaultAccount, account_id)


async def save_account(data: dict, account_id: str | None = None, user: str | None = None) -> VaultAccount | None:
    """Create an account, or update ``account_id`` in place.

    Returns the saved row, or None when ``account_id`` does not exist.
    """
    values = _clean(data)
    now = datetime.now(timezone.utc)

    try:
        async with async_session() as session:
            if account_id:
                account = await session.get(VaultAccount, account_id)
                if account is None:
                    return None
                for name, value in values.items():
                    setattr(account, name, value)
                account.updated_at = now
                action = "UPDATE"
            else:
                account = VaultAccount(**values, created_at=now, updated_at=now)
                session.add(account)
                action = "CREATE"
            await session.commit()
            await session.refresh(account)
    except Exception as e:
        logger.error("Error saving vault account %s: %s", account_id or "(new)", e)
        raise

    await add_log(action, f"Vault: {account.username}", user)
    return account


async def delete_account(account_id: str, user: str | None = None) -> bool:
    try:
        async with async_session() as session:
            account = await session.get(VaultAccount, account_id)
            if account is None:
                return False
            username = account.username
            await session.delete(account)
            await session.commit()
    except Exception as e:
        logger.error("Error deleting vault account %s: %s", account_id, e)
        raise

    await add_log("DELETE", f"Vault: {username}", user)
    return True
