"""Activity log: audit trail of operator actions across the dashboard."""

import logging

from sqlalchemy import desc, select

from config import settings
from db import async_session
from models import ActivityLog

logger = logging.getLogger(__name__)

ACTIONS = ("CREATE", "UPDATE", "DELETE", "LOGIN", "LOGOUT", "IMPORT")


async def add_log(action: str, target: str, user: str | None = None) -> None:
    """Record an action. Failures are logged and dropped so they never break the write they describe."""
    if action not in ACTIONS:
        logger.warning("Unknown activity action %r for %s", action, target)
        return
    try:
        async with async_session() as session:
            session.add(ActivityLog(action=action, target=target, user=user or settings.activity_user))
            await session.commit()
    except Exception as e:
        logger.warning("Failed to add activity log (%s %s): %s", action, target, e)


async def list_logs(limit: int | None = None) -> list[ActivityLog]:
    limit = limit or settings.activity_log_limit
    async with async_session() as session:
        result = await session.execute(
            select(ActivityLog).order_by(desc(ActivityLog.timestamp), desc(ActivityLog.id)).limit(limit)
        )
        return list(result.scalars().all())
