"""Creator persistence."""

import logging
from datetime import datetime, timezone

from sqlalchemy import desc, select

from activity import add_log
from db import async_session
from models import Creator

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    "name", "username", "niche", "product_category", "email", "phone", "video_link",
    "avg_views", "avg_likes", "avg_comments", "avg_shares", "videos_count",
)


def _clean(data: dict) -> dict:
    values = {name: data[name] for name in EDITABLE_FIELDS if name in data}
    if "video_link" in values:
        # an emptied link field clears the link
        values["video_link"] = (values["video_link"] or "").strip() or None
    return values


async def list_creators() -> list[Creator]:
    """All creators, most recently updated first."""
    async with async_session() as session:
        result = await session.execute(
            select(Creator).order_by(desc(Creator.last_updated))
        )
        return list(result.scalars().all())


async def get_creator(creator_id: str) -> Creator | None:
    async with async_session() as session:
        return await session.get(Creator, creator_id)


async def save_creator(data: dict, creator_id: str | None = None, user: str | None = None) -> Creator | None:
    """Create a creator, or update ``creator_id`` in place. None when it does not exist."""
    values = _clean(data)
    now = datetime.now(timezone.utc)

    try:
        async with async_session() as session:
            if creator_id:
                creator = await session.get(Creator, creator_id)
                if creator is None:
                    return None
                for name, value in values.items():
                    setattr(creator, name, value)
                creator.last_updated = now
                action = "UPDATE"
            else:
                creator = Creator(**values, last_updated=now)
                session.add(creator)
                action = "CREATE"
            await session.commit()
            await session.refresh(creator)
    except Exception as e:
        logger.error("Error saving creator %s: %s", creator_id or "(new)", e)
        raise

    await add_log(action, f"Creator: {creator.name}", user)
    return creator


async def delete_creator(creator_id: str, user: str | None = None) -> bool:
    try:
        async with async_session() as session:
            creator = await session.get(Creator, creator_id)
            if creator is None:
                return False
            name = creator.name
            await session.delete(creator)
            await session.commit()
    except Exception as e:
        logger.error("Error deleting creator %s: %s", creator_id, e)
        raise

    await add_log("DELETE", f"Creator: {name}", user)
    return True
