"""Brand product persistence."""

import logging
from datetime import datetime, timezone

from sqlalchemy import desc, select

from activity import add_log
from brands.catalog import cover_image, normalize_shop_link
from db import async_session
from models import BrandProduct

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "brand", "description", "shop_link", "image_url", "images")


def _clean(data: dict, current: BrandProduct | None = None) -> dict:
    values = {name: data[name] for name in EDITABLE_FIELDS if name in data and data[name] is not None}
    if "shop_link" in values:
        values["shop_link"] = normalize_shop_link(values["shop_link"])
    if "image_url" in values or "images" in values:
        images = values.get("images", current.images if current is not None else [])
        image_url = values.get("image_url", current.image_url if current is not None else "")
        values["image_url"] = cover_image(image_url, images)
    return values


async def list_products() -> list[BrandProduct]:
    """All products, most recently updated first."""
    async with async_session() as session:
        result = await session.execute(
            select(BrandProduct).order_by(desc(BrandProduct.last_updated))
        )
        return list(result.scalars().all())


async def get_product(product_id: str) -> BrandProduct | None:
    async with async_session() as session:
        return await session.get(BrandProduct, product_id)


async def save_product(data: dict, product_id: str | None = None, user: str | None = None) -> BrandProduct | None:
    """Create a product, or update ``product_id`` in place. None when it does not exist."""
    now = datetime.now(timezone.utc)

    try:
        async with async_session() as session:
            if product_id:
                product = await session.get(BrandProduct, product_id)
                if product is None:
                    return None
                for name, value in _clean(data, product).items():
                    setattr(product, name, value)
                product.last_updated = now
                action = "UPDATE"
            else:
                values = _clean({"image_url": "", "images": [], **data})
                product = BrandProduct(**values, last_updated=now)
                session.add(product)
                action = "CREATE"
            await session.commit()
            await session.refresh(product)
    except Exception as e:
        logger.error("Error saving brand product %s: %s", product_id or "(new)", e)
        raise

    await add_log(action, f"Product: {product.name}", user)
    return product


async def delete_product(product_id: str, user: str | None = None) -> bool:
    try:
        async with async_session() as session:
            product = await session.get(BrandProduct, product_id)
            if product is None:
                return False
            name = product.name
            await session.delete(product)
            await session.commit()
    except Exception as e:
        logger.error("Error deleting brand product %s: %s", product_id, e)
        raise

    await add_log("DELETE", f"Product: {name}", user)
    return True
