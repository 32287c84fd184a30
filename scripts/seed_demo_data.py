#!/usr/bin/env python3
"""
Demo data seeding script for the account vault.

Fills the vault with accounts spread over a handful of phones so the device
board has something to show:
- iPhones labelled by number ("iPhone 3", "phone #5")
- numbered Redmi/Android phones
- the legacy unlabelled phones ("Nelson's phone", TikTok Redmi)
- accounts not logged in anywhere yet

It also adds a small creator roster and a few products per brand.

Run with: python scripts/seed_demo_data.py
"""

import asyncio
import random
from datetime import datetime, timedelta, timezone
from pathlib import Path

from sqlalchemy import delete, func, select

# Add parent dir to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from brands.catalog import cover_image, normalize_shop_link
from db import async_session, create_tables
from models import ActivityLog, BrandProduct, Creator, VaultAccount


# ============================================================================
# Configuration
# ============================================================================

DEMO_DAYS = 14
END_DATE = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
START_DATE = END_DATE - timedelta(days=DEMO_DAYS)

# (handle, notes, has_2fa)
DEMO_ACCOUNTS = [
    ("@glowhaus.daily", "iPhone 1", True),
    ("@glowhaus.deals", "iphone 1 - main feed", True),
    ("@cozycurtain.co", "iPhone 3", False),
    ("@xmas.curtain.shop", "phone #3 backup", True),
    ("@tee.drop.studio", "iPhone 5", True),
    ("@maikalian.finds", "Redmi #2", True),
    ("@maikalian.live", "redmi device 2", False),
    ("@homecozy.picks", "Android phone 4", True),
    ("@nelson.unboxing", "Nelson's phone", False),
    ("@shop.tiktok.redmi", "TikTok redmi", True),
    ("@gadget.rush", "old android, screen cracked", False),
    ("@deal.hunter.ph", "ipad in the office", False),
    ("@fresh.account.01", "not yet logged in", False),
    ("@fresh.account.02", "", True),
]

# RFC 6238 test secret; demo only
DEMO_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"

# (name, handle, niche, category, avg views, likes, comments, shares, videos)
DEMO_CREATORS = [
    ("Ana Reyes", "@ana.cozyhome", "Home decor", "Xmas Curtain", 48000, 3900, 210, 640, 12),
    ("Marco Villa", "@marco.teeshop", "Streetwear", "Tshirt", 22000, 1500, 95, 180, 8),
    ("Lia Santos", "@lia.glowup", "Beauty", "Maikalian", 91000, 8700, 530, 1200, 21),
    ("Jun Cruz", "@jun.gadgets", "Tech", "Other", 0, 0, 0, 0, 0),
]

# (name, brand, description, shop link, image count)
DEMO_PRODUCTS = [
    ("Velvet Star Curtain", "Xmas Curtain", "Blackout curtain with star lights", "shop.example.com/velvet-star", 3),
    ("Snowfall Tassel Curtain", "Xmas Curtain", "Sheer panel, 2 pack", "https://shop.example.com/snowfall", 2),
    ("Oversized Logo Tee", "Tshirt", "Heavyweight cotton, unisex", "shop.example.com/logo-tee", 4),
    ("Rose Glow Serum", "Maikalian", "Brightening serum, 30ml", "https://shop.example.com/rose-glow", 1),
]


# ============================================================================
# Helper Functions
# ============================================================================

def random_datetime(start: datetime, end: datetime) -> datetime:
    """Random datetime between start and end (timezone-aware)."""
    delta = end - start
    random_seconds = random.randint(0, int(delta.total_seconds()))
    return start + timedelta(seconds=random_seconds)


def demo_email(handle: str) -> str:
    return f"{handle.lstrip('@').replace('.', '_')}@outlook.com"


# ============================================================================
# Seeders
# ============================================================================

async def seed_vault_accounts(session) -> int:
    print("Seeding vault accounts...")
    for handle, notes, has_2fa in DEMO_ACCOUNTS:
        created = random_datetime(START_DATE, END_DATE - timedelta(days=1))
        session.add(VaultAccount(
            platform=handle,
            username=demo_email(handle),
            password=f"Demo!{random.randint(1000, 9999)}",
            email_password=f"Mail!{random.randint(1000, 9999)}",
            secret_key=DEMO_SECRET if has_2fa else "",
            notes=notes,
            created_at=created,
            updated_at=random_datetime(created, END_DATE),
        ))
        session.add(ActivityLog(
            action="CREATE",
            target=f"Vault: {demo_email(handle)}",
            user="demo@seed",
            timestamp=created,
        ))
    await session.commit()
    return len(DEMO_ACCOUNTS)


async def seed_creators(session) -> int:
    print("Seeding creators...")
    for name, handle, niche, category, views, likes, comments, shares, videos in DEMO_CREATORS:
        session.add(Creator(
            name=name,
            username=handle,
            niche=niche,
            product_category=category,
            email=demo_email(handle),
            phone=f"+63 9{random.randint(100000000, 999999999)}",
            avg_views=views,
            avg_likes=likes,
            avg_comments=comments,
            avg_shares=shares,
            videos_count=videos,
            last_updated=random_datetime(START_DATE, END_DATE),
        ))
    await session.commit()
    return len(DEMO_CREATORS)


async def seed_brand_products(session) -> int:
    print("Seeding brand products...")
    for name, brand, description, link, image_count in DEMO_PRODUCTS:
        slug = link.rsplit("/", 1)[-1]
        images = [f"https://picsum.photos/seed/{slug}-{i}/800/800" for i in range(image_count)]
        session.add(BrandProduct(
            name=name,
            brand=brand,
            description=description,
            shop_link=normalize_shop_link(link),
            image_url=cover_image("", images),
            images=images,
            last_updated=random_datetime(START_DATE, END_DATE),
        ))
    await session.commit()
    return len(DEMO_PRODUCTS)


async def seed_demo_data(clear_existing: bool = False, verbose: bool = False) -> bool:
    """
    Seed demo vault accounts, creators and brand products. Safe to call from main.py startup.

    Args:
        clear_existing: If True, wipe vault, creator, product and log rows first.
            If False, seeding is skipped when the vault already holds accounts.
        verbose: If True, print detailed progress messages

    Returns:
        True if demo rows were written.
    """
    import logging
    logger = logging.getLogger(__name__)

    if verbose:
        print("=" * 70)
        print("Account Vault Demo Data Seeder")
        print("=" * 70)

    await create_tables()

    async with async_session() as session:
        if clear_existing:
            logger.info("Clearing existing demo data...")
            for model in (VaultAccount, Creator, BrandProduct, ActivityLog):
                await session.execute(delete(model))
            await session.commit()
        else:
            existing = await session.scalar(select(func.count()).select_from(VaultAccount))
            if existing:
                logger.info("Vault already holds %d accounts - skipping demo seed", existing)
                return False

        count = await seed_vault_accounts(session)
        logger.info("Seeded %d vault accounts", count)
        count = await seed_creators(session)
        logger.info("Seeded %d creators", count)
        count = await seed_brand_products(session)
        logger.info("Seeded %d brand products", count)

    if verbose:
        print("\n" + "=" * 70)
        print("Demo data seeding complete!")
        print("=" * 70)
        print("\nNext steps:")
        print("1. Start the system: python main.py")
        print("2. Open the device board: http://localhost:8001/vault/devices")
        print()
    return True


async def main():
    """CLI entry point for manual seeding."""
    await seed_demo_data(clear_existing=True, verbose=True)


if __name__ == "__main__":
    asyncio.run(main())
