"""SQLAlchemy models: vault credentials, creators, brand products and the activity log."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    pass


class VaultAccount(Base):
    """Login details for one social-media account.

    ``platform`` holds the account handle (shown as "Username" in the UI) and
    ``username`` holds the login email. The naming follows the stored
    documents this table was imported from.
    """

    __tablename__ = "vault_accounts"

    id = Column(String(32), primary_key=True, default=_new_id)
    platform = Column(String(256), nullable=False, default="")  # handle, e.g. @shop_daily
    username = Column(String(256), nullable=False)  # login email
    password = Column(Text, nullable=False, default="")
    email_password = Column(Text, nullable=False, default="")
    secret_key = Column(String(128), nullable=False, default="")  # Base32 TOTP secret
    notes = Column(Text, nullable=False, default="")  # free text, may name the phone
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False, index=True)


class ActivityLog(Base):
    """Audit trail of operator actions."""

    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    action = Column(String(16), nullable=False, index=True)  # CREATE / UPDATE / DELETE / LOGIN / LOGOUT / IMPORT
    target = Column(Text, nullable=False)
    user = Column(String(128), nullable=False, default="System")
    timestamp = Column(DateTime, default=_utcnow, nullable=False, index=True)


class Creator(Base):
    """A creator on the roster, with their rolling per-video averages."""

    __tablename__ = "creators"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(256), nullable=False)
    username = Column(String(256), nullable=False, default="")  # platform handle
    niche = Column(String(128), nullable=False, default="")
    product_category = Column(String(64), nullable=False, default="Other")
    email = Column(String(256), nullable=False, default="")
    phone = Column(String(64), nullable=False, default="")
    video_link = Column(Text, nullable=True)
    avg_views = Column(Integer, nullable=False, default=0)
    avg_likes = Column(Integer, nullable=False, default=0)
    avg_comments = Column(Integer, nullable=False, default=0)
    avg_shares = Column(Integer, nullable=False, default=0)
    videos_count = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime, default=_utcnow, nullable=False, index=True)


class BrandProduct(Base):
    """A product in a brand's catalogue, with its shop link and gallery."""

    __tablename__ = "brand_products"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(256), nullable=False)
    brand = Column(String(64), nullable=False, default="Other")
    description = Column(Text, nullable=False, default="")
    shop_link = Column(Text, nullable=False, default="")
    image_url = Column(Text, nullable=False, default="")  # cover image
    images = Column(JSON, nullable=False, default=list)
    last_updated = Column(DateTime, default=_utcnow, nullable=False, index=True)
